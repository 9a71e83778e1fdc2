"""Parser package for rendering pages and converting them to Markdown.

This package provides a pipeline for loading a page in a browser,
selecting elements and converting them to compact Markdown.
"""

from getmd.exceptions import SelectorError
from getmd.parser.extractor import ExtractionResult, Extractor
from getmd.parser.markdown_generator import MarkdownGenerator
from getmd.parser.parser import Parser
from getmd.parser.protocols import ProgressReporter
from getmd.parser.selector import CssSelectorFilter

__all__ = [
    "CssSelectorFilter",
    "ExtractionResult",
    "Extractor",
    "MarkdownGenerator",
    "Parser",
    "ProgressReporter",
    "SelectorError",
]
