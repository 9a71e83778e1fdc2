"""get-md custom exceptions."""

class GetMDError(Exception):
    """Base exception for all get-md errors."""


class BrowserError(GetMDError):
    """Errors while launching or controlling the browser."""


class ParserError(GetMDError):
    """Errors while turning a page into Markdown."""


class ExtractorError(ParserError):
    """Errors while extracting rendered HTML."""


class Crawl4AIError(ExtractorError):
    """Errors from the Crawl4AI library during extraction."""


class SelectorError(ParserError):
    """Errors while selecting elements with CSS selectors."""


class MarkdownGeneratorError(ParserError):
    """Errors while generating Markdown output."""


class OutputError(GetMDError):
    """Errors while writing the Markdown output."""
