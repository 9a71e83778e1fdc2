"""Main parser module that orchestrates the page-to-Markdown pipeline."""

import asyncio
import logging

from getmd.config import Settings
from getmd.exceptions import SelectorError
from getmd.logger import logger
from getmd.parser.extractor import ExtractionResult, Extractor
from getmd.parser.markdown_generator import MarkdownGenerator
from getmd.parser.protocols import ProgressReporter
from getmd.parser.selector import CssSelectorFilter
from getmd.postprocess import compact_markdown, resolve_markdown_urls
from getmd.timing import timeit, timer


class Parser:
    """Coordinates page rendering, element selection and Markdown conversion.

    Pipeline: URL -> rendered HTML -> selected fragments -> Markdown
    -> table compaction -> link resolution.
    """

    def __init__(self, settings: Settings, progress: ProgressReporter) -> None:
        """Initialize the parser with settings.

        Args:
            settings: Application settings containing all configuration.
            progress: Receives stage updates while the pipeline runs.

        """
        self._settings = settings
        self._progress = progress
        self._extractor = Extractor(settings)
        self._selector = CssSelectorFilter(settings)
        self._markdown_generator = MarkdownGenerator(settings)

    async def start(self) -> None:
        """Launch the browser used by the extractor."""
        self._progress.spinner("Launching browser...")
        await self._extractor.start()
        self._progress.finish("Browser launched")

    async def close(self) -> None:
        """Close the extractor's browser."""
        await self._extractor.close()

    @timeit("Page conversion", logging.DEBUG)
    async def fetch_markdown(self, url: str, selectors: list[str]) -> str:
        """Render a page and convert the selected elements to Markdown.

        Args:
            url: URL of the page.
            selectors: CSS selectors of the elements to convert. Empty means
                the configured default selector.

        Returns:
            Markdown for all selected elements, one section per selector.

        Raises:
            SelectorError: If no selector matched any element.

        """
        extraction = await self._load_page(url)

        self._progress.spinner("Extracting HTML elements...")
        logger.debug("[SELECTION STARTED] for %s", extraction.url)
        fragments = await asyncio.to_thread(
            self._selector.select, extraction.html, selectors, self._report_selector
        )
        self._progress.finish_and_clear()
        if not fragments:
            raise SelectorError("No elements matched the specified selectors")

        self._progress.spinner("Converting to Markdown...")
        logger.debug("[MARKDOWN GENERATION STARTED] for %s", extraction.url)
        markdown = await asyncio.to_thread(self._convert, fragments, extraction.url)
        self._progress.finish("Converted to Markdown")
        return markdown

    def postprocess(self, markdown: str, base_url: str) -> str:
        """Apply the enabled Markdown post-processing steps.

        Args:
            markdown: Markdown produced by the converter.
            base_url: URL the page was loaded from.

        Returns:
            Compacted Markdown with resolved link destinations.

        """
        if self._settings.markdown_compact_tables:
            with timer("Table compaction"):
                markdown = compact_markdown(markdown)
        if self._settings.markdown_resolve_urls:
            with timer("Link resolution"):
                markdown = resolve_markdown_urls(markdown, base_url)
        return markdown

    async def _load_page(self, url: str) -> ExtractionResult:
        message = f"Loading page: {url}"
        if self._settings.browser_wait > 0:
            message += f" (waiting {self._settings.browser_wait}s for JS rendering)"
        self._progress.spinner(message)
        extraction = await self._extractor.extract_html(url)
        self._progress.finish("Page loaded")
        return extraction

    def _report_selector(self, selector: str) -> None:
        self._progress.set_message(f"Extracting selector '{selector}'...")

    def _convert(self, fragments: list[str], base_url: str) -> str:
        parts = [self._markdown_generator.convert(fragment) for fragment in fragments]
        markdown = self._settings.markdown_fragment_separator.join(parts)
        if not markdown.strip():
            logger.warning("Markdown conversion produced no content")
        return self.postprocess(markdown, base_url)
