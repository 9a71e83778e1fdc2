"""Markdown generation module using Crawl4ai."""

from bs4 import BeautifulSoup
from crawl4ai import DefaultMarkdownGenerator

from getmd.config import Settings
from getmd.exceptions import MarkdownGeneratorError


class MarkdownGenerator:
    """Converts HTML fragments to Markdown using Crawl4AI."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the markdown generator with settings.

        Args:
            settings: Application settings containing markdown generation configuration.

        """
        self._settings = settings

    def convert(self, html: str) -> str:
        """Convert an HTML fragment to Markdown.

        Script, style and other non-content tags are removed first. Links and
        images are kept as written so they can be resolved afterwards.

        Args:
            html: HTML content to convert to Markdown.

        Returns:
            String containing Markdown content (may be empty).

        Raises:
            MarkdownGeneratorError: If MD generation failed.

        """
        markdown_generator = DefaultMarkdownGenerator(
            options={
                "ignore_images": False,
                "ignore_links": False,
                "escape_html": self._settings.markdown_escape_html,
                "body_width": self._settings.markdown_body_width,
            },
        )

        try:
            result = markdown_generator.generate_markdown(
                input_html=self._strip_skipped_tags(html),
                citations=False,
            )
        except Exception as e:
            raise MarkdownGeneratorError(f"Failed to convert HTML to Markdown: {e}") from e

        return str(result.raw_markdown or "")

    def _strip_skipped_tags(self, html: str) -> str:
        """Remove configured tags (script, style, svg, ...) with their content.

        Returns:
            HTML without the skipped tags.

        """
        skip_tags = self._settings.skip_tags
        if not skip_tags:
            return html

        soup = BeautifulSoup(html, "html.parser")
        for element in soup.find_all(skip_tags):
            element.decompose()
        return str(soup)
