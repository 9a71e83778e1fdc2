"""Rendered HTML extraction using Crawl4ai."""

import asyncio
from typing import NamedTuple

from crawl4ai import AsyncWebCrawler, BrowserConfig, CacheMode, CrawlerRunConfig

from getmd.config import Settings
from getmd.exceptions import BrowserError, Crawl4AIError, ExtractorError
from getmd.logger import logger


class ExtractionResult(NamedTuple):
    """Result of HTML extraction."""

    html: str
    url: str


def crawl_deadline(settings: Settings) -> float:
    """Return the overall deadline in seconds for a single page crawl.

    The page load timeout covers navigation only, so the rendering wait and
    a buffer for browser shutdown are added on top.
    """
    return float(settings.browser_timeout + settings.browser_wait + settings.browser_idle_buffer)


class Extractor:
    """Loads a page in a headless browser and returns its rendered HTML."""

    def __init__(self, settings: Settings) -> None:
        """Initialize the extractor with settings.

        Args:
            settings: Application settings containing browser configuration.

        """
        self._settings = settings
        self._crawler: AsyncWebCrawler | None = None

    async def start(self) -> None:
        """Launch the browser.

        Raises:
            BrowserError: If the browser could not be started.

        """
        logger.debug(
            "Launching browser (channel=%s, headless=%s)",
            self._settings.browser_channel,
            self._settings.browser_headless,
        )

        browser_config = BrowserConfig(
            browser_type="chromium",
            chrome_channel=self._settings.browser_channel,
            headless=self._settings.browser_headless,
            viewport_width=self._settings.browser_viewport_width,
            viewport_height=self._settings.browser_viewport_height,
            verbose=False,
        )

        crawler = AsyncWebCrawler(config=browser_config)
        try:
            await crawler.start()
        except Exception as e:
            raise BrowserError(
                f"Failed to launch browser. Make sure Chromium is installed "
                f"(run 'playwright install chromium'): {e}"
            ) from e
        self._crawler = crawler
        logger.debug("Browser launched.")

    async def close(self) -> None:
        """Close the browser if it is running."""
        if self._crawler is None:
            return
        logger.debug("Closing browser...")
        await self._crawler.close()
        self._crawler = None

    async def extract_html(self, url: str) -> ExtractionResult:
        """Navigate to a URL and return the rendered HTML.

        Args:
            url: URL of the page to load.

        Returns:
            ExtractionResult(NamedTuple) with the page HTML and its final URL.

        Raises:
            ExtractorError: If the browser is not running, the page load timed
                out or no HTML was returned
            Crawl4AIError: If something went wrong inside Crawl4AI library

        """
        if self._crawler is None:
            raise ExtractorError("Browser is not started")

        logger.debug("[EXTRACTION STARTED] URL: %s", url)
        try:
            result = await asyncio.wait_for(
                self._crawler.arun(url=url, config=self._get_crawler_config()),
                timeout=crawl_deadline(self._settings),
            )
        except TimeoutError as e:
            raise ExtractorError(f"Page load timed out: {url}") from e

        if not result.success:
            error_msg = getattr(result, "error_message", None) or "Unknown Crawl4AI error"
            raise Crawl4AIError(f"Failed to navigate to URL {url}: {error_msg}")

        if not result.html:
            raise ExtractorError("No HTML content extracted")

        final_url = getattr(result, "redirected_url", None) or url
        if final_url != url:
            logger.debug("Page redirected to %s", final_url)
        return ExtractionResult(html=result.html, url=final_url)

    def _get_crawler_config(self) -> CrawlerRunConfig:
        """Build crawler configuration from settings.

        Returns:
            CrawlerRunConfig instance with settings from application config.

        """
        return CrawlerRunConfig(
            wait_until=self._settings.browser_wait_until,
            page_timeout=self._settings.browser_timeout * 1000,
            delay_before_return_html=float(self._settings.browser_wait),
            cache_mode=CacheMode.BYPASS if self._settings.browser_no_cache else CacheMode.ENABLED,
            verbose=False,
        )
