"""CSS selector matching for rendered pages."""

from collections.abc import Callable

from bs4 import BeautifulSoup
from soupsieve import SelectorSyntaxError

from getmd.config import Settings
from getmd.exceptions import SelectorError
from getmd.logger import logger


class CssSelectorFilter:
    """Selects page elements with CSS selectors.

    Each selector contributes one HTML fragment holding the outer HTML of
    all its matches, in document order.
    """

    def __init__(self, settings: Settings) -> None:
        """Initialize the CSS selector filter.

        Args:
            settings: Application settings containing the default selector.

        """
        self._settings = settings

    def select(
        self,
        html: str,
        selectors: list[str],
        on_selector: Callable[[str], None] | None = None,
    ) -> list[str]:
        """Extract the outer HTML of elements matching each selector.

        Args:
            html: HTML content to parse.
            selectors: CSS selectors in output order. Empty means the
                configured default selector.
            on_selector: Called with each selector before it is matched.

        Returns:
            One fragment per selector that matched at least one element.

        Raises:
            SelectorError: If a selector is not valid CSS.

        """
        soup = BeautifulSoup(html, "html.parser")

        fragments: list[str] = []
        for selector in selectors or [self._settings.default_selector]:
            if on_selector is not None:
                on_selector(selector)
            try:
                elements = soup.select(selector)
            except SelectorSyntaxError as e:
                raise SelectorError(f"Invalid CSS selector '{selector}': {e}") from e

            if not elements:
                logger.warning("No elements matched selector '%s'", selector)
                continue

            logger.debug("CSS selector '%s' matched %d element(s)", selector, len(elements))
            fragments.append("\n".join(str(element) for element in elements))

        return fragments
