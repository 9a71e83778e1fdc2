"""Unit tests for CSS selector matching."""

from typing import Any

import pytest
from bs4 import BeautifulSoup

from getmd.exceptions import SelectorError
from getmd.parser.selector import CssSelectorFilter


@pytest.fixture
def mock_settings() -> Any:
    """Create mock settings for testing."""
    class MockSettings:
        default_selector = "body"

    return MockSettings()


@pytest.fixture
def docs_page_html() -> str:
    """Rendered documentation page with navigation and content."""
    return """
    <html>
    <head><title>Docs</title><script>var x = 1;</script></head>
    <body>
        <nav><a href="/">Home</a></nav>
        <article class="doc">
            <h1>Getting started</h1>
            <p>Read the <a href="./install.md">install guide</a>.</p>
        </article>
        <article class="doc">
            <h1>Configuration</h1>
        </article>
        <div class="comments"><p>First!</p></div>
    </body>
    </html>
    """


class TestCssSelectorFilter:
    """Test CssSelectorFilter functionality."""

    def test_selects_all_matches_for_selector(
        self, mock_settings: Any, docs_page_html: str
    ) -> None:
        """Test that every match of a selector ends up in one fragment."""
        fragments = CssSelectorFilter(mock_settings).select(docs_page_html, ["article.doc"])

        assert len(fragments) == 1
        soup = BeautifulSoup(fragments[0], "html.parser")
        headings = [h1.get_text() for h1 in soup.find_all("h1")]
        assert headings == ["Getting started", "Configuration"]

    def test_fragment_is_outer_html(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that the element's own tag is included."""
        fragments = CssSelectorFilter(mock_settings).select(docs_page_html, [".comments"])

        assert fragments == ['<div class="comments"><p>First!</p></div>']

    def test_one_fragment_per_selector_in_order(
        self, mock_settings: Any, docs_page_html: str
    ) -> None:
        """Test that fragments follow the selector order."""
        fragments = CssSelectorFilter(mock_settings).select(docs_page_html, [".comments", "nav"])

        expected_count = 2
        assert len(fragments) == expected_count
        assert "First!" in fragments[0]
        assert fragments[1].startswith("<nav>")

    def test_empty_selectors_use_default(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that the default selector applies when none are given."""
        fragments = CssSelectorFilter(mock_settings).select(docs_page_html, [])

        assert len(fragments) == 1
        assert fragments[0].startswith("<body>")

    def test_unmatched_selector_is_skipped(
        self, mock_settings: Any, docs_page_html: str, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a selector without matches logs a warning and is skipped."""
        with caplog.at_level("WARNING", logger="getmd"):
            fragments = CssSelectorFilter(mock_settings).select(
                docs_page_html, ["#missing", "nav"]
            )

        assert len(fragments) == 1
        assert "No elements matched selector '#missing'" in caplog.text

    def test_no_matches_returns_empty_list(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that no matches at all yields no fragments."""
        assert CssSelectorFilter(mock_settings).select(docs_page_html, ["table"]) == []

    def test_invalid_selector_raises(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that malformed CSS raises SelectorError."""
        with pytest.raises(SelectorError, match="Invalid CSS selector"):
            CssSelectorFilter(mock_settings).select(docs_page_html, ["div[unclosed"])

    def test_on_selector_called_in_order(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that the callback sees every selector, matched or not."""
        seen: list[str] = []

        CssSelectorFilter(mock_settings).select(
            docs_page_html, ["nav", "#missing"], on_selector=seen.append
        )

        assert seen == ["nav", "#missing"]

    def test_on_selector_sees_default(self, mock_settings: Any, docs_page_html: str) -> None:
        """Test that the default selector is reported when none are given."""
        seen: list[str] = []

        CssSelectorFilter(mock_settings).select(docs_page_html, [], on_selector=seen.append)

        assert seen == ["body"]
