"""Unit tests for MarkdownGenerator module."""

from unittest.mock import MagicMock, patch

import pytest

from getmd.exceptions import MarkdownGeneratorError
from getmd.parser.markdown_generator import MarkdownGenerator


@pytest.fixture
def mock_settings() -> MagicMock:
    """Create mock settings for testing."""
    settings = MagicMock()
    settings.skip_tags = ["script", "style", "noscript", "svg"]
    settings.markdown_escape_html = True
    settings.markdown_body_width = 0
    return settings


@pytest.fixture
def sample_html() -> str:
    """Sample HTML for testing."""
    return """
    <article>
        <h1>Test Article Title</h1>
        <script>alert("x")</script>
        <style>h1 { color: red; }</style>
        <p>This is a test paragraph with a <a href="./other.md">link</a>.</p>
        <svg><path d="M0 0"/></svg>
        <noscript>Enable JavaScript</noscript>
    </article>
    """


def _mock_generator(raw_markdown: str | None) -> MagicMock:
    mock_result = MagicMock()
    mock_result.raw_markdown = raw_markdown
    mock_md_gen = MagicMock()
    mock_md_gen.generate_markdown.return_value = mock_result
    return mock_md_gen


class TestMarkdownGenerator:
    """Test MarkdownGenerator class functionality."""

    def test_convert_success(self, mock_settings: MagicMock, sample_html: str) -> None:
        """Test successful HTML to Markdown conversion."""
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen = _mock_generator("# Test Article Title\n\nConverted.")
            mock_md_gen_class.return_value = mock_md_gen

            result = generator.convert(sample_html)

            assert result == "# Test Article Title\n\nConverted."
            mock_md_gen.generate_markdown.assert_called_once()
            assert mock_md_gen.generate_markdown.call_args.kwargs["citations"] is False

    def test_convert_strips_skipped_tags(self, mock_settings: MagicMock, sample_html: str) -> None:
        """Test that script, style, svg and noscript never reach the converter."""
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen = _mock_generator("# Title")
            mock_md_gen_class.return_value = mock_md_gen

            generator.convert(sample_html)

            input_html = mock_md_gen.generate_markdown.call_args.kwargs["input_html"]
            assert "<script" not in input_html
            assert "<style" not in input_html
            assert "<svg" not in input_html
            assert "Enable JavaScript" not in input_html
            assert 'href="./other.md"' in input_html
            assert "Test Article Title" in input_html

    def test_convert_without_skip_tags_passes_html_through(
        self, mock_settings: MagicMock, sample_html: str
    ) -> None:
        """Test that an empty skip list leaves the HTML untouched."""
        mock_settings.skip_tags = []
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen = _mock_generator("# Title")
            mock_md_gen_class.return_value = mock_md_gen

            generator.convert(sample_html)

            assert mock_md_gen.generate_markdown.call_args.kwargs["input_html"] == sample_html

    def test_convert_empty_result(self, mock_settings: MagicMock) -> None:
        """Test that an empty conversion returns an empty string."""
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen_class.return_value = _mock_generator(None)

            assert generator.convert("<div></div>") == ""

    def test_convert_failure_raises(self, mock_settings: MagicMock, sample_html: str) -> None:
        """Test that converter exceptions are wrapped."""
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen = MagicMock()
            mock_md_gen.generate_markdown.side_effect = RuntimeError("Conversion error")
            mock_md_gen_class.return_value = mock_md_gen

            with pytest.raises(MarkdownGeneratorError, match="Conversion error"):
                generator.convert(sample_html)

    def test_convert_generator_options(self, mock_settings: MagicMock) -> None:
        """Test that markdown generator keeps links and images."""
        generator = MarkdownGenerator(mock_settings)

        with patch(
            "getmd.parser.markdown_generator.DefaultMarkdownGenerator"
        ) as mock_md_gen_class:
            mock_md_gen_class.return_value = _mock_generator("# Content")

            generator.convert("<p>test</p>")

            options = mock_md_gen_class.call_args.kwargs["options"]
            assert options["ignore_links"] is False
            assert options["ignore_images"] is False
            assert options["body_width"] == mock_settings.markdown_body_width
            assert options["escape_html"] == mock_settings.markdown_escape_html
