"""Command-line interface: fetch a page in a browser and print it as Markdown.

Usage:
    get-md https://example.com
    get-md https://example.com -s article -s .comments -o out/page.md
"""

import asyncio
from pathlib import Path

import click

from getmd import __version__
from getmd.config import Settings, settings
from getmd.exceptions import GetMDError, OutputError
from getmd.logger import logger, setup_logging
from getmd.parser import Parser
from getmd.progress import ProgressDisplay


def write_output(markdown: str, output: Path | None) -> None:
    """Write Markdown to a file, or to stdout when no path is given.

    File output always ends with a newline; stdout gets the Markdown as is.

    Raises:
        OutputError: If the file or its parent directory cannot be written.

    """
    if output is None:
        click.echo(markdown, nl=False)
        return

    if not markdown.endswith("\n"):
        markdown += "\n"
    try:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(markdown, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write output file {output}: {e}") from e
    logger.debug("Wrote %d characters to %s", len(markdown), output)


async def run(
    url: str,
    selectors: list[str],
    run_settings: Settings,
    progress: ProgressDisplay,
) -> str:
    """Run the full pipeline for one URL and return the Markdown."""
    parser = Parser(run_settings, progress)
    try:
        await parser.start()
        return await parser.fetch_markdown(url, selectors)
    finally:
        progress.finish_and_clear()
        await parser.close()


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("url")
@click.option(
    "-s",
    "--selector",
    "selectors",
    multiple=True,
    help="CSS selector of elements to convert (repeatable). Defaults to the whole body.",
)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Output file path. Writes to stdout if omitted.",
)
@click.option(
    "--browser-channel",
    default=settings.browser_channel,
    show_default=True,
    help="Browser channel to launch (chromium, chrome, msedge).",
)
@click.option(
    "-w",
    "--wait",
    type=click.IntRange(min=0),
    default=settings.browser_wait,
    show_default=True,
    help="Extra seconds to wait after page load for JS rendering.",
)
@click.option(
    "-t",
    "--timeout",
    type=click.IntRange(min=1),
    default=settings.browser_timeout,
    show_default=True,
    help="Page load timeout in seconds.",
)
@click.option("--no-headless", is_flag=True, help="Show the browser window (for debugging).")
@click.option("--no-cache", is_flag=True, help="Bypass the page cache and always fetch fresh content.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress progress output.")
@click.version_option(__version__, prog_name="get-md")
def main(
    url: str,
    selectors: tuple[str, ...],
    output: Path | None,
    browser_channel: str,
    wait: int,
    timeout: int,
    no_headless: bool,
    no_cache: bool,
    quiet: bool,
) -> None:
    """Fetch URL in a browser and convert selected elements to Markdown.

    Supports JavaScript-rendered pages.
    """
    setup_logging()

    run_settings = settings.model_copy(
        update={
            "browser_channel": browser_channel,
            "browser_wait": wait,
            "browser_timeout": timeout,
            "browser_headless": settings.browser_headless and not no_headless,
            "browser_no_cache": settings.browser_no_cache or no_cache,
        }
    )
    progress = ProgressDisplay(enabled=not quiet)

    try:
        markdown = asyncio.run(run(url, list(selectors), run_settings, progress))
        write_output(markdown, output)
    except GetMDError as e:
        raise click.ClickException(str(e)) from e

    # Show completion with URL only after output succeeds.
    progress.complete(url)


if __name__ == "__main__":
    main()
