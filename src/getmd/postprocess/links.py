"""Resolution of relative link and image destinations in Markdown.

Converted pages keep the ``href``/``src`` values of the original HTML, which
are often relative to the page they came from. Rewriting them to absolute
URLs keeps the Markdown usable once it leaves that page.

Only the destination grammar of ``[text](destination "title")`` and
``![alt](destination)`` is recognised. Anything that does not scan cleanly
is left exactly as it was.
"""

from typing import NamedTuple
from urllib.parse import urlsplit

import httpx

from getmd.logger import logger

LINK_OPEN = "]("
ASCII_WHITESPACE = frozenset(" \t\n\r\f")
TITLE_QUOTES = "\"'"
# Schemes whose URLs always carry a host
HOST_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})


class LinkDestination(NamedTuple):
    """Destination part of a link span split into its pieces."""

    url: str
    trailing: str
    angle_brackets: bool


def find_link_close_paren(text: str, start: int = 0) -> int | None:
    """Find the ``)`` matching the implicit ``(`` of a ``](`` marker.

    Nested parentheses in the destination must balance, backslash-escaped
    parentheses and quotes are ignored, and a quoted title following the
    destination may contain anything up to its closing quote.

    Args:
        text: Text containing the link span.
        start: Index just after the ``](`` marker.

    Returns:
        Index of the closing parenthesis in ``text``, or None if the span
        is never closed.

    """
    depth = 1
    backslash_run = 0
    title_quote: str | None = None
    saw_destination = False
    saw_separator = False

    for index in range(start, len(text)):
        char = text[index]
        if char == "\\":
            backslash_run += 1
            continue

        escaped = backslash_run % 2 == 1
        backslash_run = 0

        if title_quote is not None:
            if char == title_quote and not escaped:
                title_quote = None
            continue

        if depth == 1:
            if char in ASCII_WHITESPACE:
                if saw_destination:
                    saw_separator = True
            elif saw_separator and char in TITLE_QUOTES:
                title_quote = char
                continue
            else:
                saw_destination = True
                saw_separator = False

        if escaped:
            continue
        if char == "(":
            depth += 1
        elif char == ")":
            depth -= 1
            if depth == 0:
                return index

    return None


def _find_unescaped(text: str, target: str, start: int) -> int | None:
    backslash_run = 0
    for index in range(start, len(text)):
        char = text[index]
        if char == "\\":
            backslash_run += 1
            continue
        if char == target and backslash_run % 2 == 0:
            return index
        backslash_run = 0
    return None


def split_link_destination(inside: str) -> LinkDestination:
    """Split the text between ``](`` and ``)`` into destination and title.

    Supports:
    - standard form: ``./path "title"``
    - angle bracket form: ``<./path with space> "title"``

    In the standard form the title (if any) starts at the first unescaped
    whitespace, so ``./my\\ file.md`` stays one destination.
    """
    if inside.startswith("<"):
        close = _find_unescaped(inside, ">", 1)
        if close is not None:
            return LinkDestination(inside[1:close], inside[close + 1:], True)

    backslash_run = 0
    for index, char in enumerate(inside):
        if char == "\\":
            backslash_run += 1
            continue
        if char in ASCII_WHITESPACE and backslash_run % 2 == 0:
            return LinkDestination(inside[:index], inside[index:], False)
        backslash_run = 0
    return LinkDestination(inside, "", False)


def parse_base_url(base_url: str) -> httpx.URL | None:
    """Parse an absolute base URL, returning None if it is not one.

    Web URLs must also name a host, so ``https://`` on its own is rejected.
    """
    try:
        urlsplit(base_url)
        base = httpx.URL(base_url)
    except (httpx.InvalidURL, ValueError):
        return None
    if not base.scheme:
        return None
    if base.scheme in HOST_SCHEMES and not base.host:
        return None
    return base


def _has_authority(url: str) -> bool:
    _, colon, rest = url.partition(":")
    return bool(colon) and rest.startswith("//")


def join_url(base: httpx.URL, url: str) -> str:
    """Resolve ``url`` against ``base``, falling back to ``url`` unchanged."""
    try:
        reference = httpx.URL(url)
        joined = str(base.join(reference))
    except (httpx.InvalidURL, ValueError) as e:
        logger.debug("Leaving link destination %r unresolved: %s", url, e)
        return url
    # httpx drops an empty authority (file:///x -> file:/x)
    if reference.scheme and _has_authority(url) and not _has_authority(joined):
        return url
    return joined


def _render_destination(base: httpx.URL, destination: LinkDestination) -> str:
    url = join_url(base, destination.url) if destination.url else ""
    if destination.angle_brackets:
        url = f"<{url}>"
    return url + destination.trailing


def resolve_markdown_urls(markdown: str, base_url: str) -> str:
    """Resolve relative URLs in Markdown link/image syntax to absolute ones.

    Args:
        markdown: Markdown document.
        base_url: Absolute URL of the page the document came from.

    Returns:
        The document with every destination joined onto ``base_url``. The
        input is returned unchanged if ``base_url`` is not an absolute URL.
        Titles and malformed spans are copied through verbatim.

    """
    base = parse_base_url(base_url)
    if base is None:
        logger.debug("Base URL %r is not absolute, skipping link resolution", base_url)
        return markdown

    parts: list[str] = []
    cursor = 0
    while (open_index := markdown.find(LINK_OPEN, cursor)) != -1:
        inside_start = open_index + len(LINK_OPEN)
        parts.append(markdown[cursor:inside_start])

        close = find_link_close_paren(markdown, inside_start)
        if close is None:
            # Bracket state cannot be recovered past an unterminated span
            logger.debug("Unterminated link destination at offset %d", open_index)
            cursor = inside_start
            break

        destination = split_link_destination(markdown[inside_start:close])
        parts.append(_render_destination(base, destination))
        parts.append(")")
        cursor = close + 1

    parts.append(markdown[cursor:])
    return "".join(parts)
