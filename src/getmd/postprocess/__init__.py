"""Post-processing of converted Markdown.

Table compaction runs first, then relative link and image destinations are
resolved against the page URL.
"""

from getmd.postprocess.links import (
    LinkDestination,
    find_link_close_paren,
    resolve_markdown_urls,
    split_link_destination,
)
from getmd.postprocess.tables import FenceState, compact_markdown, compact_table_row, fence_marker

__all__ = [
    "FenceState",
    "LinkDestination",
    "compact_markdown",
    "compact_table_row",
    "fence_marker",
    "find_link_close_paren",
    "resolve_markdown_urls",
    "split_link_destination",
]
