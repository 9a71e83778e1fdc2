"""get-md - render a web page in a browser and convert it to Markdown.

The Markdown post-processing (table compaction and link resolution) is
usable on its own through ``compact_markdown`` and ``resolve_markdown_urls``.
"""

from getmd.config import Settings, settings
from getmd.postprocess import compact_markdown, resolve_markdown_urls

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "__version__",
    "compact_markdown",
    "resolve_markdown_urls",
    "settings",
]
