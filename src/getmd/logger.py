"""Logging configuration for get-md."""

import logging
import sys

from getmd.config import settings

# Single app logger that can be imported throughout the application
logger = logging.getLogger("getmd")


def setup_logging() -> None:
    """Configure application logging.

    Logs to stderr to keep stdout free for the Markdown output.
    Sets up a single app logger (getmd) that can be controlled via GETMD_DEBUG;
    outside debug mode only warnings are shown so the progress display stays readable.
    """
    # Clear existing handlers to prevent duplicate log entries on repeated setup
    logging.root.handlers = []

    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )

    app_log_level = logging.DEBUG if settings.getmd_debug else logging.WARNING
    logger.setLevel(app_log_level)

    level_name = "DEBUG" if settings.getmd_debug else "WARNING"
    logger.debug("get-md logging initialized at %s level", level_name)
