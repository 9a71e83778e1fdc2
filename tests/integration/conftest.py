"""Pytest configuration for integration tests.

These tests launch a real headless browser and load pages from the network.
Install the browser once with ``crawl4ai-setup`` (or ``playwright install chromium``).
Run: GETMD_RUN_INTEGRATION=1 pytest tests/integration
"""

import os
from collections.abc import AsyncGenerator
from pathlib import Path

import pytest

from getmd.config import Settings, settings
from getmd.parser import Parser
from getmd.progress import ProgressDisplay


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    if os.environ.get("GETMD_RUN_INTEGRATION"):
        return
    skip = pytest.mark.skip(reason="set GETMD_RUN_INTEGRATION=1 to run browser tests")
    here = Path(__file__).parent
    for item in items:
        if here in item.path.parents:
            item.add_marker(skip)


@pytest.fixture
def integration_settings() -> Settings:
    """Settings tuned for fast, fresh page loads."""
    return settings.model_copy(
        update={"browser_wait": 0, "browser_timeout": 30, "browser_no_cache": True}
    )


@pytest.fixture
async def parser(integration_settings: Settings) -> AsyncGenerator[Parser]:
    """Provide a started parser with progress output disabled."""
    page_parser = Parser(integration_settings, ProgressDisplay(enabled=False))
    await page_parser.start()
    try:
        yield page_parser
    finally:
        await page_parser.close()
