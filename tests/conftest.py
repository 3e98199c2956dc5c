"""Fixtures — fake Playwright driver, browser and page."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock, patch

import pytest


@pytest.fixture
def fake_playwright():
    """Patch ``async_playwright`` with mocks wired browser -> context -> page."""
    page = MagicMock()
    page.goto = AsyncMock()
    page.evaluate = AsyncMock(return_value=[])

    context = MagicMock()
    context.new_page = AsyncMock(return_value=page)

    browser = MagicMock()
    browser.new_context = AsyncMock(return_value=context)
    browser.close = AsyncMock()

    driver = MagicMock()
    driver.chromium.launch = AsyncMock(return_value=browser)

    manager = MagicMock()
    manager.__aenter__.return_value = driver

    with patch("src.quotes.session.async_playwright", return_value=manager):
        yield SimpleNamespace(
            manager=manager,
            driver=driver,
            browser=browser,
            context=context,
            page=page,
        )
