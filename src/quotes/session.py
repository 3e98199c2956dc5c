"""Scoped Playwright browser session."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from playwright.async_api import Page, async_playwright

logger = logging.getLogger(__name__)


@asynccontextmanager
async def browser_session(headless: bool = False) -> AsyncIterator[Page]:
    """Launch Chromium, yield a single page, and always close the browser.

    Launch failures propagate before anything needs releasing. Once the
    browser is up it is closed on every exit path, including errors raised
    inside the ``async with`` body.
    """
    async with async_playwright() as p:
        logger.info("launching browser", extra={"headless": headless})
        browser = await p.chromium.launch(headless=headless)
        try:
            # no_viewport lets the page follow the real window size
            context = await browser.new_context(no_viewport=True)
            page = await context.new_page()
            yield page
        except Exception:
            logger.warning("browser session failed", exc_info=True)
            raise
        finally:
            await browser.close()
            logger.info("browser closed")
