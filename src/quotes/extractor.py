"""Quote extraction: navigate, evaluate in-page, filter."""

from __future__ import annotations

import logging
from typing import Iterable

from playwright.async_api import Page

from .models import DEFAULT_TARGET, ExtractionTarget
from .session import browser_session

logger = logging.getLogger(__name__)

WAIT_UNTIL = "domcontentloaded"

# Runs inside the page. Containers without a text node (image tiles) map to
# null so a missing node never aborts the whole pass.
EXTRACT_SCRIPT = """
({ containerSelector, textSelector }) => {
    const containers = document.querySelectorAll(containerSelector);
    return Array.from(containers).map(container => {
        const node = container.querySelector(textSelector);
        return node ? node.innerText : null;
    });
}
"""


def drop_missing(values: Iterable[str | None]) -> list[str]:
    """Keep the definite values, in their original order."""
    return [v for v in values if v is not None]


async def extract_quotes(page: Page, target: ExtractionTarget) -> list[str]:
    """Evaluate the extraction script on an already loaded page."""
    raw: list[str | None] = await page.evaluate(EXTRACT_SCRIPT, target.script_args())
    quotes = drop_missing(raw)
    logger.info(
        "quotes extracted",
        extra={
            "containers": len(raw),
            "quotes": len(quotes),
            "dropped": len(raw) - len(quotes),
        },
    )
    return quotes


async def fetch_quotes(
    target: ExtractionTarget = DEFAULT_TARGET,
    *,
    headless: bool = False,
) -> list[str]:
    """Load *target* in a fresh browser session and return its quote texts."""
    async with browser_session(headless=headless) as page:
        logger.info("navigating", extra={"url": target.url, "wait_until": WAIT_UNTIL})
        await page.goto(target.url, wait_until=WAIT_UNTIL)
        return await extract_quotes(page, target)
