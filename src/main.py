"""Command-line entrypoint: fetch the quotes and print them."""

import asyncio
import logging

from src.config import get_settings
from src.logging_config import setup_logging
from src.quotes import fetch_quotes

logger = logging.getLogger(__name__)


async def main() -> list[str]:
    settings = get_settings()

    # Initialize logging FIRST so the browser launch is already covered
    setup_logging(settings.log_level)
    logger.info("starting quote scraper")

    quotes = await fetch_quotes(headless=settings.headless)
    print(quotes)
    return quotes


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
