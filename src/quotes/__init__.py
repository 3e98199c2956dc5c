"""Browser-driven quote scraping."""

from .extractor import EXTRACT_SCRIPT, drop_missing, extract_quotes, fetch_quotes
from .models import (
    CONTAINER_SELECTOR,
    DEFAULT_TARGET,
    QUOTE_TEXT_SELECTOR,
    TARGET_URL,
    ExtractionTarget,
)
from .session import browser_session

__all__ = [
    "CONTAINER_SELECTOR",
    "DEFAULT_TARGET",
    "EXTRACT_SCRIPT",
    "QUOTE_TEXT_SELECTOR",
    "TARGET_URL",
    "ExtractionTarget",
    "browser_session",
    "drop_missing",
    "extract_quotes",
    "fetch_quotes",
]
