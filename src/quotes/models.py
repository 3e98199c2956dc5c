"""Data models for the quotes submodule."""

from __future__ import annotations

from dataclasses import dataclass

TARGET_URL = "https://www.brainyquote.com/authors/fyodor-dostoevsky-quotes"
CONTAINER_SELECTOR = ".grid-item"
QUOTE_TEXT_SELECTOR = ".b-qt"


@dataclass(frozen=True)
class ExtractionTarget:
    """What to extract: a page plus the container/text selector pair."""

    url: str
    container_selector: str = CONTAINER_SELECTOR
    text_selector: str = QUOTE_TEXT_SELECTOR

    def script_args(self) -> dict[str, str]:
        """Plain-data arguments handed across to the in-page script."""
        return {
            "containerSelector": self.container_selector,
            "textSelector": self.text_selector,
        }


DEFAULT_TARGET = ExtractionTarget(url=TARGET_URL)
