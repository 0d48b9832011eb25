"""
Extractor module - pulls the fields of one review block.
Text is returned exactly as the page renders it; date normalization happens in the harvester.
"""
from dataclasses import dataclass
from typing import Optional

from playwright.sync_api import Locator

import config
from browser import get_accessible_label


@dataclass(frozen=True)
class RawReview:
    """Fields of one review block before date normalization"""
    name: str
    content: str
    rate: Optional[str]
    raw_date: str


class ExtractionError(Exception):
    """A review block could not be read. Wraps the underlying error."""


def rating_from_label(label: Optional[str]) -> Optional[str]:
    """
    Reduce an accessible rating label to its leading token.
    "5 out of 5 stars" -> "5". Missing or blank labels give None.
    """
    if not label:
        return None
    tokens = label.split()
    return tokens[0] if tokens else None


def extract_review(container: Locator, timeout: int = config.EXTRACTION_TIMEOUT_MS) -> RawReview:
    """
    Read name, content, rating and raw date from one review container.
    The name row holds name and date as siblings: first item is the name, last is the date.
    """
    try:
        name_row = container.locator(config.NAME_ROW_SELECTOR)
        name = name_row.first.inner_text(timeout=timeout)
        content = container.locator(config.CONTENT_SELECTOR).first.inner_text(timeout=timeout)
        rating = container.locator(config.RATING_SELECTOR)
        # unrated reviews have no rating element at all
        label = get_accessible_label(rating.first, timeout=timeout) if rating.count() else None
        raw_date = name_row.last.inner_text(timeout=timeout)
    except Exception as e:
        raise ExtractionError(str(e)) from e

    return RawReview(
        name=name,
        content=content,
        rate=rating_from_label(label),
        raw_date=raw_date,
    )
