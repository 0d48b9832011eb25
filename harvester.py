"""
Harvester module - turns every review block on the expanded page into a ReviewRecord.
A block that fails to parse is reported and skipped; it never stops the batch.
"""
from typing import List

from playwright.sync_api import Page

import config
from dates import DateParseError, normalize_date
from extractor import ExtractionError, extract_review
from schemas import ReviewRecord


def harvest(page: Page, timeout: int = config.EXTRACTION_TIMEOUT_MS) -> List[ReviewRecord]:
    """
    Extract all reviews in document order.
    Returns only the blocks that parsed completely.
    """
    containers = page.locator(config.REVIEW_CONTAINER_SELECTOR).all()
    total = len(containers)
    print(f"  Found {total} review blocks")

    records = []
    for i, container in enumerate(containers, start=1):
        try:
            raw = extract_review(container, timeout=timeout)
            created_at = normalize_date(raw.raw_date)
        except (ExtractionError, DateParseError) as e:
            print(f"  ✗ [{i}/{total}] Skipped: {e}")
            continue

        records.append(ReviewRecord(
            name=raw.name,
            content=raw.content,
            rate=raw.rate,
            createdAt=created_at,
        ))
        print(f"  [{i}/{total}] {len(records)} reviews extracted")

    return records
