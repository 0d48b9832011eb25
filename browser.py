"""
Browser module - opens the review page with Playwright.
Keeps every direct Playwright call the rest of the scraper needs in one place.
Requires: pip install playwright && playwright install chromium
"""
from contextlib import contextmanager
from typing import Iterator, Optional

from playwright.sync_api import Locator, Page, sync_playwright

import config


@contextmanager
def open_page(
    url: str,
    headless: bool = config.HEADLESS,
    locale: str = config.BROWSER_LOCALE,
    timeout: int = config.NAVIGATION_TIMEOUT_MS,
) -> Iterator[Page]:
    """
    Launch Chromium, navigate to url and yield the page.
    The browser is closed when the block exits, even on error.
    """
    with sync_playwright() as p:
        browser = p.chromium.launch(headless=headless)
        try:
            context = browser.new_context(locale=locale)
            page = context.new_page()
            page.goto(url, wait_until="domcontentloaded", timeout=timeout)
            yield page
        finally:
            browser.close()


def get_accessible_label(element: Locator, timeout: int = config.EXTRACTION_TIMEOUT_MS) -> Optional[str]:
    """Return the element's aria-label, or None when it has none"""
    return element.get_attribute("aria-label", timeout=timeout)
