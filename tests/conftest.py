"""
Fakes mimicking the parts of the Playwright sync API the scraper touches.
"""
from typing import Dict, List, Optional

import pytest
from playwright.sync_api import TimeoutError as PlaywrightTimeoutError

import config


class FakeElement:
    def __init__(self, text: Optional[str] = None, label: Optional[str] = None,
                 children: Optional[Dict[str, List["FakeElement"]]] = None,
                 broken: bool = False):
        self.text = text
        self.label = label
        self.children = children or {}
        self.broken = broken


class FakeLocator:
    def __init__(self, elements: List[FakeElement]):
        self.elements = list(elements)

    @property
    def first(self):
        return FakeLocator(self.elements[:1])

    @property
    def last(self):
        return FakeLocator(self.elements[-1:])

    def all(self):
        return [FakeLocator([e]) for e in self.elements]

    def count(self):
        return len(self.elements)

    def _single(self, timeout):
        if not self.elements:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for locator")
        element = self.elements[0]
        if element.broken:
            raise RuntimeError("Element is not attached to the DOM")
        return element

    def locator(self, selector):
        found = []
        for element in self.elements:
            found.extend(element.children.get(selector, []))
        return FakeLocator(found)

    def inner_text(self, timeout=None):
        element = self._single(timeout)
        if element.text is None:
            raise PlaywrightTimeoutError("Element has no text")
        return element.text

    def get_attribute(self, name, timeout=None):
        element = self._single(timeout)
        assert name == "aria-label"
        return element.label


def make_container(name="Alice", date="Sep 7, 2024", content="Works well", label="5 out of 5 stars",
                   broken_name=False, missing_content=False, unrated=False):
    """Build one review block in the shape the selectors expect"""
    children = {
        config.NAME_ROW_SELECTOR: [
            FakeElement(text=name, broken=broken_name),
            FakeElement(text=date),
        ],
    }
    if not unrated:
        children[config.RATING_SELECTOR] = [FakeElement(label=label)]
    if not missing_content:
        children[config.CONTENT_SELECTOR] = [FakeElement(text=content)]
    return FakeElement(children=children)


class FakeLoadMore:
    """The "load more" button. Each click reveals one more batch until none remain."""

    def __init__(self, page):
        self.page = page

    @property
    def first(self):
        return self

    def count(self):
        if self.page.stuck:
            return 1
        return 1 if self.page.batches_remaining > 0 else 0

    def click(self, timeout=None):
        self.page.click_attempts += 1
        if self.page.stuck:
            raise PlaywrightTimeoutError("Element is not visible")
        if self.page.batches_remaining == 0:
            raise PlaywrightTimeoutError(f"Timeout {timeout}ms exceeded waiting for get_by_role")
        self.page.batches_remaining -= 1
        self.page.revealed += 1


class FakePage:
    def __init__(self, batches: List[List[FakeElement]], stuck: bool = False):
        self.batches = batches
        self.revealed = 1
        self.batches_remaining = max(len(batches) - 1, 0)
        self.stuck = stuck
        self.click_attempts = 0
        self.roles = []

    def get_by_role(self, role, name=None):
        self.roles.append((role, name))
        return FakeLoadMore(self)

    def locator(self, selector):
        assert selector == config.REVIEW_CONTAINER_SELECTOR
        visible = []
        for batch in self.batches[:self.revealed]:
            visible.extend(batch)
        return FakeLocator(visible)


@pytest.fixture
def three_reviews_second_broken():
    """Page with 3 review blocks where the second fails on its name"""
    return FakePage([[
        make_container(name="Alice", date="Sep 7, 2024", content='Great, "fast" tool', label="5 stars"),
        make_container(name="Bob", broken_name=True),
        make_container(name="Carol", date="Jan 1, 2023", content="Too slow\non old phones", label="2 stars"),
    ]])
