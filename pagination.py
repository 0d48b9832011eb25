"""
Pagination module - expands the review list by clicking "load more" until it goes away.
"""
from dataclasses import dataclass
from enum import Enum

from playwright.sync_api import Page

import config


class ExpansionStatus(str, Enum):
    MORE_AVAILABLE = "more_available"
    EXHAUSTED = "exhausted"
    ACTION_FAILED = "action_failed"


@dataclass
class ExpansionResult:
    """Outcome of expanding the page"""
    clicks: int
    status: ExpansionStatus

    @property
    def complete(self) -> bool:
        return self.status == ExpansionStatus.EXHAUSTED


def load_more_control(page: Page):
    return page.get_by_role(config.LOAD_MORE_ROLE, name=config.LOAD_MORE_NAME)


def click_load_more(page: Page, timeout: int = config.LOAD_MORE_TIMEOUT_MS) -> ExpansionStatus:
    """
    Click the "load more" control once.
    A failed click is EXHAUSTED when the control is gone, ACTION_FAILED when it is still there.
    """
    control = load_more_control(page)
    try:
        control.first.click(timeout=timeout)
        return ExpansionStatus.MORE_AVAILABLE
    except Exception as e:
        if control.count() == 0:
            return ExpansionStatus.EXHAUSTED
        print(f"  Warning: load more click failed: {e}")
        return ExpansionStatus.ACTION_FAILED


def expand_all(page: Page, timeout: int = config.LOAD_MORE_TIMEOUT_MS) -> ExpansionResult:
    """
    Keep clicking "load more" until the control disappears or a click fails.
    No retries: ACTION_FAILED stops the loop and is reported as such.
    """
    clicks = 0
    while True:
        status = click_load_more(page, timeout=timeout)
        if status != ExpansionStatus.MORE_AVAILABLE:
            break
        clicks += 1
        print(f"  Loaded page {clicks + 1}")

    if status == ExpansionStatus.ACTION_FAILED:
        print(f"  ✗ Stopped after {clicks} clicks: control still present but not clickable")
    else:
        print(f"  ✓ All reviews loaded ({clicks} clicks)")

    return ExpansionResult(clicks=clicks, status=status)
