"""
Configuration settings for the review scraper.
Centralizes all configurable parameters.
"""
import os


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


# ============================================================
# BROWSER SETTINGS
# ============================================================

# Run Chromium without a window (set REVIEWS_HEADLESS=true in .env for CI)
HEADLESS = _env_flag("REVIEWS_HEADLESS", False)

# Fixed locale so review dates always render in the same format
BROWSER_LOCALE = "en-US"

# Timeout for the initial page navigation (milliseconds)
NAVIGATION_TIMEOUT_MS = 30000


# ============================================================
# SELECTORS
# ============================================================

# One review block: a section nested one level inside a div
REVIEW_CONTAINER_SELECTOR = "div > section"

# Row holding reviewer name (first item) and date (last item)
NAME_ROW_SELECTOR = "header span"

# Review body text
CONTENT_SELECTOR = "p"

# Star rating element, read through its aria-label
RATING_SELECTOR = "[role='img']"


# ============================================================
# PAGINATION SETTINGS
# ============================================================

# Accessible role and name of the "load more" control
LOAD_MORE_ROLE = "button"
LOAD_MORE_NAME = "Load more"

# How long a single click may wait for the control to become actionable
LOAD_MORE_TIMEOUT_MS = 5000


# ============================================================
# EXTRACTION SETTINGS
# ============================================================

# Per-element timeout when reading text from a review block.
# A missing element fails its record after this long.
EXTRACTION_TIMEOUT_MS = 2000


# ============================================================
# OUTPUT SETTINGS
# ============================================================

REPORT_DIR = os.getenv("REVIEWS_REPORT_DIR", "report")

REVIEWS_JSON_FILENAME = "reviews.json"
REVIEWS_CSV_FILENAME = "reviews.csv"
REVIEWS_MARKDOWN_FILENAME = "reviews.md"
INSIGHT_REPORT_FILENAME = "report.md"

CSV_HEADER = "Name,Rate,Date,Content"


# ============================================================
# INSIGHT SETTINGS
# ============================================================

# Model used by the analysis assistant
INSIGHT_MODEL = os.getenv("REVIEWS_INSIGHT_MODEL", "gpt-4o-mini")

ASSISTANT_NAME = "Review Insight Analyst"

# Seconds between run status checks
RUN_POLL_INTERVAL = 2.0

# Give up (and cancel the run) after this many seconds
RUN_TIMEOUT_SECONDS = 600

ANALYSIS_PROMPT = """You are a product analyst. The attached JSON file contains user reviews for a single product.
Each review has a reviewer name, a star rating ("rate"), a date ("createdAt", YYYY/MM/DD) and the review text ("content").

Write a report in Markdown with these five sections:

## 1. Sentiment Distribution
- Share of positive, neutral and negative reviews, and how ratings are distributed
- Note any shift in sentiment over time if the dates show one

## 2. Feature Requests
- Features users ask for, grouped by theme, most requested first
- Quote short phrases from the reviews as evidence

## 3. Recurring Issues
- Bugs, complaints and pain points that come up more than once
- Estimate how often each appears

## 4. User Demographics and Usage
- What the reviews suggest about who the users are and how they use the product
- ONLY infer what the text supports; say so when the evidence is thin

## 5. Overall Insights
- The three to five most important takeaways for the product team
- Concrete recommendations tied to the findings above

Base every statement on the attached reviews. Do not invent reviews or numbers."""
