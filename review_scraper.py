"""
Review Scraper - Main Pipeline

Usage:
    python review_scraper.py --url https://example.com/product/reviews
    python review_scraper.py -u https://example.com/product/reviews --apiKey sk-...

Stages:
    1. Open the page and click "load more" until every review is shown
    2. Extract each review block (bad blocks are skipped)
    3. Write report/reviews.json, report/reviews.csv, report/reviews.md
    4. With --apiKey: analyze reviews.json with OpenAI and write report/report.md
"""
import argparse
import sys
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

import config
from browser import open_page
from exporter import write_exports
from harvester import harvest
from insights import InsightPipeline, create_client, write_report
from pagination import expand_all


def validate_url(url: Optional[str]) -> Optional[str]:
    """Return an error message for an unusable URL, or None if it is fine"""
    if not url or not url.strip():
        return "--url is required"
    parsed = urlparse(url.strip())
    if parsed.scheme not in ("http", "https") or not parsed.netloc:
        return f"Invalid URL: {url!r} (expected an absolute http(s) URL)"
    return None


def scrape_reviews(url: str, headless: bool = config.HEADLESS):
    """Stages 1-2: expand the page and harvest every review on it"""
    with open_page(url, headless=headless) as page:
        print(f"\n[1/3] Expanding review list...")
        expansion = expand_all(page)

        print(f"\n[2/3] Extracting reviews...")
        records = harvest(page)

    return records, expansion


def run_pipeline(
    url: str,
    api_key: Optional[str] = None,
    report_dir: str = config.REPORT_DIR,
    headless: bool = config.HEADLESS,
) -> int:
    report_dir = Path(report_dir)

    print("=" * 60)
    print("REVIEW SCRAPER")
    print("=" * 60)
    print(f"URL: {url}")
    print(f"Output: {report_dir}")
    print(f"Insights: {config.INSIGHT_MODEL if api_key else 'Disabled'}")
    print("=" * 60)

    records = []
    expansion = None

    try:
        records, expansion = scrape_reviews(url, headless=headless)

        print(f"\n[3/3] Writing exports...")
        paths = write_exports(records, report_dir)

        if api_key:
            print(f"\n[+] Generating insight report ({config.INSIGHT_MODEL})...")
            pipeline = InsightPipeline(create_client(api_key))
            report = pipeline.summarize(paths.json_path)
            report_path = write_report(report, report_dir / config.INSIGHT_REPORT_FILENAME)
            print(f"  Saved: {report_path}")
    finally:
        print("\n" + "=" * 60)
        print("SUMMARY")
        print("=" * 60)
        if expansion is None:
            print("Load more: not run")
        elif expansion.complete:
            print(f"Load more: complete ({expansion.clicks} clicks)")
        else:
            print(f"Load more: stopped early after {expansion.clicks} clicks ({expansion.status.value})")
        print(f"Output folder: {report_dir}")
        print(f"Harvested {len(records)} reviews")

    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="Review Scraper - Extract reviews from a paginated page into JSON, CSV and Markdown"
    )
    parser.add_argument(
        "--url", "-u",
        help="Page with the reviews to scrape"
    )
    parser.add_argument(
        "--apiKey",
        help="OpenAI API key; when given, also writes an AI insight report"
    )

    args = parser.parse_args(argv)

    error = validate_url(args.url)
    if error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        return run_pipeline(url=args.url.strip(), api_key=args.apiKey, report_dir=config.REPORT_DIR)
    except KeyboardInterrupt:
        print("\nInterrupted", file=sys.stderr)
        return 1
    except Exception as e:
        print(f"\n✗ Pipeline failed: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
