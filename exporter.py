"""
Exporter module - writes harvested reviews as JSON, CSV and Markdown.

The CSV writer only quotes the content column. Commas or newlines in
name, rate or date are written as-is.
"""
import json
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, List

import config
from schemas import ReviewRecord, records_from_dicts, records_to_dicts


class ExportError(Exception):
    """One or more export files could not be written"""


@dataclass
class ExportPaths:
    json_path: Path
    csv_path: Path
    markdown_path: Path


def _rate(record: ReviewRecord) -> str:
    return record.rate if record.rate is not None else ""


def to_json(records: List[ReviewRecord]) -> str:
    return json.dumps(records_to_dicts(records), indent=2, ensure_ascii=False)


def records_from_json(text: str) -> List[ReviewRecord]:
    return records_from_dicts(json.loads(text))


def csv_quote(value: str) -> str:
    return '"' + value.replace('"', '""') + '"'


def to_csv(records: List[ReviewRecord]) -> str:
    lines = [config.CSV_HEADER]
    for record in records:
        lines.append(f"{record.name},{_rate(record)},{record.createdAt},{csv_quote(record.content)}")
    return "\n".join(lines) + "\n"


def to_markdown(records: List[ReviewRecord]) -> str:
    blocks = [
        f"Name:{record.name}\n"
        f"Rate:{_rate(record)}\n"
        f"Date:{record.createdAt}\n"
        f"Content:{record.content}"
        for record in records
    ]
    return "\n\n".join(blocks)


def _write(path: Path, render: Callable[[List[ReviewRecord]], str], records: List[ReviewRecord]) -> None:
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(render(records))


def write_exports(records: List[ReviewRecord], report_dir) -> ExportPaths:
    """
    Write reviews.json, reviews.csv and reviews.md into report_dir.
    Each file is written on its own; a failure in one does not skip the others.
    Raises ExportError afterwards if any write failed.
    """
    report_dir = Path(report_dir)
    report_dir.mkdir(parents=True, exist_ok=True)

    paths = ExportPaths(
        json_path=report_dir / config.REVIEWS_JSON_FILENAME,
        csv_path=report_dir / config.REVIEWS_CSV_FILENAME,
        markdown_path=report_dir / config.REVIEWS_MARKDOWN_FILENAME,
    )

    jobs = [
        (paths.json_path, to_json),
        (paths.csv_path, to_csv),
        (paths.markdown_path, to_markdown),
    ]

    failures = []
    for path, render in jobs:
        try:
            _write(path, render, records)
            print(f"  Saved: {path}")
        except OSError as e:
            print(f"  ✗ Failed to write {path}: {e}")
            failures.append(f"{path.name} ({e})")

    if failures:
        raise ExportError("Could not write " + ", ".join(failures))

    return paths
