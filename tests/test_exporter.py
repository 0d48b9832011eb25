"""
Unit tests for the JSON / CSV / Markdown exporters.
"""
import json
from pathlib import Path
from unittest.mock import patch

import pytest

from exporter import (
    ExportError, records_from_json, to_csv, to_json, to_markdown, write_exports,
)
from schemas import ReviewRecord


@pytest.fixture
def records():
    return [
        ReviewRecord(name="Alice", content='Great, "fast" tool', rate="5", createdAt="2024/09/07"),
        ReviewRecord(name="Smith, Bob", content="Crashes\non start", rate=None, createdAt="2023/01/01"),
    ]


def test_csv_quotes_only_content(records):
    lines = to_csv(records).split("\n")

    assert lines[0] == "Name,Rate,Date,Content"
    assert lines[1] == 'Alice,5,2024/09/07,"Great, ""fast"" tool"'
    # name is not escaped, missing rate is an empty field
    assert lines[2] == 'Smith, Bob,,2023/01/01,"Crashes'
    assert lines[3] == 'on start"'


def test_csv_with_no_records():
    assert to_csv([]) == "Name,Rate,Date,Content\n"


def test_json_round_trip(records):
    assert records_from_json(to_json(records)) == records


def test_json_keeps_all_keys(records):
    data = json.loads(to_json(records))
    assert data[1] == {
        "name": "Smith, Bob",
        "content": "Crashes\non start",
        "rate": None,
        "createdAt": "2023/01/01",
    }


def test_json_keeps_non_ascii():
    text = to_json([ReviewRecord(name="Zoë", content="très bien", rate="4", createdAt="2024/01/02")])
    assert "Zoë" in text and "très bien" in text


def test_markdown_blocks(records):
    assert to_markdown(records) == (
        "Name:Alice\nRate:5\nDate:2024/09/07\nContent:Great, \"fast\" tool"
        "\n\n"
        "Name:Smith, Bob\nRate:\nDate:2023/01/01\nContent:Crashes\non start"
    )


def test_write_exports(tmp_path, records):
    paths = write_exports(records, tmp_path / "report")

    assert paths.json_path == tmp_path / "report" / "reviews.json"
    assert records_from_json(paths.json_path.read_text(encoding="utf-8")) == records
    assert paths.csv_path.read_text(encoding="utf-8") == to_csv(records)
    assert paths.markdown_path.read_text(encoding="utf-8") == to_markdown(records)


def test_failed_write_does_not_stop_others(tmp_path, records):
    import exporter

    real_write = exporter._write

    def flaky_write(path, render, items):
        if Path(path).suffix == ".csv":
            raise PermissionError("read-only")
        real_write(path, render, items)

    with patch("exporter._write", side_effect=flaky_write):
        with pytest.raises(ExportError, match="reviews.csv"):
            write_exports(records, tmp_path)

    assert (tmp_path / "reviews.json").exists()
    assert (tmp_path / "reviews.md").exists()
    assert not (tmp_path / "reviews.csv").exists()
