"""
Pydantic schemas for harvested review data.
Uses camelCase for JSON output, matching the exported files.
All fields are always present (rate is null if not found).
"""
from typing import List, Optional
from pydantic import BaseModel, ConfigDict


class ReviewRecord(BaseModel):
    """One review, as written to the export files"""
    model_config = ConfigDict(frozen=True)

    name: str
    content: str
    rate: Optional[str] = None
    createdAt: str


def records_to_dicts(records: List[ReviewRecord]) -> List[dict]:
    return [record.model_dump(mode="json") for record in records]


def records_from_dicts(items: List[dict]) -> List[ReviewRecord]:
    return [ReviewRecord.model_validate(item) for item in items]
