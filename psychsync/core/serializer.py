"""Canonical JSON form of an answer record.

Keys are sorted, unset optional fields are omitted, and timestamps are
ISO-8601 UTC with whole seconds (``2025-08-28T09:15:00Z``). The same record
always produces the same text.
"""

import json
from datetime import datetime, timezone
from typing import Any

from psychsync.models.answers import AnswerRecord

ISO_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def format_timestamp(value: datetime) -> str:
    """Render an aware datetime as ISO-8601 UTC."""
    return value.astimezone(timezone.utc).strftime(ISO_FORMAT)


def to_payload(record: AnswerRecord) -> dict[str, Any]:
    """Return the record as a JSON-ready dict with sorted camelCase keys."""
    data = record.model_dump(by_alias=True, exclude_none=True)
    completed = data.get("completedDate")
    if isinstance(completed, datetime):
        data["completedDate"] = format_timestamp(completed)
    return {key: data[key] for key in sorted(data)}


def serialize(record: AnswerRecord, indent: int | None = 2) -> str:
    """Encode a record as canonical JSON text."""
    return json.dumps(
        to_payload(record), indent=indent, sort_keys=True, ensure_ascii=False
    )


def deserialize(text: str | bytes) -> AnswerRecord:
    """Decode JSON produced by :func:`serialize`.

    Raises:
        pydantic.ValidationError: If the JSON does not describe a valid record.
    """
    return AnswerRecord.model_validate_json(text)
