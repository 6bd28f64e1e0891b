"""
Structured-record encoding for meetings.

Records use the field names ``id``, ``name``, ``company``, ``position``,
``phoneNumber``, ``date``, ``purpose`` and ``notes``. Dates are ISO 8601
strings and purposes are their labels.
"""

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List

from pydantic import ValidationError

from tracker.meetings.models import Meeting


REQUIRED_FIELDS = ("id", "name", "company", "position", "phoneNumber", "date", "purpose", "notes")


class MeetingDecodeError(ValueError):
    """Raised when a record cannot be turned into a Meeting."""

    def __init__(self, message: str, fields: Iterable[str] = ()):
        super().__init__(message)
        self.fields: List[str] = list(fields)


def encode(meeting: Meeting) -> Dict[str, Any]:
    """Encode a meeting as a JSON-compatible record."""
    return meeting.model_dump(mode="json", by_alias=True)


def decode(record: Any) -> Meeting:
    """
    Decode a record produced by ``encode``.

    Args:
        record: Mapping with every field in REQUIRED_FIELDS

    Returns:
        The decoded Meeting

    Raises:
        MeetingDecodeError: If the record is not a mapping, a field is missing
            or has the wrong type, or the purpose label is unknown
    """
    if not isinstance(record, Mapping):
        raise MeetingDecodeError(f"Expected a mapping, got {type(record).__name__}")

    missing = [name for name in REQUIRED_FIELDS if name not in record]
    if missing:
        raise MeetingDecodeError(f"Missing required fields: {', '.join(missing)}", missing)

    # Dates are ISO 8601 strings; numbers would otherwise pass as timestamps
    if not isinstance(record["date"], str):
        raise MeetingDecodeError(
            f"Invalid meeting record: date must be an ISO 8601 string, got {type(record['date']).__name__}",
            ["date"],
        )

    try:
        return Meeting.model_validate(dict(record))
    except ValidationError as e:
        fields = [".".join(str(part) for part in err["loc"]) for err in e.errors()]
        raise MeetingDecodeError(f"Invalid meeting record: {', '.join(fields)}", fields) from e
