from datetime import datetime
from typing import Iterable, List

from tracker.meetings.models import Meeting


def format_date_medium(value: datetime) -> str:
    """Medium-style date, e.g. 'Feb 3, 2025'."""
    return f"{value:%b} {value.day}, {value.year}"


def render_meeting_row(meeting: Meeting) -> str:
    """
    Render one list row.

    Args:
        meeting: Meeting to render

    Returns:
        Three lines: name, 'position @ company', and the date
    """
    return "\n".join([
        meeting.name,
        meeting.headline,
        f"🗓 {format_date_medium(meeting.date)}",
    ])


def render_meeting_detail(meeting: Meeting) -> str:
    """Render the detail screen for a meeting as plaintext."""
    lines = [
        meeting.name,
        meeting.headline,
        f"Date: {format_date_medium(meeting.date)}",
        "-" * 40,
        meeting.formatted_phone_number,
        "-" * 40,
        "Purpose",
        meeting.purpose.label,
        "-" * 40,
        "Notes",
        meeting.notes,
    ]
    return "\n".join(lines)


def render_meeting_list(title: str, meetings: Iterable[Meeting]) -> str:
    """Render a titled list of meeting rows separated by blank lines."""
    lines: List[str] = [title, "=" * 50, ""]

    rows = [render_meeting_row(m) for m in meetings]
    if not rows:
        lines.append("No meetings.")
        return "\n".join(lines)

    lines.append("\n\n".join(rows))
    return "\n".join(lines)
