from datetime import datetime
from typing import Any, Dict, Optional

from tracker.meetings.models import Meeting, MeetingPurpose
from tracker.meetings.phone import dial_uri
from tracker.meetings.selectors import select_tab, upcoming
from tracker.meetings.store import MeetingStore, get_meeting_store
from tracker.rendering.plaintext import format_date_medium
from tracker.schemas.meetings import MeetingDetailModel, MeetingSummaryModel
from tracker.utils.clock import local_now


TAB_TITLES = {
    "upcoming": "Upcoming Chats",
    "history": "History",
}

SEARCH_PROMPTS = {
    "upcoming": "Search upcoming chats",
    "history": "Search past chats",
}


def to_summary_model(meeting: Meeting) -> MeetingSummaryModel:
    return MeetingSummaryModel(
        id=meeting.id,
        name=meeting.name,
        company=meeting.company,
        position=meeting.position,
        headline=meeting.headline,
        date=meeting.date,
        date_human=format_date_medium(meeting.date),
    )


def to_detail_model(meeting: Meeting) -> MeetingDetailModel:
    return MeetingDetailModel(
        **to_summary_model(meeting).model_dump(),
        phone_number=meeting.phone_number,
        phone_display=meeting.formatted_phone_number,
        dial_uri=dial_uri(meeting.phone_number),
        purpose=meeting.purpose.label,
        notes=meeting.notes,
    )


def build_list_context(
    tab: str,
    query: str = "",
    now: Optional[datetime] = None,
    store: Optional[MeetingStore] = None,
) -> Dict[str, Any]:
    """
    Build the context for one tab of the meeting list.

    Args:
        tab: 'upcoming' or 'history'
        query: Search text; empty shows the whole tab
        now: Evaluation time. Defaults to the current local time.
        store: Store to read from. Defaults to the global store.

    Returns:
        Dict with tab, title, search_prompt, query, now and meetings (Meeting objects)
    """
    now = now or local_now()
    if store is None:
        store = get_meeting_store()
    meetings = select_tab(store.snapshot(), tab, query, now)
    return {
        "tab": tab,
        "title": TAB_TITLES[tab],
        "search_prompt": SEARCH_PROMPTS[tab],
        "query": query,
        "now": now,
        "meetings": meetings,
    }


def build_detail_context(meeting: Meeting, now: Optional[datetime] = None) -> Dict[str, Any]:
    """Detail context; tab is the tab the meeting currently belongs to."""
    tab = "upcoming" if upcoming([meeting], now) else "history"
    return {
        "title": "Meeting Details",
        "tab": tab,
        "meeting": to_detail_model(meeting),
    }


def build_new_meeting_context() -> Dict[str, Any]:
    return {
        "title": "New Meeting",
        "purposes": MeetingPurpose.labels(),
        "default_purpose": MeetingPurpose.NETWORKING.label,
        "today": local_now().date().isoformat(),
    }
