"""
Derived views over a store snapshot.

``now`` is read on every call, so a meeting moves from upcoming to history
purely through the passage of time.
"""

import unicodedata
from datetime import datetime
from typing import Iterable, List, Optional

from tracker.meetings.models import Meeting
from tracker.utils.clock import as_local, local_now


TABS = ("upcoming", "history")


def _resolve_now(now: Optional[datetime]) -> datetime:
    return local_now() if now is None else as_local(now)


def upcoming(meetings: Iterable[Meeting], now: Optional[datetime] = None) -> List[Meeting]:
    """Meetings at or after now, in store order."""
    now = _resolve_now(now)
    return [m for m in meetings if m.date >= now]


def history(meetings: Iterable[Meeting], now: Optional[datetime] = None) -> List[Meeting]:
    """Meetings strictly before now, in store order."""
    now = _resolve_now(now)
    return [m for m in meetings if m.date < now]


def _fold(text: str) -> str:
    return unicodedata.normalize("NFKC", text).casefold()


def search(meetings: Iterable[Meeting], query: str) -> List[Meeting]:
    """
    Filter meetings by a case-insensitive substring of name, company or position.

    An empty query returns every meeting unchanged.
    """
    if not query:
        return list(meetings)

    needle = _fold(query)
    return [
        m for m in meetings
        if needle in _fold(m.name) or needle in _fold(m.company) or needle in _fold(m.position)
    ]


def select_tab(
    meetings: Iterable[Meeting],
    tab: str,
    query: str = "",
    now: Optional[datetime] = None,
) -> List[Meeting]:
    """
    Build the list shown on a tab: partition by time first, then search.

    Raises:
        ValueError: If tab is not 'upcoming' or 'history'
    """
    if tab == "upcoming":
        partition = upcoming(meetings, now)
    elif tab == "history":
        partition = history(meetings, now)
    else:
        raise ValueError(f"Unknown tab: {tab!r}")
    return search(partition, query)
