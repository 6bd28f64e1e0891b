"""
In-memory meeting store.

The store owns the ordered list of meetings for the lifetime of the process
and is the only mutable state in the application. Every mutation notifies
subscribers synchronously so that views can be recomputed.
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Optional, Sequence, Tuple
from uuid import UUID

from tracker.core.config import load_config
from tracker.data.sample_meetings import sample_meetings
from tracker.meetings.models import Meeting
from tracker.observability.logger import log_event
from tracker.utils.clock import local_now


@dataclass(frozen=True)
class StoreChange:
    """Notification payload describing one mutation."""

    action: str
    meeting_ids: Tuple[UUID, ...]
    size: int
    changed_at: datetime = field(default_factory=local_now)


Subscriber = Callable[[StoreChange], None]


class MeetingStore:
    """Ordered, observable collection of meetings."""

    def __init__(self, meetings: Optional[Iterable[Meeting]] = None) -> None:
        self._meetings: List[Meeting] = list(meetings or [])
        self._subscribers: List[Subscriber] = []
        self.last_change: Optional[StoreChange] = None

    def __len__(self) -> int:
        return len(self._meetings)

    def snapshot(self) -> Tuple[Meeting, ...]:
        """Return the meetings as they are right now, in insertion order."""
        return tuple(self._meetings)

    def get(self, meeting_id: UUID) -> Optional[Meeting]:
        for meeting in self._meetings:
            if meeting.id == meeting_id:
                return meeting
        return None

    def add(self, meeting: Meeting) -> None:
        """Append a meeting to the end of the collection."""
        self._meetings.append(meeting)
        self._notify("added", (meeting.id,))

    def delete(self, ids: Iterable[UUID]) -> int:
        """
        Remove every meeting whose id is in ids.

        Args:
            ids: Identifiers to remove. Unknown ids are ignored.

        Returns:
            Number of meetings removed
        """
        targets = set(ids)
        if not targets:
            return 0

        removed = tuple(m.id for m in self._meetings if m.id in targets)
        if not removed:
            return 0

        self._meetings = [m for m in self._meetings if m.id not in targets]
        self._notify("deleted", removed)
        return len(removed)

    def delete_at(self, view: Sequence[Meeting], offsets: Iterable[int]) -> int:
        """
        Remove meetings by their position in a displayed view.

        Offsets index into view (for example a filtered tab), not into the
        store. Out-of-range offsets are ignored.

        Returns:
            Number of meetings removed
        """
        ids = {view[i].id for i in offsets if 0 <= i < len(view)}
        return self.delete(ids)

    def subscribe(self, callback: Subscriber) -> Callable[[], None]:
        """
        Register a callback invoked after every mutation.

        Returns:
            A function that removes the subscription
        """
        self._subscribers.append(callback)

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def _notify(self, action: str, meeting_ids: Tuple[UUID, ...]) -> None:
        change = StoreChange(action=action, meeting_ids=meeting_ids, size=len(self._meetings))
        self.last_change = change
        for callback in list(self._subscribers):
            callback(change)


def log_store_change(change: StoreChange) -> None:
    """Subscriber that writes each store mutation to the structured log."""
    meeting_id = change.meeting_ids[0] if len(change.meeting_ids) == 1 else None
    log_event(
        action=change.action,
        source="store",
        count=len(change.meeting_ids),
        meeting_id=meeting_id,
        size=change.size,
    )


# Process-wide store
_meeting_store: Optional[MeetingStore] = None


def get_meeting_store() -> MeetingStore:
    """Get the global meeting store, seeding it on first use if configured."""
    global _meeting_store
    if _meeting_store is None:
        cfg = load_config()
        seed = sample_meetings() if cfg.seed_sample_data else []
        _meeting_store = MeetingStore(seed)
        _meeting_store.subscribe(log_store_change)
        log_event(action="seeded", source="seed", count=len(seed))
    return _meeting_store


def reset_meeting_store() -> None:
    """Reset the global meeting store instance."""
    global _meeting_store
    _meeting_store = None
