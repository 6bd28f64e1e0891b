from datetime import datetime, timedelta
from typing import List, Optional

from tracker.meetings.models import Meeting, MeetingPurpose
from tracker.utils.clock import local_now


def sample_meetings(now: Optional[datetime] = None) -> List[Meeting]:
    """Two illustrative meetings: one an hour ahead, one a day behind."""
    now = now or local_now()
    return [
        Meeting(
            name="Alice Smith",
            company="Acme Inc.",
            position="Software Engineer",
            phone_number="7058134343",
            date=now + timedelta(hours=1),
            purpose=MeetingPurpose.NETWORKING,
            notes="Had a great conversation about SwiftUI.",
        ),
        Meeting(
            name="Bob Johnson",
            company="TechCorp",
            position="Product Manager",
            phone_number="14344343434",
            date=now - timedelta(days=1),
            purpose=MeetingPurpose.JOB_INQUIRY,
            notes="Discussed upcoming opportunities.",
        ),
    ]
