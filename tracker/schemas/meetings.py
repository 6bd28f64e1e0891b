from datetime import datetime
from typing import List, Literal, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from tracker.meetings.models import MeetingPurpose


class MeetingCreateRequest(BaseModel):
    # Required contact fields must be non-empty, same as the add form's Save button
    name: str = Field(min_length=1)
    company: str = Field(min_length=1)
    position: str = Field(min_length=1)
    phone_number: str = Field(min_length=1)
    date: Optional[datetime] = None  # defaults to now
    purpose: MeetingPurpose = MeetingPurpose.NETWORKING
    notes: str = ""


class MeetingSummaryModel(BaseModel):
    id: UUID
    name: str
    company: str
    position: str
    headline: str
    date: datetime
    date_human: str


class MeetingDetailModel(MeetingSummaryModel):
    phone_number: str
    phone_display: str
    dial_uri: str
    purpose: str
    notes: str


class MeetingListModel(BaseModel):
    ok: bool = True
    tab: Literal["upcoming", "history"]
    title: str
    query: str = ""
    now: datetime
    meetings: List[MeetingSummaryModel]


class DeleteByIdsRequest(BaseModel):
    ids: List[UUID]


class DeleteAtRequest(BaseModel):
    offsets: List[int]
    q: str = ""


class DeleteResult(BaseModel):
    ok: bool = True
    deleted: int
