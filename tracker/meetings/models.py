from datetime import date as date_type, datetime
from enum import Enum
from typing import Dict, List
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field, field_validator

from tracker.meetings.phone import format_phone_number
from tracker.utils.clock import as_local


class MeetingPurpose(str, Enum):
    """Reason for a meeting. The value is the display label and the serialized form."""

    NETWORKING = "Networking"
    JOB_INQUIRY = "Job Inquiry"
    ADVICE = "Advice"
    COLLABORATION = "Collaboration"
    OTHER = "Other"

    @property
    def label(self) -> str:
        return self.value

    @classmethod
    def from_label(cls, label: str) -> "MeetingPurpose":
        try:
            return _PURPOSE_BY_LABEL[label]
        except KeyError:
            raise ValueError(f"Unknown meeting purpose: {label!r}") from None

    @classmethod
    def labels(cls) -> List[str]:
        return [purpose.value for purpose in cls]


_PURPOSE_BY_LABEL: Dict[str, MeetingPurpose] = {purpose.value: purpose for purpose in MeetingPurpose}


class Meeting(BaseModel):
    """One recorded contact with a person. Immutable once created."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: UUID = Field(default_factory=uuid4)
    name: str
    company: str
    position: str
    phone_number: str = Field(alias="phoneNumber")  # raw, as typed
    date: datetime
    purpose: MeetingPurpose
    notes: str = ""

    @field_validator("date", mode="before")
    @classmethod
    def _date_to_datetime(cls, value):
        if isinstance(value, date_type) and not isinstance(value, datetime):
            return as_local(value)
        return value

    @field_validator("date")
    @classmethod
    def _ensure_aware(cls, value: datetime) -> datetime:
        return as_local(value)

    @property
    def headline(self) -> str:
        return f"{self.position} @ {self.company}"

    @property
    def formatted_phone_number(self) -> str:
        return format_phone_number(self.phone_number)
