from datetime import date, datetime, timedelta, timezone
from uuid import UUID, uuid4

import pytest
from pydantic import ValidationError

from tracker.meetings.models import Meeting, MeetingPurpose
from tracker.meetings.serialization import MeetingDecodeError, REQUIRED_FIELDS, decode, encode


def _meeting(**overrides) -> Meeting:
    fields = dict(
        name="Alice Smith",
        company="Acme Inc.",
        position="Software Engineer",
        phone_number="7058134343",
        date=datetime(2026, 3, 1, 15, 30, 12, 500, tzinfo=timezone.utc),
        purpose=MeetingPurpose.NETWORKING,
        notes="Talked about hiring.",
    )
    fields.update(overrides)
    return Meeting(**fields)


class TestMeetingPurpose:
    """Test the purpose enumeration and its labels."""

    def test_labels_in_declaration_order(self):
        assert MeetingPurpose.labels() == [
            "Networking", "Job Inquiry", "Advice", "Collaboration", "Other"
        ]

    def test_label_is_value(self):
        assert MeetingPurpose.JOB_INQUIRY.label == "Job Inquiry"
        assert MeetingPurpose.JOB_INQUIRY.value == "Job Inquiry"

    def test_from_label(self):
        for purpose in MeetingPurpose:
            assert MeetingPurpose.from_label(purpose.label) is purpose

    def test_from_label_unknown(self):
        with pytest.raises(ValueError, match="Unknown meeting purpose"):
            MeetingPurpose.from_label("NotARealPurpose")

    def test_from_label_is_exact(self):
        """Labels are matched exactly, not by member name or case."""
        with pytest.raises(ValueError):
            MeetingPurpose.from_label("JOB_INQUIRY")
        with pytest.raises(ValueError):
            MeetingPurpose.from_label("networking")


class TestMeeting:
    """Test the Meeting model."""

    def test_generates_unique_ids(self):
        ids = {_meeting().id for _ in range(50)}
        assert len(ids) == 50
        assert all(isinstance(i, UUID) for i in ids)

    def test_explicit_id_is_kept(self):
        meeting_id = uuid4()
        assert _meeting(id=meeting_id).id == meeting_id

    def test_is_immutable(self):
        meeting = _meeting()
        with pytest.raises(ValidationError):
            meeting.name = "Someone Else"
        with pytest.raises(ValidationError):
            meeting.id = uuid4()

    def test_accepts_empty_strings(self):
        """Non-empty checks belong to the input layer, not the model."""
        meeting = _meeting(name="", company="", position="", phone_number="", notes="")
        assert meeting.name == ""
        assert meeting.phone_number == ""

    def test_phone_number_stored_raw(self):
        meeting = _meeting(phone_number="705.813.4343")
        assert meeting.phone_number == "705.813.4343"
        assert meeting.formatted_phone_number == "(705) 813-4343"

    def test_phone_number_alias(self):
        meeting = Meeting(
            name="A", company="B", position="C", phoneNumber="123",
            date=datetime(2026, 1, 1, tzinfo=timezone.utc), purpose="Advice", notes="",
        )
        assert meeting.phone_number == "123"
        assert meeting.purpose is MeetingPurpose.ADVICE

    def test_naive_date_becomes_local_aware(self):
        naive = datetime(2026, 3, 1, 9, 0)
        meeting = _meeting(date=naive)
        assert meeting.date.tzinfo is not None
        assert meeting.date == naive.astimezone()

    def test_plain_date_becomes_local_midnight(self):
        meeting = _meeting(date=date(2026, 3, 1))
        assert meeting.date.tzinfo is not None
        assert (meeting.date.year, meeting.date.month, meeting.date.day) == (2026, 3, 1)
        assert (meeting.date.hour, meeting.date.minute) == (0, 0)

    def test_headline(self):
        assert _meeting().headline == "Software Engineer @ Acme Inc."

    def test_unknown_purpose_rejected(self):
        with pytest.raises(ValidationError):
            _meeting(purpose="NotARealPurpose")


class TestSerialization:
    """Test encoding meetings to records and decoding them back."""

    def test_encode_fields(self):
        meeting = _meeting(purpose=MeetingPurpose.JOB_INQUIRY)
        record = encode(meeting)

        assert set(record) == set(REQUIRED_FIELDS)
        assert record["id"] == str(meeting.id)
        assert record["phoneNumber"] == "7058134343"
        assert record["purpose"] == "Job Inquiry"
        assert isinstance(record["date"], str)
        assert record["date"].startswith("2026-03-01T15:30:12")

    def test_round_trip(self):
        meeting = _meeting()
        assert decode(encode(meeting)) == meeting

    def test_round_trip_local_naive_date(self):
        meeting = _meeting(date=datetime(2025, 11, 2, 1, 30), notes="")
        assert decode(encode(meeting)) == meeting

    def test_round_trip_every_purpose(self):
        for purpose in MeetingPurpose:
            meeting = _meeting(purpose=purpose)
            assert decode(encode(meeting)).purpose is purpose

    def test_decode_unknown_purpose(self):
        record = encode(_meeting())
        record["purpose"] = "NotARealPurpose"

        with pytest.raises(MeetingDecodeError) as exc_info:
            decode(record)
        assert "purpose" in exc_info.value.fields

    def test_decode_missing_field(self):
        record = encode(_meeting())
        del record["notes"]
        del record["id"]

        with pytest.raises(MeetingDecodeError) as exc_info:
            decode(record)
        assert exc_info.value.fields == ["id", "notes"]

    def test_decode_wrong_type(self):
        record = encode(_meeting())
        record["name"] = 42

        with pytest.raises(MeetingDecodeError) as exc_info:
            decode(record)
        assert "name" in exc_info.value.fields

    def test_decode_bad_date(self):
        record = encode(_meeting())
        record["date"] = "next tuesday"

        with pytest.raises(MeetingDecodeError) as exc_info:
            decode(record)
        assert "date" in exc_info.value.fields

    @pytest.mark.parametrize("value", [0, 1767225600.5, None])
    def test_decode_numeric_date_rejected(self, value):
        """Dates must be ISO strings; timestamps are not silently converted."""
        record = encode(_meeting())
        record["date"] = value

        with pytest.raises(MeetingDecodeError) as exc_info:
            decode(record)
        assert exc_info.value.fields == ["date"]

    def test_decode_bad_id(self):
        record = encode(_meeting())
        record["id"] = "not-a-uuid"

        with pytest.raises(MeetingDecodeError):
            decode(record)

    def test_decode_non_mapping(self):
        with pytest.raises(MeetingDecodeError, match="Expected a mapping"):
            decode(["not", "a", "record"])

    def test_decode_error_is_value_error(self):
        with pytest.raises(ValueError):
            decode({})
