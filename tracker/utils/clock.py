from datetime import date, datetime, time


def local_now() -> datetime:
    """Current wall-clock time as an aware datetime in the platform's local zone."""
    return datetime.now().astimezone()


def as_local(value) -> datetime:
    """
    Coerce a date or datetime into an aware datetime.

    Naive datetimes are interpreted as local time; a bare date becomes local midnight.
    """
    if not isinstance(value, datetime) and isinstance(value, date):
        value = datetime.combine(value, time.min)
    if value.tzinfo is None:
        return value.astimezone()
    return value
