""" Datetime helpers shared by models and services... """

# Python Packages
from datetime import datetime, timezone


def utc_now() -> datetime:
    """ Timezone-aware current UTC time... """

    return datetime.now(timezone.utc)


def as_utc(value):
    """
    Normalise a stored datetime to aware UTC.

    SQLite hands back naive datetimes even for timezone=True columns;
    every value is written as UTC, so a naive value is UTC.
    """

    if value is None:
        return None

    if value.tzinfo is None:
        return value.replace(tzinfo = timezone.utc)

    return value.astimezone(timezone.utc)


def format_datetime(value):
    """ ISO-8601 string for API responses... """

    value = as_utc(value)
    return value.isoformat() if value else None
