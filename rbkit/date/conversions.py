from __future__ import annotations
from datetime import datetime, timezone


def utc(dt: datetime) -> datetime:
    """
    Same instant as `dt`, as an aware datetime in UTC.
    Naive datetimes are taken as local time.
    """
    return dt.astimezone(timezone.utc)


def to_utc(dt: datetime) -> datetime:
    return utc(dt)
