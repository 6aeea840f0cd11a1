"""Timestamp decomposition and business calendar predicates.

Timestamps are integer milliseconds since the Unix epoch, interpreted
in UTC. Day-of-week numbering starts at Sunday = 0.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone

from pyduedate._constants import (
    DAY_MSECS,
    DAYS_PER_WEEK,
    EPOCH_DAY_OF_WEEK,
    WORK_HOUR_END_MSECS,
    WORK_HOUR_START_MSECS,
    Weekday,
)

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)
_ONE_MSEC = timedelta(milliseconds=1)


@dataclass(frozen=True)
class CalendarParts:
    """UTC day of week and time of day of a timestamp."""

    day_of_week: int
    time_of_day_msecs: int


def get_utc_day(timestamp: int) -> int:
    """Return the UTC day of week of ``timestamp`` (Sunday is 0)."""
    return (timestamp // DAY_MSECS + EPOCH_DAY_OF_WEEK) % DAYS_PER_WEEK


def get_utc_time(timestamp: int) -> int:
    """Return msecs elapsed since UTC midnight of ``timestamp``."""
    return timestamp % DAY_MSECS


def timestamp_to_calendar_parts(timestamp: int) -> CalendarParts:
    return CalendarParts(
        day_of_week=get_utc_day(timestamp),
        time_of_day_msecs=get_utc_time(timestamp),
    )


def timestamp_to_datetime(timestamp: int) -> datetime:
    """Convert epoch msecs to an aware UTC datetime without float rounding."""
    return EPOCH + timedelta(milliseconds=timestamp)


def datetime_to_timestamp(value: datetime) -> int:
    """Convert a datetime to epoch msecs, truncating sub-millisecond parts.

    Naive datetimes are taken to be UTC; aware ones are converted to UTC.
    """
    if value.tzinfo is None or value.tzinfo.utcoffset(value) is None:
        logger.debug("naive datetime %s, assuming UTC", value.isoformat())
        value = value.replace(tzinfo=timezone.utc)
    return (value - EPOCH) // _ONE_MSEC


def is_working_day(timestamp: int) -> bool:
    return Weekday.SUNDAY < get_utc_day(timestamp) < Weekday.SATURDAY


def is_working_hour(timestamp: int) -> bool:
    """True if the UTC time of day is within 09:00-17:00, both ends included."""
    return WORK_HOUR_START_MSECS <= get_utc_time(timestamp) <= WORK_HOUR_END_MSECS


def is_valid_submit_date(timestamp: int) -> bool:
    """True if ``timestamp`` is on a working day in a working hour."""
    return is_working_day(timestamp) and is_working_hour(timestamp)


def is_not_valid_submit_date(timestamp: int) -> bool:
    return not is_valid_submit_date(timestamp)
