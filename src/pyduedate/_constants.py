"""Business calendar constants: Mon-Fri, 09:00-17:00 UTC."""

import enum

from pyduedate._units import days_to_msecs, hours_to_msecs


class Weekday(enum.IntEnum):
    """UTC day of week, numbered from Sunday = 0."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6


EPOCH_DAY_OF_WEEK = Weekday.THURSDAY
"""Day of week of 1970-01-01."""

DAYS_PER_WEEK = 7

NUM_WORK_DAYS = 5
"""Working days in one calendar week."""

NUM_WEEKEND_DAYS = 2
"""Calendar days skipped per week boundary crossed."""

WORK_HOUR_START = 9
WORK_HOUR_END = 17
WORK_HOURS_PER_DAY = 8

WORK_HOUR_START_MSECS = hours_to_msecs(WORK_HOUR_START)
"""Start of the working window, in msecs since UTC midnight."""

WORK_HOUR_END_MSECS = hours_to_msecs(WORK_HOUR_END)
"""End of the working window (inclusive), in msecs since UTC midnight."""

WORK_DAY_SPAN_MSECS = hours_to_msecs(WORK_HOURS_PER_DAY)
"""Length of one working day in msecs."""

DAY_MSECS = days_to_msecs(1)
"""Length of one calendar day in msecs."""
