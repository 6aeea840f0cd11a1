"""pyduedate - Calculate SLA due dates over a Mon-Fri, 09:00-17:00 UTC calendar."""

from __future__ import annotations

import logging
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pyduedate")
except PackageNotFoundError:  # running from a source checkout
    __version__ = "0.0.0.dev0"

from pyduedate._calendar import (
    CalendarParts,
    datetime_to_timestamp,
    get_utc_day,
    get_utc_time,
    is_not_valid_submit_date,
    is_valid_submit_date,
    is_working_day,
    is_working_hour,
    timestamp_to_calendar_parts,
    timestamp_to_datetime,
)
from pyduedate._constants import Weekday
from pyduedate._engine import CalculationState, calculate_due_date, calculate_due_datetime
from pyduedate._errors import DueDateError, InvalidSubmitDateError, InvalidTurnaroundError
from pyduedate._units import (
    add_days_to_msecs,
    add_hours_to_msecs,
    add_minutes_to_msecs,
    add_seconds_to_msecs,
    days_to_msecs,
    hours_to_msecs,
    minutes_to_msecs,
    seconds_to_msecs,
)

__all__ = [
    "calculate_due_date",
    "calculate_due_datetime",
    "is_working_day",
    "is_working_hour",
    "is_valid_submit_date",
    "is_not_valid_submit_date",
    "timestamp_to_calendar_parts",
    "timestamp_to_datetime",
    "datetime_to_timestamp",
    "get_utc_day",
    "get_utc_time",
    "seconds_to_msecs",
    "minutes_to_msecs",
    "hours_to_msecs",
    "days_to_msecs",
    "add_seconds_to_msecs",
    "add_minutes_to_msecs",
    "add_hours_to_msecs",
    "add_days_to_msecs",
    "CalculationState",
    "CalendarParts",
    "Weekday",
    "DueDateError",
    "InvalidSubmitDateError",
    "InvalidTurnaroundError",
]

logging.getLogger(__name__).addHandler(logging.NullHandler())
