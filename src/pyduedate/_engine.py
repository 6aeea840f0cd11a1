"""Due-date calculation.

The turnaround time is split into whole working days and a sub-day
remainder, then a fixed sequence of corrections turns that split into
a calendar offset from the submit date:

1. a whole-day turnaround submitted exactly at day start ends at the
   end of the previous day instead of the start of the next one,
2. time running past 17:00 continues from 09:00 on the next day,
3. every Friday -> Monday boundary crossed adds the two weekend days.

Each correction reads the state produced by the one before it, so the
order of ``_CORRECTIONS`` is significant.
"""

from __future__ import annotations

import logging
import math
from collections.abc import Callable
from dataclasses import dataclass, replace
from datetime import datetime

from pyduedate._calendar import (
    datetime_to_timestamp,
    get_utc_day,
    get_utc_time,
    is_not_valid_submit_date,
    timestamp_to_calendar_parts,
    timestamp_to_datetime,
)
from pyduedate._constants import (
    NUM_WEEKEND_DAYS,
    NUM_WORK_DAYS,
    WORK_DAY_SPAN_MSECS,
    WORK_HOUR_END_MSECS,
    WORK_HOUR_START_MSECS,
    WORK_HOURS_PER_DAY,
    Weekday,
)
from pyduedate._errors import (
    ERR_MSG_INVALID_SUBMIT_DATE,
    ERR_MSG_INVALID_TURNAROUND,
    InvalidSubmitDateError,
    InvalidTurnaroundError,
)
from pyduedate._units import days_to_msecs, hours_to_msecs

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CalculationState:
    """Working state of a single due-date calculation."""

    submit_time_of_day: int
    submit_day_of_week: int
    work_days_part: int
    work_time_part: int
    delta_days: int
    delta_time: int


Guard = Callable[[CalculationState], bool]
Transform = Callable[[CalculationState], CalculationState]


def can_use_prev_day_end_instead_next_day_start(state: CalculationState) -> bool:
    """True for a whole-day turnaround submitted exactly at 09:00.

    Mon 26 Sep 9:00 + 8h is then due Mon 26 Sep 17:00 rather than
    Tue 27 Sep 9:00.
    """
    return (
        state.work_time_part == 0
        and state.work_days_part > 0
        and state.submit_time_of_day == WORK_HOUR_START_MSECS
    )


def use_prev_day_end_instead_next_day_start(state: CalculationState) -> CalculationState:
    return replace(
        state,
        delta_days=state.delta_days - 1,
        delta_time=WORK_DAY_SPAN_MSECS,
    )


def is_due_time_overflowing_to_next_working_day(state: CalculationState) -> bool:
    """True if the due time falls after 17:00.

    Mon 26 Sep 15:00 + 6h overflows by 4h into the next working day.
    """
    return state.submit_time_of_day + state.delta_time > WORK_HOUR_END_MSECS


def handle_due_time_overflow(state: CalculationState) -> CalculationState:
    """Move the overflowing part of the time offset to 09:00 of the next day.

    The resulting ``delta_time`` is relative to the submit time of day and
    may be negative.
    """
    overflow_time = state.delta_time - (WORK_HOUR_END_MSECS - state.submit_time_of_day)
    due_time = WORK_HOUR_START_MSECS + overflow_time
    return replace(
        state,
        delta_days=state.delta_days + 1,
        delta_time=due_time - state.submit_time_of_day,
    )


def is_due_day_leaping_out_of_current_week(state: CalculationState) -> bool:
    """True if the due day lands past Friday of the submit week.

    Fri 30 Sep 16:00 + 4h leaps into the next week.
    """
    return state.submit_day_of_week + state.delta_days > Weekday.FRIDAY


def add_weekend_days(state: CalculationState) -> CalculationState:
    day_of_weeks = state.submit_day_of_week + state.delta_days
    week_count = (day_of_weeks - Weekday.SATURDAY) // NUM_WORK_DAYS + 1
    return replace(state, delta_days=state.delta_days + week_count * NUM_WEEKEND_DAYS)


_CORRECTIONS: tuple[tuple[str, Guard, Transform], ...] = (
    (
        "prev day end",
        can_use_prev_day_end_instead_next_day_start,
        use_prev_day_end_instead_next_day_start,
    ),
    (
        "time overflow",
        is_due_time_overflowing_to_next_working_day,
        handle_due_time_overflow,
    ),
    (
        "weekend days",
        is_due_day_leaping_out_of_current_week,
        add_weekend_days,
    ),
)


def init_state(submit_timestamp: int, turnaround_hours: float) -> CalculationState:
    work_days_part = int(turnaround_hours // WORK_HOURS_PER_DAY)
    work_time_part = round(hours_to_msecs(turnaround_hours % WORK_HOURS_PER_DAY))
    if work_time_part == WORK_DAY_SPAN_MSECS:
        # a remainder just under 8h rounds up to a whole working day
        work_days_part += 1
        work_time_part = 0
    return CalculationState(
        submit_time_of_day=get_utc_time(submit_timestamp),
        submit_day_of_week=get_utc_day(submit_timestamp),
        work_days_part=work_days_part,
        work_time_part=work_time_part,
        delta_days=work_days_part,
        delta_time=work_time_part,
    )


def apply_corrections(state: CalculationState) -> CalculationState:
    """Run every correction whose guard holds on the current state, in order."""
    for name, guard, transform in _CORRECTIONS:
        if guard(state):
            state = transform(state)
            logger.debug(
                "%s: delta_days=%d delta_time=%d",
                name,
                state.delta_days,
                state.delta_time,
            )
    return state


def _describe_timestamp(timestamp: int) -> str:
    try:
        return f"{timestamp_to_datetime(timestamp).isoformat()} ({timestamp})"
    except OverflowError:
        parts = timestamp_to_calendar_parts(timestamp)
        return (
            f"{timestamp} (day of week {parts.day_of_week}, "
            f"time of day {parts.time_of_day_msecs}ms)"
        )


def _is_finite(value: float) -> bool:
    try:
        return math.isfinite(value)
    except OverflowError:
        # ints too large for a float
        return False


def calculate_due_date(submit_timestamp: int, turnaround_hours: float) -> int:
    """Calculate the due date of a task.

    Args:
        submit_timestamp: Submit date in msecs since the Unix epoch (UTC).
        turnaround_hours: Turnaround time in working hours. May be fractional.

    Returns:
        The due date in msecs since the Unix epoch (UTC).

    Raises:
        InvalidSubmitDateError: If the submit date is not on a working day
            (Mon to Fri) in a working hour (9:00 to 17:00).
        InvalidTurnaroundError: If the turnaround time is negative or not finite.
    """
    if is_not_valid_submit_date(submit_timestamp):
        raise InvalidSubmitDateError(
            ERR_MSG_INVALID_SUBMIT_DATE,
            f"submit date {_describe_timestamp(submit_timestamp)} is outside working hours",
        )
    if not _is_finite(turnaround_hours) or turnaround_hours < 0:
        raise InvalidTurnaroundError(
            ERR_MSG_INVALID_TURNAROUND,
            f"turnaround time {turnaround_hours!r} is not a finite, non-negative number",
        )

    state = init_state(submit_timestamp, turnaround_hours)
    logger.debug("initial state: %s", state)
    state = apply_corrections(state)

    due_timestamp = submit_timestamp + state.delta_time + days_to_msecs(state.delta_days)
    logger.debug(
        "due date for %d + %sh: %d", submit_timestamp, turnaround_hours, due_timestamp
    )
    return due_timestamp


def calculate_due_datetime(submitted: datetime, turnaround_hours: float) -> datetime:
    """Datetime variant of :func:`calculate_due_date`.

    Naive ``submitted`` values are taken to be UTC. The result is an aware
    UTC datetime.
    """
    due_timestamp = calculate_due_date(datetime_to_timestamp(submitted), turnaround_hours)
    return timestamp_to_datetime(due_timestamp)
