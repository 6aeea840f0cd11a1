"""Millisecond unit conversions.

Each converter multiplies by one factor and composes on the next smaller
unit, so integer input stays integer and float input is never rounded.
"""

from __future__ import annotations

MSECS_PER_SECOND = 1000
SECONDS_PER_MINUTE = 60
MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24


def seconds_to_msecs(secs: float) -> float:
    return secs * MSECS_PER_SECOND


def minutes_to_msecs(mins: float) -> float:
    return seconds_to_msecs(mins * SECONDS_PER_MINUTE)


def hours_to_msecs(hours: float) -> float:
    return minutes_to_msecs(hours * MINUTES_PER_HOUR)


def days_to_msecs(days: float) -> float:
    return hours_to_msecs(days * HOURS_PER_DAY)


def add_seconds_to_msecs(secs: float, msecs: float) -> float:
    """Return ``msecs`` advanced by ``secs`` seconds."""
    return seconds_to_msecs(secs) + msecs


def add_minutes_to_msecs(mins: float, msecs: float) -> float:
    """Return ``msecs`` advanced by ``mins`` minutes."""
    return minutes_to_msecs(mins) + msecs


def add_hours_to_msecs(hours: float, msecs: float) -> float:
    """Return ``msecs`` advanced by ``hours`` hours."""
    return hours_to_msecs(hours) + msecs


def add_days_to_msecs(days: float, msecs: float) -> float:
    """Return ``msecs`` advanced by ``days`` days."""
    return days_to_msecs(days) + msecs
