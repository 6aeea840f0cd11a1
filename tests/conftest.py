"""Shared test fixtures."""

from email.utils import format_datetime, parsedate_to_datetime

import pytest

from pyduedate import datetime_to_timestamp, timestamp_to_datetime


@pytest.fixture
def gmt_time():
    """Parse an RFC 2822 date such as ``"Mon, 26 Sep 2016 9:00"`` as UTC msecs."""

    def parse(date_str: str) -> int:
        return datetime_to_timestamp(parsedate_to_datetime(f"{date_str} GMT"))

    return parse


@pytest.fixture
def gmt_string():
    """Format UTC msecs as ``"Mon, 26 Sep 2016 13:00:00 GMT"``."""

    def fmt(timestamp: int) -> str:
        return format_datetime(timestamp_to_datetime(timestamp), usegmt=True)

    return fmt
