"""Calendar decomposition and predicate tests."""

from datetime import datetime, timedelta, timezone

import pytest

import pyduedate
from pyduedate import _constants
from pyduedate import (
    CalendarParts,
    Weekday,
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

DAYS = [
    ("Mon, 26 Sep 2016", Weekday.MONDAY),
    ("Tue, 27 Sep 2016", Weekday.TUESDAY),
    ("Wed, 28 Sep 2016", Weekday.WEDNESDAY),
    ("Thu, 29 Sep 2016", Weekday.THURSDAY),
    ("Fri, 30 Sep 2016", Weekday.FRIDAY),
    ("Sat, 1 Oct 2016", Weekday.SATURDAY),
    ("Sun, 2 Oct 2016", Weekday.SUNDAY),
]
WEEKEND = {Weekday.SATURDAY, Weekday.SUNDAY}


class TestWeekday:
    def test_single_numbering(self):
        assert pyduedate.Weekday is _constants.Weekday
        assert _constants.EPOCH_DAY_OF_WEEK is Weekday.THURSDAY

    def test_working_days_are_monday_to_friday(self, gmt_time):
        monday = gmt_time("Mon, 26 Sep 2016 12:00")
        for offset in range(7):
            timestamp = monday + offset * 86_400_000
            day = Weekday(get_utc_day(timestamp))
            assert is_working_day(timestamp) is (Weekday.MONDAY <= day <= Weekday.FRIDAY)


class TestDecomposition:
    @pytest.mark.parametrize("date_str, expected", DAYS)
    def test_get_utc_day(self, gmt_time, date_str, expected):
        assert get_utc_day(gmt_time(f"{date_str} 00:00")) == expected
        assert get_utc_day(gmt_time(f"{date_str} 23:59:59")) == expected

    def test_get_utc_time(self, gmt_time):
        timestamp = gmt_time("Mon, 26 Sep 2016 12:34:56") + 789
        assert get_utc_time(timestamp) == 789 + (56 * 1000) + (34 * 60 * 1000) + (12 * 60 * 60 * 1000)

    def test_calendar_parts(self, gmt_time):
        parts = timestamp_to_calendar_parts(gmt_time("Fri, 30 Sep 2016 17:00"))
        assert parts == CalendarParts(day_of_week=5, time_of_day_msecs=17 * 60 * 60 * 1000)

    def test_epoch(self):
        assert timestamp_to_calendar_parts(0) == CalendarParts(Weekday.THURSDAY, 0)

    def test_before_epoch(self):
        # 1969-12-31 23:59:59.999, a Wednesday
        assert timestamp_to_calendar_parts(-1) == CalendarParts(Weekday.WEDNESDAY, 86_399_999)


class TestDatetimeConversion:
    def test_timestamp_to_datetime(self, gmt_time):
        result = timestamp_to_datetime(gmt_time("Mon, 26 Sep 2016 12:34:56") + 5)
        assert result == datetime(2016, 9, 26, 12, 34, 56, 5000, tzinfo=timezone.utc)
        assert result.tzinfo is timezone.utc

    def test_aware_datetime(self):
        value = datetime(2016, 9, 26, 12, 34, 56, 5000, tzinfo=timezone.utc)
        assert datetime_to_timestamp(value) == 1474893296005

    def test_naive_is_utc(self):
        assert datetime_to_timestamp(datetime(1970, 1, 2)) == 86_400_000

    def test_offset_converted(self):
        value = datetime(1970, 1, 1, 1, 0, tzinfo=timezone(timedelta(hours=1)))
        assert datetime_to_timestamp(value) == 0

    def test_sub_millisecond_truncated(self):
        value = datetime(1970, 1, 1, 0, 0, 0, 1999, tzinfo=timezone.utc)
        assert datetime_to_timestamp(value) == 1

    def test_large_timestamp_exact(self):
        timestamp = 253402300799999  # 9999-12-31T23:59:59.999Z
        assert datetime_to_timestamp(timestamp_to_datetime(timestamp)) == timestamp


class TestIsWorkingDay:
    @pytest.mark.parametrize("date_str, day", DAYS)
    def test_output(self, gmt_time, date_str, day):
        assert is_working_day(gmt_time(f"{date_str} 12:00")) is (day not in WEEKEND)


class TestIsWorkingHour:
    @pytest.mark.parametrize(
        "time, expected",
        [
            ("9:00:00", True),
            ("12:00:00", True),
            ("17:00:00", True),
            ("8:59:59", False),
            ("17:00:01", False),
            ("0:00:00", False),
            ("23:59:59", False),
        ],
    )
    def test_output(self, gmt_time, time, expected):
        assert is_working_hour(gmt_time(f"Mon, 26 Sep 2016 {time}")) is expected

    def test_millisecond_bounds(self, gmt_time):
        start = gmt_time("Mon, 26 Sep 2016 9:00")
        end = gmt_time("Mon, 26 Sep 2016 17:00")
        assert not is_working_hour(start - 1)
        assert is_working_hour(start)
        assert is_working_hour(end)
        assert not is_working_hour(end + 1)

    def test_ignores_day(self, gmt_time):
        assert is_working_hour(gmt_time("Sat, 1 Oct 2016 12:00"))


class TestIsValidSubmitDate:
    @pytest.mark.parametrize("date_str, day", DAYS)
    @pytest.mark.parametrize(
        "time, in_hours",
        [("9:00", True), ("12:00", True), ("17:00", True), ("8:59", False), ("17:01", False)],
    )
    def test_output(self, gmt_time, date_str, day, time, in_hours):
        timestamp = gmt_time(f"{date_str} {time}")
        expected = in_hours and day not in WEEKEND
        assert is_valid_submit_date(timestamp) is expected
        assert is_not_valid_submit_date(timestamp) is not expected
