"""
Tests for the date helpers behind the habit grid
"""
from datetime import date, datetime

import pytest

from habitgrid.calendar import format_day, month_headers, parse_day, timeline_days


def test_format_and_parse_day():
    assert format_day(date(2024, 1, 5)) == "2024-01-05"
    assert parse_day("2024-01-05") == date(2024, 1, 5)
    assert parse_day(date(2024, 1, 5)) == date(2024, 1, 5)
    assert parse_day(datetime(2024, 1, 5, 23, 59)) == date(2024, 1, 5)
    # timestamps are cut to their day
    assert parse_day("2024-01-05T10:00:00") == date(2024, 1, 5)


@pytest.mark.parametrize("value", ["", "2024-13-01", "yesterday", "05/01/2024"])
def test_parse_day_rejects_garbage(value):
    with pytest.raises(ValueError):
        parse_day(value)


def test_timeline_covers_whole_weeks():
    today = date(2024, 1, 10)  # Wednesday
    days = timeline_days(today, weeks=2)

    assert days[0] == date(2023, 12, 24)  # Sunday on or before Dec 27
    assert days[-1] == date(2024, 1, 13)  # Saturday closing this week
    assert len(days) % 7 == 0
    assert today in days


def test_timeline_when_today_is_sunday():
    today = date(2024, 1, 7)
    days = timeline_days(today, weeks=1)
    assert days[0] == date(2023, 12, 31)
    assert days[-1] == date(2024, 1, 13)


def test_month_headers():
    days = timeline_days(date(2024, 1, 10), weeks=2)
    assert month_headers(days) == [("Dec", 0), ("Jan", 2)]
