"""Date helpers for the habit grid.

Days travel as ISO ``YYYY-MM-DD`` strings between the bridge and the
presentation, and as ``datetime.date`` everywhere else.
"""

from datetime import date, datetime, timedelta
from typing import Union

DayLike = Union[date, str]

TIMELINE_WEEKS = 22
MONTH_LABELS = ["Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec"]


def format_day(day: date) -> str:
    return day.isoformat()


def parse_day(value: DayLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    try:
        return date.fromisoformat(str(value).strip()[:10])
    except ValueError as exc:
        raise ValueError(f"Invalid day {value!r}, expected YYYY-MM-DD") from exc


def _sunday_index(day: date) -> int:
    # date.weekday() counts from Monday
    return (day.weekday() + 1) % 7


def timeline_days(today: date, weeks: int = TIMELINE_WEEKS) -> list[date]:
    """Days shown in the horizontal timeline, whole weeks from Sunday to Saturday.

    Starts at the Sunday on or before ``today - weeks`` and runs through the
    Saturday closing the current week, so the result splits evenly into
    columns of seven.
    """
    start = today - timedelta(days=weeks * 7)
    start -= timedelta(days=_sunday_index(start))
    end = today + timedelta(days=6 - _sunday_index(today))
    return [start + timedelta(days=i) for i in range((end - start).days + 1)]


def month_headers(days: list[date]) -> list[tuple[str, int]]:
    headers: list[tuple[str, int]] = []
    current_month = None
    for i, day in enumerate(days):
        if _sunday_index(day) == 0 and day.month != current_month:
            current_month = day.month
            headers.append((MONTH_LABELS[day.month - 1], i // 7))
    return headers
