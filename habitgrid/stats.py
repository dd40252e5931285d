"""Streak and consistency statistics for a single habit.

Every function is pure. Records only need ``date`` (a ``date`` or ISO string)
and ``status`` attributes, and "today" is always passed in by the caller.
"""

import math
from dataclasses import dataclass
from datetime import date, timedelta
from typing import Iterable, Optional, Protocol, Union

from habitgrid.calendar import parse_day

COMPLETED = "completed"
UNDECIDED = "none"


class RecordLike(Protocol):
    date: Union[date, str]
    status: str


@dataclass(frozen=True)
class HabitStats:
    total: int
    current_streak: int
    best_streak: int
    rate: int


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _statuses_by_day(records: Iterable[RecordLike]) -> dict[date, str]:
    return {parse_day(r.date): r.status for r in records}


def _completed_days(records: Iterable[RecordLike]) -> set[date]:
    return {day for day, status in _statuses_by_day(records).items() if status == COMPLETED}


def records_for_habit(records: Iterable, habit_id: int) -> list:
    return [r for r in records if r.habit_id == habit_id]


def completion_rate(records: Iterable[RecordLike]) -> int:
    records = list(records)
    if not records:
        return 0
    done = sum(1 for r in records if r.status == COMPLETED)
    return _round_half_up(100 * done / len(records))


def current_streak(records: Iterable[RecordLike], today: date) -> int:
    statuses = _statuses_by_day(records)

    anchor = today
    today_status = statuses.get(today, UNDECIDED)
    if today_status != COMPLETED:
        if today_status != UNDECIDED:
            # today was explicitly missed or skipped
            return 0
        anchor = today - timedelta(days=1)

    streak = 0
    day = anchor
    while statuses.get(day) == COMPLETED:
        streak += 1
        day -= timedelta(days=1)
    return streak


def best_streak(records: Iterable[RecordLike], today: Optional[date] = None) -> int:
    days = sorted(_completed_days(records))
    if today is not None:
        days = [d for d in days if d <= today]

    best = 0
    run = 0
    previous = None
    for day in days:
        run = run + 1 if previous is not None and (day - previous).days == 1 else 1
        best = max(best, run)
        previous = day
    return best


def rolling_consistency(
    records: Iterable[RecordLike],
    today: date,
    window_days: int = 7,
    horizon_days: int = 30,
) -> list[tuple[date, int]]:
    """Share of completed days in a trailing window, for each of the last days.

    Returns ``horizon_days`` ``(day, pct)`` pairs from oldest to newest; the
    window for a day covers that day and the ``window_days - 1`` before it.
    """
    if window_days < 1 or horizon_days < 1:
        raise ValueError("window_days and horizon_days must be positive")

    done = _completed_days(records)
    series = []
    for offset in range(horizon_days - 1, -1, -1):
        day = today - timedelta(days=offset)
        hits = sum(1 for j in range(window_days) if day - timedelta(days=j) in done)
        series.append((day, _round_half_up(100 * hits / window_days)))
    return series


def habit_stats(records: Iterable[RecordLike], today: date) -> HabitStats:
    # every figure is taken as of today
    records = [r for r in records if parse_day(r.date) <= today]
    return HabitStats(
        total=sum(1 for r in records if r.status == COMPLETED),
        current_streak=current_streak(records, today),
        best_streak=best_streak(records, today),
        rate=completion_rate(records),
    )
