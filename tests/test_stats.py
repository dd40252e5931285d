"""
Tests for streak, completion and consistency statistics
"""
from collections import namedtuple
from datetime import date, timedelta

import pytest

from habitgrid.stats import (
    HabitStats,
    best_streak,
    completion_rate,
    current_streak,
    habit_stats,
    records_for_habit,
    rolling_consistency,
)

Rec = namedtuple("Rec", "habit_id date status")

TODAY = date(2024, 3, 10)


def days_ago(n):
    return TODAY - timedelta(days=n)


def recs(*pairs, habit_id=1):
    return [Rec(habit_id, day, status) for day, status in pairs]


class TestCompletionRate:
    def test_empty_is_zero(self):
        assert completion_rate([]) == 0

    @pytest.mark.parametrize(
        "done,total,expected",
        [(0, 3, 0), (1, 3, 33), (2, 3, 67), (1, 8, 13), (3, 3, 100), (1, 2, 50)],
    )
    def test_rounded_percentage(self, done, total, expected):
        records = recs(*[(days_ago(i), "completed" if i < done else "missed") for i in range(total)])
        assert completion_rate(records) == expected

    def test_half_rounds_up(self):
        # 1/8 = 12.5%
        records = recs((days_ago(0), "completed"), *[(days_ago(i), "skipped") for i in range(1, 8)])
        assert completion_rate(records) == 13


class TestCurrentStreak:
    def test_three_days_ending_today(self):
        records = recs((days_ago(0), "completed"), (days_ago(1), "completed"), (days_ago(2), "completed"))
        assert current_streak(records, TODAY) == 3

    def test_miss_two_days_back_breaks_run(self):
        records = recs((days_ago(0), "completed"), (days_ago(1), "completed"), (days_ago(2), "missed"))
        assert current_streak(records, TODAY) == 2

    def test_unmarked_today_counts_from_yesterday(self):
        records = recs((days_ago(1), "completed"), (days_ago(2), "completed"))
        assert current_streak(records, TODAY) == 2

    def test_none_status_today_counts_from_yesterday(self):
        records = recs((days_ago(0), "none"), (days_ago(1), "completed"))
        assert current_streak(records, TODAY) == 1

    def test_two_day_gap_resets(self):
        records = recs((days_ago(2), "completed"), (days_ago(3), "completed"))
        assert current_streak(records, TODAY) == 0

    @pytest.mark.parametrize("status", ["missed", "skipped"])
    def test_explicit_non_completion_today_resets(self, status):
        records = recs((days_ago(0), status), (days_ago(1), "completed"))
        assert current_streak(records, TODAY) == 0

    def test_accepts_iso_strings(self):
        records = recs((days_ago(0).isoformat(), "completed"), (days_ago(1).isoformat(), "completed"))
        assert current_streak(records, TODAY) == 2

    def test_empty(self):
        assert current_streak([], TODAY) == 0


class TestBestStreak:
    def test_longest_run_anywhere(self):
        records = recs(
            *[(days_ago(20 + i), "completed") for i in range(4)],
            (days_ago(15), "completed"),
            (days_ago(1), "completed"),
            (days_ago(0), "completed"),
        )
        assert best_streak(records) == 4

    def test_non_completed_breaks_run(self):
        records = recs((days_ago(3), "completed"), (days_ago(2), "skipped"), (days_ago(1), "completed"))
        assert best_streak(records) == 1

    def test_future_days_ignored_with_reference(self):
        records = recs((TODAY, "completed"), (TODAY + timedelta(days=1), "completed"))
        assert best_streak(records, TODAY) == 1
        assert best_streak(records) == 2

    def test_empty(self):
        assert best_streak([]) == 0


def test_exercise_scenario():
    records = recs(
        *[(date(2024, 1, d), "completed") for d in range(1, 6)],
        (date(2024, 1, 6), "missed"),
    )

    assert best_streak(records) == 5
    assert current_streak(records, date(2024, 1, 6)) == 0
    assert current_streak(records, date(2024, 1, 5)) == 5


class TestRollingConsistency:
    def test_shape_and_order(self):
        series = rolling_consistency([], TODAY)
        assert len(series) == 30
        assert series[0][0] == days_ago(29)
        assert series[-1][0] == TODAY
        assert all(pct == 0 for _, pct in series)

    def test_window_counts_completed_days(self):
        records = recs(*[(days_ago(i), "completed") for i in range(7)])
        series = dict(rolling_consistency(records, TODAY))

        assert series[TODAY] == 100
        # window for yesterday reaches one day before the run
        assert series[days_ago(1)] == 86
        assert series[days_ago(6)] == 14
        assert series[days_ago(7)] == 0

    def test_missed_days_do_not_count(self):
        records = recs((TODAY, "completed"), (days_ago(1), "missed"))
        assert rolling_consistency(records, TODAY, horizon_days=1) == [(TODAY, 14)]

    def test_custom_window(self):
        records = recs((TODAY, "completed"), (days_ago(1), "completed"))
        assert rolling_consistency(records, TODAY, window_days=4, horizon_days=2) == [
            (days_ago(1), 25),
            (TODAY, 50),
        ]

    def test_rejects_empty_window(self):
        with pytest.raises(ValueError):
            rolling_consistency([], TODAY, window_days=0)


def test_habit_stats_summary():
    records = recs((days_ago(0), "completed"), (days_ago(1), "completed"), (days_ago(2), "missed"), (days_ago(3), "completed"))
    assert habit_stats(records, TODAY) == HabitStats(total=3, current_streak=2, best_streak=2, rate=75)


def test_records_for_habit():
    records = recs((TODAY, "completed"), habit_id=1) + recs((TODAY, "missed"), habit_id=2)
    assert records_for_habit(records, 2) == [Rec(2, TODAY, "missed")]


def test_habit_stats_ignores_days_after_today():
    records = recs((days_ago(1), "completed"), (days_ago(0), "missed"), (TODAY + timedelta(days=1), "completed"))
    assert habit_stats(records, TODAY) == HabitStats(total=1, current_streak=0, best_streak=1, rate=50)
