"""Tests for streak and completion-rate calculations."""

from datetime import date, timedelta

import pytest

from app.services.streaks import StreakEngine, completion_rate, current_streak, longest_streak

TODAY = date(2026, 3, 15)


def days_ago(*offsets):
    return {TODAY - timedelta(days=n) for n in offsets}


class TestCurrentStreak:
    def test_three_days_ending_today(self):
        assert current_streak(days_ago(0, 1, 2), TODAY) == 3

    def test_gap_stops_the_walk(self):
        assert current_streak(days_ago(0, 1, 2, 4, 5), TODAY) == 3

    def test_yesterday_only_is_zero(self):
        assert current_streak(days_ago(1), TODAY) == 0

    def test_empty(self):
        assert current_streak(set(), TODAY) == 0

    def test_order_does_not_matter(self):
        assert current_streak([TODAY - timedelta(days=1), TODAY], TODAY) == 2


class TestLongestStreak:
    def test_longest_run_wins(self):
        start = date(2026, 1, 1)
        days = [start + timedelta(days=n) for n in (0, 1, 2, 5, 6)]
        assert longest_streak(days) == 3

    def test_final_run_is_counted(self):
        start = date(2026, 1, 1)
        days = [start + timedelta(days=n) for n in (0, 3, 4, 5, 6)]
        assert longest_streak(days) == 4

    def test_unsorted_input(self):
        start = date(2026, 1, 1)
        days = [start + timedelta(days=n) for n in (6, 0, 5, 2, 1)]
        assert longest_streak(days) == 3

    def test_single_day(self):
        assert longest_streak([TODAY]) == 1

    def test_empty(self):
        assert longest_streak([]) == 0

    def test_month_boundary(self):
        assert longest_streak([date(2026, 2, 27), date(2026, 2, 28), date(2026, 3, 1)]) == 3


class TestCompletionRate:
    def test_half_rate(self):
        assert completion_rate(5, TODAY - timedelta(days=10), TODAY) == 50.0

    def test_rate_is_capped(self):
        assert completion_rate(20, TODAY - timedelta(days=10), TODAY) == 100.0

    def test_created_today_is_zero(self):
        assert completion_rate(1, TODAY, TODAY) == 0.0

    def test_created_in_future_is_zero(self):
        assert completion_rate(3, TODAY + timedelta(days=2), TODAY) == 0.0

    def test_custom_formula_table(self):
        formulas = {"weekly": lambda total, created, today: 42.0}
        assert completion_rate(3, TODAY - timedelta(days=10), TODAY, "weekly", formulas) == 42.0
        assert completion_rate(3, TODAY - timedelta(days=10), TODAY, "daily", formulas) == 30.0

    @pytest.mark.parametrize("frequency", ["daily", "weekly", "custom"])
    def test_frequency_does_not_change_rate(self, frequency):
        assert completion_rate(5, TODAY - timedelta(days=10), TODAY, frequency) == 50.0


class TestStreakEngine:
    def test_no_completions_is_all_zero(self):
        summary = StreakEngine().compute(set(), TODAY, TODAY - timedelta(days=30))
        assert (summary.current_streak, summary.longest_streak, summary.completion_rate) == (0, 0, 0.0)

    def test_compute_combines_all_three(self):
        days = days_ago(0, 1, 2, 7, 8, 9, 10)
        summary = StreakEngine().compute(days, TODAY, TODAY - timedelta(days=14))
        assert summary.current_streak == 3
        assert summary.longest_streak == 4
        assert summary.completion_rate == pytest.approx(50.0)

    def test_rate_formula_can_be_swapped_per_frequency(self):
        engine = StreakEngine({"weekly": lambda total, created, today: 42.0})
        summary = engine.compute(days_ago(0), TODAY, TODAY - timedelta(days=7), frequency="weekly")
        assert summary.completion_rate == 42.0
        assert summary.current_streak == 1
