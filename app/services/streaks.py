"""Streak and completion-rate calculations over a set of completed days."""

from dataclasses import dataclass
from datetime import date, timedelta
from typing import Callable, Iterable

from app.models.habit import FREQUENCIES, FREQUENCY_DAILY

ONE_DAY = timedelta(days=1)


@dataclass(frozen=True)
class StreakSummary:
    current_streak: int
    longest_streak: int
    completion_rate: float


def current_streak(days: Iterable[date], today: date) -> int:
    """Count consecutive completed days walking back from today.

    Yesterday's completion does not keep the streak alive: if today is
    missing the result is 0.
    """
    done = set(days)
    streak = 0
    cursor = today
    while cursor in done:
        streak += 1
        cursor -= ONE_DAY
    return streak


def longest_streak(days: Iterable[date]) -> int:
    ordered = sorted(set(days))
    longest = 0
    run = 0
    previous: date | None = None
    for day in ordered:
        if previous is not None and day - previous == ONE_DAY:
            run += 1
        else:
            longest = max(longest, run)
            run = 1
        previous = day
    return max(longest, run)


def daily_rate(total: int, created_day: date, today: date) -> float:
    days_since_creation = (today - created_day).days
    if days_since_creation <= 0:
        return 0.0
    return min(100.0, total / days_since_creation * 100)


RateFormula = Callable[[int, date, date], float]

# Weekly and custom habits are rated like daily ones for now.
RATE_FORMULAS: dict[str, RateFormula] = {frequency: daily_rate for frequency in FREQUENCIES}


def completion_rate(
    total: int,
    created_day: date,
    today: date,
    frequency: str = FREQUENCY_DAILY,
    formulas: dict[str, RateFormula] | None = None,
) -> float:
    formula = (formulas or RATE_FORMULAS).get(frequency, daily_rate)
    return formula(total, created_day, today)


class StreakEngine:
    def __init__(self, rate_formulas: dict[str, RateFormula] | None = None) -> None:
        self.rate_formulas = dict(rate_formulas or RATE_FORMULAS)

    def compute(
        self,
        days: Iterable[date],
        today: date,
        created_day: date,
        frequency: str = FREQUENCY_DAILY,
    ) -> StreakSummary:
        done = set(days)
        return StreakSummary(
            current_streak=current_streak(done, today),
            longest_streak=longest_streak(done),
            completion_rate=completion_rate(len(done), created_day, today, frequency, self.rate_formulas),
        )
