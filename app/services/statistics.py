import logging
from dataclasses import dataclass, field
from datetime import date
from typing import Callable, Optional

from app.services.dates import normalize_day, today
from app.services.habits import HabitService
from app.services.ledger import CompletionLedger
from app.services.streaks import StreakEngine


@dataclass
class Statistics:
    total_completions: int = 0
    current_streak: int = 0
    longest_streak: int = 0
    completion_rate: float = 0.0
    completions: list[date] = field(default_factory=list)


class StatisticsAssembler:
    """Builds the statistics view of a habit from the current store state.

    ``clock`` returns today's day and is injectable so tests can pin it.
    """

    def __init__(
        self,
        habits: HabitService,
        ledger: CompletionLedger,
        engine: Optional[StreakEngine] = None,
        clock: Callable[[], date] = today,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.habits = habits
        self.ledger = ledger
        self.engine = engine or StreakEngine()
        self.clock = clock
        self.logger = logger or logging.getLogger(__name__)

    def assemble(self, habit_id: str) -> Statistics:
        habit = self.habits.get(habit_id)
        days = self.ledger.days_for(habit_id)
        summary = self.engine.compute(
            days,
            today=normalize_day(self.clock()),
            created_day=normalize_day(habit.created_at),
            frequency=habit.frequency,
        )
        self.logger.debug(
            "statistics id=%s total=%s current=%s longest=%s",
            habit_id,
            len(days),
            summary.current_streak,
            summary.longest_streak,
        )
        return Statistics(
            total_completions=len(days),
            current_streak=summary.current_streak,
            longest_streak=summary.longest_streak,
            completion_rate=summary.completion_rate,
            completions=sorted(days),
        )
