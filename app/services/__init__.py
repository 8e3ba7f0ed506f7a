from app.services.dates import normalize_day, parse_day, today
from app.services.habits import HabitService
from app.services.ledger import CompletionLedger
from app.services.statistics import Statistics, StatisticsAssembler
from app.services.streaks import StreakEngine, StreakSummary, completion_rate, current_streak, longest_streak

__all__ = [
    "normalize_day",
    "parse_day",
    "today",
    "HabitService",
    "CompletionLedger",
    "Statistics",
    "StatisticsAssembler",
    "StreakEngine",
    "StreakSummary",
    "current_streak",
    "longest_streak",
    "completion_rate",
]
