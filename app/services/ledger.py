from datetime import date

from app.crud.stores import CompletionStore
from app.models import HabitCompletion
from app.services.dates import normalize_day


class CompletionLedger:
    """Read-side view of a habit's recorded completion days."""

    def __init__(self, completions: CompletionStore) -> None:
        self.completions = completions

    def completions_for(self, habit_id: str) -> list[HabitCompletion]:
        return list(self.completions.list_for_habit(habit_id))

    def days_for(self, habit_id: str) -> set[date]:
        return {normalize_day(item.completed_on) for item in self.completions_for(habit_id)}
