from datetime import date
from typing import Any, Optional, Protocol, Sequence

from app.models import Habit, HabitCompletion


class HabitStore(Protocol):
    def add(self, habit: Habit) -> Habit: ...

    def get(self, habit_id: str) -> Optional[Habit]: ...

    def list(self) -> Sequence[Habit]: ...

    def update(self, habit_id: str, fields: dict[str, Any]) -> bool: ...

    def delete(self, habit_id: str) -> bool: ...


class CompletionStore(Protocol):
    def add(self, completion: HabitCompletion) -> HabitCompletion: ...

    def find(self, habit_id: str, day: date) -> Optional[HabitCompletion]: ...

    def delete(self, habit_id: str, day: date) -> bool: ...

    def list_for_habit(self, habit_id: str) -> Sequence[HabitCompletion]: ...

    def delete_for_habit(self, habit_id: str) -> int: ...
