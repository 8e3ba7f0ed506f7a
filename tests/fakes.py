"""In-memory store doubles implementing the HabitStore/CompletionStore protocols."""

from __future__ import annotations

from datetime import date
from typing import Any, Optional

from app.errors import AlreadyCompleted
from app.models import Habit, HabitCompletion
from app.models.habit import new_id


class InMemoryHabitStore:
    def __init__(self) -> None:
        self.rows: dict[str, Habit] = {}

    def add(self, habit: Habit) -> Habit:
        if habit.id is None:
            habit.id = new_id()
        self.rows[habit.id] = habit
        return habit

    def get(self, habit_id: str) -> Optional[Habit]:
        return self.rows.get(habit_id)

    def list(self) -> list[Habit]:
        return list(self.rows.values())

    def update(self, habit_id: str, fields: dict[str, Any]) -> bool:
        habit = self.rows.get(habit_id)
        if habit is None:
            return False
        for key, value in fields.items():
            setattr(habit, key, value)
        return True

    def delete(self, habit_id: str) -> bool:
        return self.rows.pop(habit_id, None) is not None


class InMemoryCompletionStore:
    """Keyed by (habit_id, day), mirroring the per-day unique constraint."""

    def __init__(self) -> None:
        self.rows: dict[tuple[str, date], HabitCompletion] = {}

    def add(self, completion: HabitCompletion) -> HabitCompletion:
        key = (completion.habit_id, completion.completed_on)
        if key in self.rows:
            raise AlreadyCompleted()
        if completion.id is None:
            completion.id = new_id()
        self.rows[key] = completion
        return completion

    def find(self, habit_id: str, day: date) -> Optional[HabitCompletion]:
        return self.rows.get((habit_id, day))

    def delete(self, habit_id: str, day: date) -> bool:
        return self.rows.pop((habit_id, day), None) is not None

    def list_for_habit(self, habit_id: str) -> list[HabitCompletion]:
        items = [item for (owner, _), item in self.rows.items() if owner == habit_id]
        return sorted(items, key=lambda item: item.completed_on, reverse=True)

    def delete_for_habit(self, habit_id: str) -> int:
        keys = [key for key in self.rows if key[0] == habit_id]
        for key in keys:
            del self.rows[key]
        return len(keys)
