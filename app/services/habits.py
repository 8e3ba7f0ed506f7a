import logging
from datetime import date, datetime
from typing import List, Optional

from app.crud.stores import CompletionStore, HabitStore
from app.errors import AlreadyCompleted, CompletionNotFound, NotFound, ValidationError
from app.models import DEFAULT_COLOR, FREQUENCIES, Habit, HabitCompletion
from app.models.habit import FREQUENCY_DAILY
from app.services.dates import normalize_day

UPDATABLE_FIELDS = ("name", "description", "frequency", "color", "category")


def _clean_name(name: Optional[str]) -> str:
    cleaned = (name or "").strip()
    if not cleaned:
        raise ValidationError("name is required")
    return cleaned


def _check_frequency(frequency: str) -> str:
    if frequency not in FREQUENCIES:
        raise ValidationError(f"frequency must be one of: {', '.join(FREQUENCIES)}")
    return frequency


class HabitService:
    def __init__(
        self,
        habits: HabitStore,
        completions: CompletionStore,
        logger: Optional[logging.Logger] = None,
        default_color: str = DEFAULT_COLOR,
    ) -> None:
        self.habits = habits
        self.completions = completions
        self.logger = logger or logging.getLogger(__name__)
        self.default_color = default_color

    def create(
        self,
        name: str,
        description: str = "",
        frequency: Optional[str] = None,
        color: Optional[str] = None,
        category: Optional[str] = None,
    ) -> Habit:
        now = datetime.now()
        habit = Habit(
            name=_clean_name(name),
            description=description or "",
            frequency=_check_frequency(frequency or FREQUENCY_DAILY),
            color=color or self.default_color,
            category=category,
            created_at=now,
            updated_at=now,
        )
        habit = self.habits.add(habit)
        self.logger.info("habit created id=%s name=%r", habit.id, habit.name)
        return habit

    def get(self, habit_id: str) -> Habit:
        habit = self.habits.get(habit_id)
        if habit is None:
            raise NotFound()
        return habit

    def list(self) -> List[Habit]:
        return list(self.habits.list())

    def update(self, habit_id: str, **fields) -> Habit:
        changes = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS and value is not None}
        if "name" in changes:
            changes["name"] = _clean_name(changes["name"])
        if "frequency" in changes:
            _check_frequency(changes["frequency"])
        changes["updated_at"] = datetime.now()

        if not self.habits.update(habit_id, changes):
            raise NotFound()
        self.logger.info("habit updated id=%s fields=%s", habit_id, sorted(changes))
        return self.get(habit_id)

    def delete(self, habit_id: str) -> None:
        self.get(habit_id)
        if not self.habits.delete(habit_id):
            raise NotFound()
        # Leftovers only exist where the store has no FK cascade.
        removed = self.completions.delete_for_habit(habit_id)
        self.logger.info("habit deleted id=%s completions_removed=%s", habit_id, removed)

    def mark_complete(
        self,
        habit_id: str,
        when: Optional[date | datetime] = None,
        notes: Optional[str] = None,
    ) -> HabitCompletion:
        self.get(habit_id)
        day = normalize_day(when or datetime.now())

        if self.completions.find(habit_id, day) is not None:
            raise AlreadyCompleted()

        completion = self.completions.add(
            HabitCompletion(habit_id=habit_id, completed_on=day, notes=notes, created_at=datetime.now())
        )
        self.logger.info("habit completed id=%s day=%s", habit_id, day.isoformat())
        return completion

    def unmark_complete(self, habit_id: str, when: date | datetime) -> None:
        day = normalize_day(when)
        if not self.completions.delete(habit_id, day):
            raise CompletionNotFound()
        self.logger.info("habit completion removed id=%s day=%s", habit_id, day.isoformat())

    def list_completions(self, habit_id: str) -> List[HabitCompletion]:
        self.get(habit_id)
        return list(self.completions.list_for_habit(habit_id))
