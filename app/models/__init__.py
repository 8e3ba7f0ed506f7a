from app.models.base import Base
from app.models.habit import DEFAULT_COLOR, FREQUENCIES, Habit
from app.models.habit_completion import HabitCompletion

__all__ = [
    "Base",
    "DEFAULT_COLOR",
    "FREQUENCIES",
    "Habit",
    "HabitCompletion",
]
