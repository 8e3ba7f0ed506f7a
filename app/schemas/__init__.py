from app.schemas.completion import CompleteIn, CompletionOut
from app.schemas.habit import HabitCreateIn, HabitOut, HabitUpdateIn
from app.schemas.statistics import StatisticsOut

__all__ = ["HabitCreateIn", "HabitUpdateIn", "HabitOut", "CompleteIn", "CompletionOut", "StatisticsOut"]
