from app.crud.completions import SqlCompletionStore
from app.crud.habits import SqlHabitStore
from app.crud.stores import CompletionStore, HabitStore

__all__ = [
    "HabitStore",
    "CompletionStore",
    "SqlHabitStore",
    "SqlCompletionStore",
]
