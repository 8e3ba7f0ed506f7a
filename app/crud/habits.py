from typing import Any, List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import StoreError
from app.models import Habit


class SqlHabitStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add(self, habit: Habit) -> Habit:
        try:
            self.db.add(habit)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to insert habit: {exc}") from exc
        self.db.refresh(habit)
        return habit

    def get(self, habit_id: str) -> Optional[Habit]:
        try:
            return self.db.get(Habit, habit_id)
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to load habit {habit_id}: {exc}") from exc

    def list(self) -> List[Habit]:
        try:
            return list(self.db.scalars(select(Habit).order_by(Habit.created_at)))
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to list habits: {exc}") from exc

    def update(self, habit_id: str, fields: dict[str, Any]) -> bool:
        try:
            result = self.db.execute(update(Habit).where(Habit.id == habit_id).values(**fields))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to update habit {habit_id}: {exc}") from exc
        return result.rowcount > 0

    def delete(self, habit_id: str) -> bool:
        try:
            result = self.db.execute(delete(Habit).where(Habit.id == habit_id))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to delete habit {habit_id}: {exc}") from exc
        return result.rowcount > 0
