from datetime import date
from typing import Optional

from sqlalchemy import and_, delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.errors import AlreadyCompleted, StoreError
from app.models import HabitCompletion


class SqlCompletionStore:
    def __init__(self, db: Session) -> None:
        self.db = db

    def add(self, completion: HabitCompletion) -> HabitCompletion:
        try:
            self.db.add(completion)
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            # Either the per-day unique constraint or the habit FK fired.
            if self.find(completion.habit_id, completion.completed_on) is not None:
                raise AlreadyCompleted() from exc
            raise StoreError(f"failed to insert completion: {exc}") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to insert completion: {exc}") from exc
        self.db.refresh(completion)
        return completion

    def find(self, habit_id: str, day: date) -> Optional[HabitCompletion]:
        try:
            return self.db.scalar(
                select(HabitCompletion).where(
                    and_(HabitCompletion.habit_id == habit_id, HabitCompletion.completed_on == day)
                )
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to look up completion: {exc}") from exc

    def delete(self, habit_id: str, day: date) -> bool:
        try:
            result = self.db.execute(
                delete(HabitCompletion).where(
                    and_(HabitCompletion.habit_id == habit_id, HabitCompletion.completed_on == day)
                )
            )
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to delete completion: {exc}") from exc
        return result.rowcount > 0

    def list_for_habit(self, habit_id: str) -> list[HabitCompletion]:
        try:
            return list(
                self.db.scalars(
                    select(HabitCompletion)
                    .where(HabitCompletion.habit_id == habit_id)
                    .order_by(HabitCompletion.completed_on.desc())
                )
            )
        except SQLAlchemyError as exc:
            raise StoreError(f"failed to list completions: {exc}") from exc

    def delete_for_habit(self, habit_id: str) -> int:
        try:
            result = self.db.execute(delete(HabitCompletion).where(HabitCompletion.habit_id == habit_id))
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise StoreError(f"failed to delete completions for habit {habit_id}: {exc}") from exc
        return result.rowcount
