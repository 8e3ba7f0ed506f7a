from datetime import date, datetime
from typing import Optional

from pydantic import BaseModel


class CompleteIn(BaseModel):
    date: Optional[str] = None
    notes: Optional[str] = None


class CompletionOut(BaseModel):
    id: str
    habit_id: str
    completed_on: date
    notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True
