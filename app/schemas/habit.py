from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field

Frequency = Literal["daily", "weekly", "custom"]

HEX_COLOR = r"^#[0-9A-Fa-f]{6}$"


class HabitCreateIn(BaseModel):
    name: str = ""
    description: Optional[str] = ""
    frequency: Optional[Frequency] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
    category: Optional[str] = None


class HabitUpdateIn(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    frequency: Optional[Frequency] = None
    color: Optional[str] = Field(default=None, pattern=HEX_COLOR)
    category: Optional[str] = None


class HabitOut(BaseModel):
    id: str
    name: str
    description: str
    frequency: str
    color: str
    category: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
