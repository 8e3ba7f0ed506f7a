from datetime import date

from pydantic import BaseModel


class StatisticsOut(BaseModel):
    total_completions: int
    current_streak: int
    longest_streak: int
    completion_rate: float
    completions: list[date]

    class Config:
        from_attributes = True
