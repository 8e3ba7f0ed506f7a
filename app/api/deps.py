import logging
from typing import Generator

from fastapi import Depends
from sqlalchemy.orm import Session

from app.config import settings
from app.crud import SqlCompletionStore, SqlHabitStore
from app.db import SessionLocal
from app.services import CompletionLedger, HabitService, StatisticsAssembler


def get_db() -> Generator[Session, None, None]:
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_logger() -> logging.Logger:
    return logging.getLogger("habits.api")


def get_habit_service(
    db: Session = Depends(get_db),
    logger: logging.Logger = Depends(get_logger),
) -> HabitService:
    return HabitService(
        SqlHabitStore(db),
        SqlCompletionStore(db),
        logger=logger.getChild("service"),
        default_color=settings.DEFAULT_HABIT_COLOR,
    )


def get_statistics_assembler(
    db: Session = Depends(get_db),
    service: HabitService = Depends(get_habit_service),
    logger: logging.Logger = Depends(get_logger),
) -> StatisticsAssembler:
    return StatisticsAssembler(service, CompletionLedger(SqlCompletionStore(db)), logger=logger.getChild("statistics"))
