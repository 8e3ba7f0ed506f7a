import uuid
from datetime import datetime
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends

from app.api.deps import get_habit_service, get_statistics_assembler
from app.errors import ValidationError
from app.schemas import CompleteIn, CompletionOut, HabitCreateIn, HabitOut, HabitUpdateIn, StatisticsOut
from app.services import HabitService, StatisticsAssembler, parse_day

router = APIRouter(prefix="/api/habits", tags=["habits"])


def _parse_habit_id(raw: str) -> str:
    try:
        return str(uuid.UUID(raw))
    except ValueError as exc:
        raise ValidationError("invalid habit ID") from exc


@router.post("", status_code=201, response_model=HabitOut)
def create_habit(payload: HabitCreateIn, service: HabitService = Depends(get_habit_service)) -> Any:
    return service.create(
        name=payload.name,
        description=payload.description,
        frequency=payload.frequency,
        color=payload.color,
        category=payload.category,
    )


@router.get("", response_model=List[HabitOut])
def list_habits(service: HabitService = Depends(get_habit_service)) -> Any:
    return service.list()


@router.get("/{habit_id}", response_model=HabitOut)
def get_habit(habit_id: str, service: HabitService = Depends(get_habit_service)) -> Any:
    return service.get(_parse_habit_id(habit_id))


@router.put("/{habit_id}", response_model=HabitOut)
def update_habit(
    habit_id: str,
    payload: HabitUpdateIn,
    service: HabitService = Depends(get_habit_service),
) -> Any:
    return service.update(_parse_habit_id(habit_id), **payload.model_dump(exclude_unset=True))


@router.delete("/{habit_id}")
def delete_habit(habit_id: str, service: HabitService = Depends(get_habit_service)) -> Dict[str, str]:
    service.delete(_parse_habit_id(habit_id))
    return {"message": "habit deleted successfully"}


@router.post("/{habit_id}/complete")
def mark_complete(
    habit_id: str,
    payload: Optional[CompleteIn] = Body(default=None),
    service: HabitService = Depends(get_habit_service),
) -> Dict[str, str]:
    parsed_id = _parse_habit_id(habit_id)
    when = datetime.now()
    notes = None
    if payload is not None:
        if payload.date:
            when = parse_day(payload.date)
        notes = payload.notes
    service.mark_complete(parsed_id, when, notes=notes)
    return {"message": "habit marked as complete"}


@router.delete("/{habit_id}/complete/{day}")
def unmark_complete(habit_id: str, day: str, service: HabitService = Depends(get_habit_service)) -> Dict[str, str]:
    parsed_id = _parse_habit_id(habit_id)
    service.unmark_complete(parsed_id, parse_day(day))
    return {"message": "completion removed"}


@router.get("/{habit_id}/statistics", response_model=StatisticsOut)
def get_statistics(
    habit_id: str,
    assembler: StatisticsAssembler = Depends(get_statistics_assembler),
) -> Any:
    return assembler.assemble(_parse_habit_id(habit_id))


@router.get("/{habit_id}/completions", response_model=List[CompletionOut])
def list_completions(habit_id: str, service: HabitService = Depends(get_habit_service)) -> Any:
    return service.list_completions(_parse_habit_id(habit_id))
