from fastapi import APIRouter

from app.api.errors import register_error_handlers
from app.api.habits import router as habits_router

router = APIRouter()
router.include_router(habits_router)

__all__ = ["router", "register_error_handlers"]
