import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import text
from sqlalchemy.orm import Session

from app.api import register_error_handlers, router
from app.api.deps import get_db
from app.config import settings
from app.db import engine
from app.logging_config import configure_logging
from app.models import Base

logger = configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Habit Tracker API", version="0.1.0")
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS if settings.CORS_ORIGINS else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.include_router(router)
register_error_handlers(app)


@app.get("/health/live")
def health_live() -> dict[str, str]:
    return {"status": "alive"}


@app.get("/health/ready")
def health_ready(db: Session = Depends(get_db)) -> dict[str, str]:
    db.execute(text("SELECT 1"))
    return {"status": "ready"}


@app.on_event("startup")
def on_startup() -> None:
    if settings.AUTO_CREATE_SCHEMA:
        Base.metadata.create_all(bind=engine)
    logger.info("habit tracker API started, database=%s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    uvicorn.run("api_main:app", host=settings.API_HOST, port=settings.API_PORT)
