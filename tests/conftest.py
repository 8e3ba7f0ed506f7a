"""Shared fixtures: in-memory SQLite sessions, fake stores and an API client."""

from __future__ import annotations

import logging
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.api.deps import get_db
from app.crud import SqlCompletionStore, SqlHabitStore
from app.db import build_engine
from app.models import Base
from app.services import CompletionLedger, HabitService, StatisticsAssembler
from tests.fakes import InMemoryCompletionStore, InMemoryHabitStore

TODAY = date(2026, 3, 15)


@pytest.fixture
def db_engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine, future=True)


@pytest.fixture
def db_session(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def test_logger():
    return logging.getLogger("habits.tests")


@pytest.fixture
def fake_stores():
    return InMemoryHabitStore(), InMemoryCompletionStore()


@pytest.fixture
def service(fake_stores, test_logger):
    habits, completions = fake_stores
    return HabitService(habits, completions, logger=test_logger)


@pytest.fixture
def assembler(service, fake_stores, test_logger):
    _, completions = fake_stores
    return StatisticsAssembler(service, CompletionLedger(completions), clock=lambda: TODAY, logger=test_logger)


@pytest.fixture
def sql_service(db_session, test_logger):
    return HabitService(SqlHabitStore(db_session), SqlCompletionStore(db_session), logger=test_logger)


@pytest.fixture
def client(session_factory):
    from api_main import app

    def _override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
