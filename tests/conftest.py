# tests/conftest.py
from __future__ import annotations

import json
import os
import random
from collections.abc import Callable, Generator, Iterator
from datetime import UTC, datetime, timedelta
from itertools import count
from typing import Any

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("AUTO_CREATE_TABLES", "false")

from wheel_spinner.db.session import Base
from wheel_spinner.db.session import get_db as app_get_session
from wheel_spinner.main import app as fastapi_app
from wheel_spinner.models import Admin, Setting, SharedWheel
from wheel_spinner.models.setting import DIRTY_WORDS_KEY
from wheel_spinner.models.shared_wheel import REVIEW_STATUS_PENDING
from wheel_spinner.services.publication import PublicationService

TEST_DB_URL = "sqlite://"
BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)

_PATH_COUNTER = count(1)


@pytest.fixture()
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        TEST_DB_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture()
def db_session(engine: Engine) -> Iterator[Session]:
    SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="session")
def app() -> FastAPI:
    return fastapi_app


@pytest.fixture(autouse=True)
def override_session_dependency(app: FastAPI, db_session: Session) -> Iterator[None]:
    def _get_session_override() -> Generator[Session, None, None]:
        yield db_session

    app.dependency_overrides[app_get_session] = _get_session_override
    try:
        yield
    finally:
        app.dependency_overrides.pop(app_get_session, None)


@pytest.fixture()
def client(app: FastAPI) -> Iterator[TestClient]:
    with TestClient(app, base_url="http://test") as test_client:
        yield test_client


class FakeClock:
    """Clock returning a fixed time that tests advance explicitly."""

    def __init__(self, start: datetime = BASE_TIME) -> None:
        self.current = start

    def __call__(self) -> datetime:
        return self.current

    def advance(self, **kwargs: float) -> datetime:
        self.current += timedelta(**kwargs)
        return self.current


@pytest.fixture()
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture()
def service(db_session: Session, clock: FakeClock) -> PublicationService:
    """Publication service with a seeded RNG and a controllable clock."""
    return PublicationService(db_session, rng=random.Random(20260101), now=clock)


@pytest.fixture()
def reviewer(db_session: Session) -> Admin:
    """The stubbed default identity registered as a reviewer."""
    admin = Admin(uid="default", name="Default Reviewer", total_reviews=0, session_reviews=0)
    db_session.add(admin)
    db_session.commit()
    return admin


@pytest.fixture()
def dirty_words(db_session: Session) -> Callable[[list[str]], None]:
    """Store a dirty-word list directly in the settings table."""

    def _store(words: list[str]) -> None:
        db_session.merge(Setting(key=DIRTY_WORDS_KEY, value=json.dumps(words)))
        db_session.commit()

    return _store


@pytest.fixture()
def make_wheel(db_session: Session) -> Callable[..., SharedWheel]:
    """Insert a shared wheel row with explicit queue attributes."""

    def _make(
        *,
        path: str | None = None,
        read_count: int = 0,
        status: str = REVIEW_STATUS_PENDING,
        created: datetime | None = None,
        owner: str = "default",
        entries: list[dict[str, Any]] | None = None,
    ) -> SharedWheel:
        n = next(_PATH_COUNTER)
        path = path or f"t{n % 100:02d}-{n // 100:03d}"
        wheel = SharedWheel(
            path=path,
            owner=owner,
            config={"title": f"Wheel {n}", "entries": entries or [{"text": "one"}], "path": path},
            copyable=False,
            review_status=status,
            created=created or BASE_TIME,
            read_count=read_count,
        )
        db_session.add(wheel)
        db_session.commit()
        return wheel

    return _make
