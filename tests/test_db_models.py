# tests/test_db_models.py
"""Unit tests for the ORM model mappings."""

from datetime import UTC, datetime, timedelta, timezone

from wheel_spinner.db.time import as_utc
from wheel_spinner.models import Admin, IssuedPath, Setting, SharedWheel
from wheel_spinner.schemas import SharedWheelResponse


def test_table_names() -> None:
    assert SharedWheel.__tablename__ == "shared_wheels"
    assert Admin.__tablename__ == "admins"
    assert Setting.__tablename__ == "settings"
    assert IssuedPath.__tablename__ == "issued_paths"


def test_shared_wheel_path_is_the_primary_key() -> None:
    pk_names = {c.name for c in SharedWheel.__table__.primary_key}
    assert pk_names == {"path"}


def test_review_queue_index_exists() -> None:
    index_names = {index.name for index in SharedWheel.__table__.indexes}
    assert "ix_shared_wheels_review_queue" in index_names


def test_is_pending(make_wheel) -> None:
    assert make_wheel(status="Pending").is_pending is True
    assert make_wheel(status="Approved").is_pending is False


def test_init_db_creates_schema() -> None:
    from sqlalchemy import inspect

    from wheel_spinner.db.session import engine
    from wheel_spinner.init_db import init_db

    init_db()

    tables = set(inspect(engine).get_table_names())
    assert {"shared_wheels", "issued_paths", "admins", "settings"} <= tables


def test_as_utc_restores_naive_timestamps() -> None:
    naive = datetime(2026, 1, 1, 12, 0)
    assert as_utc(naive) == datetime(2026, 1, 1, 12, 0, tzinfo=UTC)
    assert as_utc(None) is None

    offset = datetime(2026, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
    assert as_utc(offset) is offset


def test_shared_wheel_response_timestamps_are_utc(make_wheel, db_session) -> None:
    wheel = make_wheel(path="utc-utc")
    db_session.expire_all()

    response = SharedWheelResponse.model_validate(db_session.get(SharedWheel, "utc-utc"))

    assert response.created.tzinfo is not None
    assert response.created.utcoffset() == timedelta(0)
    assert wheel.path == response.path
