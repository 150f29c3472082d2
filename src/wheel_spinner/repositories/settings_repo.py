# src/wheel_spinner/repositories/settings_repo.py
"""Data access helpers for the key/value settings table."""
from __future__ import annotations

import json
from typing import Any

from sqlalchemy.orm import Session

from wheel_spinner.models.setting import Setting

__all__ = ["SettingsRepository"]


class SettingsRepository:
    """Read and replace JSON-encoded setting values by key."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, key: str) -> Any | None:
        """Return the decoded value for ``key`` or None when unset."""
        row = self.session.get(Setting, key, populate_existing=True)
        if row is None:
            return None
        return json.loads(row.value)

    def put(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``, replacing any previous value."""
        self.session.merge(Setting(key=key, value=json.dumps(value)))
        self.session.flush()
