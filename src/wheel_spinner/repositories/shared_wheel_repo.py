# src/wheel_spinner/repositories/shared_wheel_repo.py
"""Data access helpers for working with shared wheels."""
from __future__ import annotations

from datetime import datetime
from typing import Any

from sqlalchemy import delete, func, insert, select, update
from sqlalchemy.orm import Session

from wheel_spinner.models.issued_path import IssuedPath
from wheel_spinner.models.shared_wheel import REVIEW_STATUS_PENDING, SharedWheel

__all__ = ["SharedWheelRepository"]


class SharedWheelRepository:
    """Thin wrapper around database access for shared wheel rows.

    Mutations are issued as single statements and never commit; the calling
    service owns the transaction boundary.
    """

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def exists(self, path: str) -> bool:
        """Return True if ``path`` was ever issued or a row currently holds it."""
        issued = self.session.execute(
            select(IssuedPath.path).where(IssuedPath.path == path)
        )
        if issued.first() is not None:
            return True
        live = self.session.execute(
            select(SharedWheel.path).where(SharedWheel.path == path)
        )
        return live.first() is not None

    def insert(
        self,
        *,
        path: str,
        owner: str,
        config: dict[str, Any],
        copyable: bool,
        status: str,
        created_at: datetime,
    ) -> None:
        """Record ``path`` as issued and insert a new shared wheel row under it.

        Raises:
            sqlalchemy.exc.IntegrityError: If ``path`` was issued before or is
                already taken.
        """
        # Core inserts so the primary keys are checked by the database rather
        # than by the session identity map.
        self.session.execute(insert(IssuedPath).values(path=path, issued_at=created_at))
        self.session.execute(
            insert(SharedWheel).values(
                path=path,
                owner=owner,
                config=config,
                copyable=copyable,
                review_status=status,
                created=created_at,
                read_count=0,
            )
        )

    def get_by_path(self, path: str) -> SharedWheel | None:
        """Return a shared wheel by path."""
        result = self.session.execute(
            select(SharedWheel)
            .where(SharedWheel.path == path)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    def list_by_owner(self, owner: str) -> list[SharedWheel]:
        """Return an owner's shared wheels, newest first."""
        result = self.session.execute(
            select(SharedWheel)
            .where(SharedWheel.owner == owner)
            .order_by(SharedWheel.created.desc(), SharedWheel.path)
        )
        return list(result.scalars())

    def update_status(self, path: str, status: str, *, only_if: str | None = None) -> bool:
        """Set the review status; return True if a row changed."""
        stmt = update(SharedWheel).where(SharedWheel.path == path)
        if only_if is not None:
            stmt = stmt.where(SharedWheel.review_status == only_if)
        result = self.session.execute(stmt.values(review_status=status))
        return result.rowcount > 0

    def delete(
        self,
        path: str,
        *,
        owner: str | None = None,
        only_if: str | None = None,
    ) -> bool:
        """Delete a row, optionally scoped by owner or current status."""
        stmt = delete(SharedWheel).where(SharedWheel.path == path)
        if owner is not None:
            stmt = stmt.where(SharedWheel.owner == owner)
        if only_if is not None:
            stmt = stmt.where(SharedWheel.review_status == only_if)
        result = self.session.execute(stmt)
        return result.rowcount > 0

    def increment_read(self, path: str, at: datetime) -> bool:
        """Bump the read counter in a single statement."""
        result = self.session.execute(
            update(SharedWheel)
            .where(SharedWheel.path == path)
            .values(read_count=SharedWheel.read_count + 1, last_read=at)
        )
        return result.rowcount > 0

    def next_pending(self) -> SharedWheel | None:
        """Return the most-read pending wheel, oldest first on ties."""
        result = self.session.execute(
            select(SharedWheel)
            .where(SharedWheel.review_status == REVIEW_STATUS_PENDING)
            .order_by(
                SharedWheel.read_count.desc(),
                SharedWheel.created.asc(),
                SharedWheel.path.asc(),
            )
            .limit(1)
            .execution_options(populate_existing=True)
        )
        return result.scalars().first()

    def count_pending(self) -> int:
        """Return the number of wheels awaiting review."""
        result = self.session.execute(
            select(func.count())
            .select_from(SharedWheel)
            .where(SharedWheel.review_status == REVIEW_STATUS_PENDING)
        )
        return int(result.scalar_one())
