# src/wheel_spinner/repositories/admin_repo.py
"""Data access helpers for reviewer (admin) rows."""
from __future__ import annotations

from datetime import datetime

from sqlalchemy import delete, select, update
from sqlalchemy.orm import Session

from wheel_spinner.models.admin import Admin

__all__ = ["AdminRepository"]


class AdminRepository:
    """Thin wrapper around database access for admins."""

    def __init__(self, session: Session) -> None:
        """Initialize the repository with a SQLAlchemy session."""
        self.session = session

    def get(self, uid: str) -> Admin | None:
        """Return an admin by uid."""
        result = self.session.execute(
            select(Admin).where(Admin.uid == uid).execution_options(populate_existing=True)
        )
        return result.scalars().first()

    def list_all(self) -> list[Admin]:
        """Return all admins ordered by display name."""
        result = self.session.execute(
            select(Admin)
            .order_by(Admin.name, Admin.uid)
            .execution_options(populate_existing=True)
        )
        return list(result.scalars())

    def upsert(self, uid: str, name: str) -> Admin:
        """Create an admin or rename an existing one, keeping its counters."""
        admin = self.get(uid)
        if admin is None:
            admin = Admin(uid=uid, name=name, total_reviews=0, session_reviews=0)
            self.session.add(admin)
        else:
            admin.name = name
        self.session.flush()
        return admin

    def delete(self, uid: str) -> bool:
        """Delete an admin; return True if a row was removed."""
        result = self.session.execute(delete(Admin).where(Admin.uid == uid))
        return result.rowcount > 0

    def increment_reviews(self, uid: str, at: datetime) -> bool:
        """Add one review to both counters as a single UPDATE statement."""
        result = self.session.execute(
            update(Admin)
            .where(Admin.uid == uid)
            .values(
                total_reviews=Admin.total_reviews + 1,
                session_reviews=Admin.session_reviews + 1,
                last_review=at,
            )
        )
        return result.rowcount > 0

    def reset_counters(self, uid: str, *, include_total: bool) -> bool:
        """Zero the session counter, and the lifetime counter if requested."""
        values: dict[str, int] = {"session_reviews": 0}
        if include_total:
            values["total_reviews"] = 0
        result = self.session.execute(update(Admin).where(Admin.uid == uid).values(**values))
        return result.rowcount > 0
