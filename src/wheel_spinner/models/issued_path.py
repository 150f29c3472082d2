# src/wheel_spinner/models/issued_path.py
"""SQLAlchemy model recording every path ever handed out."""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from wheel_spinner.db.session import Base
from wheel_spinner.db.time import utcnow


class IssuedPath(Base):
    """A shared-wheel path that has been allocated at least once.

    Rows are never deleted, so a path freed by rejection or unpublishing
    cannot be minted again and an old link never points at new content.
    """

    __tablename__ = "issued_paths"

    path: Mapped[str] = mapped_column(String(7), primary_key=True)
    issued_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
