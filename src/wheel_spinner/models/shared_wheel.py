# src/wheel_spinner/models/shared_wheel.py
"""SQLAlchemy model for published, publicly addressable wheels."""

from datetime import datetime
from typing import Any

from sqlalchemy import JSON, Boolean, DateTime, Index, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from wheel_spinner.db.session import Base
from wheel_spinner.db.time import utcnow

REVIEW_STATUS_PENDING = "Pending"
REVIEW_STATUS_APPROVED = "Approved"


class SharedWheel(Base):
    """A wheel configuration published under a short public path.

    Rejected wheels are deleted outright, so a row is either awaiting review
    or approved. The path itself stays reserved in ``issued_paths``.
    """

    __tablename__ = "shared_wheels"
    __table_args__ = (
        Index("ix_shared_wheels_review_queue", "review_status", "read_count"),
    )

    # Primary key doubles as the store-level uniqueness guard for paths.
    path: Mapped[str] = mapped_column(String(7), primary_key=True)
    owner: Mapped[str] = mapped_column(Text, nullable=False, default="default", index=True)
    config: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)
    copyable: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    review_status: Mapped[str] = mapped_column(
        String(16),
        nullable=False,
        default=REVIEW_STATUS_PENDING,
    )
    created: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
    )
    last_read: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    read_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    @property
    def is_pending(self) -> bool:
        """Return True while the wheel is waiting for a moderation decision."""
        return self.review_status == REVIEW_STATUS_PENDING
