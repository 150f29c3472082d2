# src/wheel_spinner/models/admin.py
"""SQLAlchemy model for reviewers who moderate shared wheels."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, Text
from sqlalchemy.orm import Mapped, mapped_column

from wheel_spinner.db.session import Base


class Admin(Base):
    """Human moderator with lifetime and per-session review counters."""

    __tablename__ = "admins"

    uid: Mapped[str] = mapped_column(Text, primary_key=True)
    name: Mapped[str] = mapped_column(Text, nullable=False)
    total_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    # Reset independently of total_reviews at the start of a review session.
    session_reviews: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    last_review: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
