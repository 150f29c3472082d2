# src/wheel_spinner/models/setting.py
"""Key/value settings persisted alongside application data."""

from sqlalchemy import Text
from sqlalchemy.orm import Mapped, mapped_column

from wheel_spinner.db.session import Base

DIRTY_WORDS_KEY = "DIRTY_WORDS"
EARNINGS_PER_REVIEW_KEY = "EARNINGS_PER_REVIEW"


class Setting(Base):
    """A single JSON-encoded setting value."""

    __tablename__ = "settings"

    key: Mapped[str] = mapped_column(Text, primary_key=True)
    value: Mapped[str] = mapped_column(Text, nullable=False)
