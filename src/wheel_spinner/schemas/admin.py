# src/wheel_spinner/schemas/admin.py
"""Reviewer (admin) Pydantic schemas."""

from datetime import datetime

from pydantic import Field, field_validator

from wheel_spinner.db.time import as_utc

from .common import CamelModel


class AdminCreate(CamelModel):
    """Schema for registering or renaming a reviewer."""

    uid: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)


class AdminResponse(CamelModel):
    uid: str
    name: str
    total_reviews: int
    session_reviews: int
    last_review: datetime | None = None

    @field_validator("last_review")
    @classmethod
    def _restore_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)
