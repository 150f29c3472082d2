# src/wheel_spinner/schemas/shared_wheel.py
"""Shared-wheel Pydantic schemas."""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator, model_validator

from wheel_spinner.db.time import as_utc

from .common import CamelModel


class SharedWheelCreate(CamelModel):
    """Schema for publishing a wheel."""

    wheel_config: dict[str, Any] = Field(..., description="Wheel title, entries and styling")
    copyable: bool | None = Field(None, description="Whether others may copy the wheel")
    editable: bool | None = Field(None, description="Legacy name for copyable")

    @property
    def is_copyable(self) -> bool:
        """Resolve ``copyable`` with the legacy ``editable`` flag as fallback."""
        if self.copyable is not None:
            return self.copyable
        return bool(self.editable)

    @field_validator("wheel_config")
    @classmethod
    def _entries_must_be_a_list(cls, value: dict[str, Any]) -> dict[str, Any]:
        entries = value.get("entries")
        if entries is not None and not isinstance(entries, list):
            raise ValueError("wheelConfig.entries must be a list")
        return value


class SharedWheelCreated(CamelModel):
    path: str


class SharedWheelResponse(CamelModel):
    """Schema for shared wheel information returned by the API."""

    path: str
    config: dict[str, Any]
    copyable: bool
    review_status: str
    created: datetime
    last_read: datetime | None = None
    read_count: int

    @field_validator("created", "last_read")
    @classmethod
    def _restore_utc(cls, value: datetime | None) -> datetime | None:
        return as_utc(value)


class SharedWheelList(CamelModel):
    wheels: list[SharedWheelResponse]


class SharedWheelView(CamelModel):
    """Payload used by the public shared-wheel page."""

    wheel_config: dict[str, Any]
    copyable: bool
    editable: bool
    review_status: str

    @model_validator(mode="before")
    @classmethod
    def _from_wheel(cls, data: object) -> object:
        if isinstance(data, dict):
            return data
        copyable = bool(getattr(data, "copyable", False))
        return {
            "wheel_config": getattr(data, "config", {}),
            "copyable": copyable,
            "editable": copyable,
            "review_status": getattr(data, "review_status", ""),
        }


class ReadLogRequest(CamelModel):
    path: str | None = None


class ReviewQueueCount(CamelModel):
    wheels_in_review_queue: int
