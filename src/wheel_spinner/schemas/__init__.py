# src/wheel_spinner/schemas/__init__.py
"""Pydantic schemas for request/response validation."""

from .admin import AdminCreate, AdminResponse
from .settings import DirtyWordsUpdate
from .shared_wheel import (
    ReadLogRequest,
    ReviewQueueCount,
    SharedWheelCreate,
    SharedWheelCreated,
    SharedWheelList,
    SharedWheelResponse,
    SharedWheelView,
)

__all__ = [
    "AdminCreate",
    "AdminResponse",
    "DirtyWordsUpdate",
    "ReadLogRequest",
    "ReviewQueueCount",
    "SharedWheelCreate",
    "SharedWheelCreated",
    "SharedWheelList",
    "SharedWheelResponse",
    "SharedWheelView",
]
