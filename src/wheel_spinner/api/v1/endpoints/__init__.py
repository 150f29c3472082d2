# src/wheel_spinner/api/v1/endpoints/__init__.py
"""API endpoint modules for version 1."""

from .admins import router as admins_router
from .review_queue import router as review_queue_router
from .settings import router as settings_router
from .shared_wheels import router as shared_wheels_router
from .users import router as users_router

__all__ = [
    "admins_router",
    "review_queue_router",
    "settings_router",
    "shared_wheels_router",
    "users_router",
]
