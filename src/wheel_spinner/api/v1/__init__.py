# src/wheel_spinner/api/v1/__init__.py
"""Version 1 API endpoints."""

from .endpoints import (
    admins_router,
    review_queue_router,
    settings_router,
    shared_wheels_router,
    users_router,
)

__all__ = [
    "admins_router",
    "review_queue_router",
    "settings_router",
    "shared_wheels_router",
    "users_router",
]
