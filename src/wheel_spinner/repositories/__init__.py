# src/wheel_spinner/repositories/__init__.py
"""Repositories wrapping database access for the services layer."""

from .admin_repo import AdminRepository
from .settings_repo import SettingsRepository
from .shared_wheel_repo import SharedWheelRepository

__all__ = ["AdminRepository", "SettingsRepository", "SharedWheelRepository"]
