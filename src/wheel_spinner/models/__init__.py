# src/wheel_spinner/models/__init__.py
"""SQLAlchemy models for the Wheel Spinner application."""

from .admin import Admin
from .issued_path import IssuedPath
from .setting import Setting
from .shared_wheel import SharedWheel

__all__ = [
    "Admin",
    "IssuedPath",
    "Setting",
    "SharedWheel",
]
