# src/wheel_spinner/__init__.py
"""Wheel Spinner shared-wheel publication and moderation backend."""
