# src/wheel_spinner/core/__init__.py
"""Core configuration for the Wheel Spinner application."""
