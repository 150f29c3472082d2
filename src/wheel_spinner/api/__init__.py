# src/wheel_spinner/api/__init__.py
"""HTTP API for the Wheel Spinner application."""
