# src/wheel_spinner/core/logging.py
"""Logging setup for the application process."""

from __future__ import annotations

import logging
import sys

from wheel_spinner.core.settings import settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Attach a stderr handler to the root logger once and set its level."""
    root = logging.getLogger()
    resolved = (level or settings.log_level).upper()
    root.setLevel(resolved)

    if not any(getattr(handler, "_wheel_spinner", False) for handler in root.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        handler._wheel_spinner = True  # type: ignore[attr-defined]
        root.addHandler(handler)

    # SQL echo is controlled by SQL_DEBUG on the engine itself.
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.sql_debug else logging.WARNING
    )
