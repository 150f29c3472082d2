# src/wheel_spinner/services/errors.py
"""Error kinds raised by the publication and moderation services."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)


class PublicationError(Exception):
    """Base class for shared-wheel pipeline errors."""


class ContentBlockedError(PublicationError):
    """Raised when a publish request contains a dirty word."""

    def __init__(self, message: str = "Please try something more family-friendly.") -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(PublicationError):
    """Raised when a targeted shared wheel or reviewer does not exist."""

    def __init__(self, kind: str, key: str) -> None:
        super().__init__(f"{kind} not found: {key}")
        self.kind = kind
        self.key = key


class InvalidTransitionError(PublicationError):
    """Raised for nonsensical moderation input such as an empty path.

    Decisions on wheels that are no longer pending are not errors.
    """


class StoreUnavailableError(PublicationError):
    """Raised when the underlying store fails; never retried internally."""


@contextmanager
def store_guard(session: Session, operation: str) -> Iterator[None]:
    """Roll back and re-raise persistence failures as StoreUnavailableError."""
    try:
        yield
    except SQLAlchemyError as err:
        session.rollback()
        logger.exception("Store failure during %s", operation)
        raise StoreUnavailableError(f"Store unavailable during {operation}") from err
