# src/wheel_spinner/api/v1/dependencies.py
"""Shared API dependencies for sessions, services and the stubbed identity."""

from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlalchemy.orm import Session

from wheel_spinner.core.settings import settings
from wheel_spinner.db.session import get_db
from wheel_spinner.services.errors import InvalidTransitionError, NotFoundError
from wheel_spinner.services.publication import PublicationService

# Type alias for database session dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_publication_service(db: SessionDep) -> PublicationService:
    """Build the publication service over the request session."""
    return PublicationService(db)


def get_current_owner_uid() -> str:
    """Return the identity that owns published wheels.

    Authentication is stubbed: every caller is the configured default user.
    """
    return settings.default_owner_uid


def get_current_reviewer_uid() -> str:
    """Return the identity credited with moderation decisions."""
    return settings.default_reviewer_uid


PublicationServiceDep = Annotated[PublicationService, Depends(get_publication_service)]
OwnerDep = Annotated[str, Depends(get_current_owner_uid)]
ReviewerDep = Annotated[str, Depends(get_current_reviewer_uid)]


def http_error(err: NotFoundError | InvalidTransitionError) -> HTTPException:
    """Translate a targeted-operation error into an HTTP error."""
    if isinstance(err, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"{err.kind} not found",
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(err))
