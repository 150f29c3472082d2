# src/wheel_spinner/api/v1/endpoints/admins.py
"""Reviewer (admin) management endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from wheel_spinner.api.v1.dependencies import PublicationServiceDep, http_error
from wheel_spinner.schemas.admin import AdminCreate, AdminResponse
from wheel_spinner.services.errors import InvalidTransitionError, NotFoundError

router = APIRouter(prefix="/admins", tags=["admins"])


@router.get("", response_model=list[AdminResponse])
async def list_admins(service: PublicationServiceDep) -> list[AdminResponse]:
    """List reviewers with their review counters."""
    return [AdminResponse.model_validate(admin) for admin in service.list_reviewers()]


@router.post("", response_model=AdminResponse)
async def upsert_admin(payload: AdminCreate, service: PublicationServiceDep) -> AdminResponse:
    """Register a reviewer, or rename an existing one."""
    try:
        admin = service.register_reviewer(payload.uid, payload.name)
    except InvalidTransitionError as err:
        raise http_error(err) from err
    return AdminResponse.model_validate(admin)


@router.delete("/{uid}")
async def delete_admin(uid: str, service: PublicationServiceDep) -> dict[str, str]:
    try:
        service.remove_reviewer(uid)
    except (NotFoundError, InvalidTransitionError) as err:
        raise http_error(err) from err
    return {"status": "ok"}


@router.post("/{uid}/reset-reviews")
async def reset_admin_reviews(uid: str, service: PublicationServiceDep) -> dict[str, str]:
    """Zero a reviewer's lifetime and session counters."""
    try:
        service.reset_reviewer_totals(uid)
    except (NotFoundError, InvalidTransitionError) as err:
        raise http_error(err) from err
    return {"status": "ok"}


@router.post("/{uid}/reset-session")
async def reset_admin_session(uid: str, service: PublicationServiceDep) -> dict[str, str]:
    """Zero a reviewer's session counter only."""
    try:
        service.reset_reviewer_session(uid)
    except (NotFoundError, InvalidTransitionError) as err:
        raise http_error(err) from err
    return {"status": "ok"}
