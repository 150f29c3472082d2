# src/wheel_spinner/api/v1/endpoints/shared_wheels.py
"""Shared wheel publication endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, HTTPException, status
from fastapi.responses import JSONResponse

from wheel_spinner.api.v1.dependencies import OwnerDep, PublicationServiceDep, http_error
from wheel_spinner.schemas.shared_wheel import (
    ReadLogRequest,
    SharedWheelCreate,
    SharedWheelCreated,
    SharedWheelList,
    SharedWheelResponse,
    SharedWheelView,
)
from wheel_spinner.services.errors import ContentBlockedError, InvalidTransitionError, NotFoundError

router = APIRouter(tags=["shared-wheels"])


@router.post("/shared-wheels", response_model=SharedWheelCreated)
async def publish_shared_wheel(
    payload: SharedWheelCreate,
    service: PublicationServiceDep,
    owner: OwnerDep,
) -> SharedWheelCreated:
    """Publish a wheel under a new public path, pending review."""
    try:
        path = service.publish(payload.wheel_config, payload.is_copyable, owner=owner)
    except ContentBlockedError as err:
        raise HTTPException(
            status_code=status.HTTP_451_UNAVAILABLE_FOR_LEGAL_REASONS,
            detail=err.message,
        ) from err
    return SharedWheelCreated(path=path)


@router.get("/shared-wheels", response_model=SharedWheelList)
async def list_shared_wheels(service: PublicationServiceDep, owner: OwnerDep) -> SharedWheelList:
    """List the caller's shared wheels, newest first."""
    wheels = service.list_published(owner)
    return SharedWheelList(wheels=[SharedWheelResponse.model_validate(w) for w in wheels])


@router.get("/shared-wheels/{path}", response_model=None)
async def get_shared_wheel(
    path: str,
    service: PublicationServiceDep,
) -> dict[str, Any] | JSONResponse:
    """Return a published wheel in the shape the public page expects.

    An unknown path answers 404 with ``wheelConfig.wheelNotFound`` set, which
    the page checks to show its not-found view.
    """
    try:
        wheel = service.get_published(path)
    except NotFoundError:
        return JSONResponse(
            status_code=status.HTTP_404_NOT_FOUND,
            content={"wheelConfig": {"wheelNotFound": True}},
        )
    except InvalidTransitionError as err:
        raise http_error(err) from err
    view = SharedWheelView.model_validate(wheel)
    return {"wheelConfig": view.model_dump(by_alias=True)}


@router.delete("/shared-wheels/{path}", response_model=SharedWheelList)
async def delete_shared_wheel(
    path: str,
    service: PublicationServiceDep,
    owner: OwnerDep,
) -> SharedWheelList:
    """Delete one of the caller's shared wheels and return the rest."""
    try:
        remaining = service.unpublish(path, owner)
    except InvalidTransitionError as err:
        raise http_error(err) from err
    return SharedWheelList(wheels=[SharedWheelResponse.model_validate(w) for w in remaining])


@router.post("/shared-wheel-reads")
async def log_shared_wheel_read(
    payload: ReadLogRequest,
    service: PublicationServiceDep,
) -> dict[str, str]:
    """Record a view of a shared wheel."""
    service.log_read(payload.path)
    return {"status": "ok"}
