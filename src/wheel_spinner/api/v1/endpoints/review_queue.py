# src/wheel_spinner/api/v1/endpoints/review_queue.py
"""Moderation queue endpoints for reviewers."""

from __future__ import annotations

from fastapi import APIRouter

from wheel_spinner.api.v1.dependencies import PublicationServiceDep, ReviewerDep, http_error
from wheel_spinner.schemas.shared_wheel import ReviewQueueCount, SharedWheelResponse
from wheel_spinner.services.errors import InvalidTransitionError
from wheel_spinner.services.moderation import Decision

router = APIRouter(prefix="/review-queue", tags=["moderation"])


@router.get("/next", response_model=SharedWheelResponse | None)
async def get_next_for_review(service: PublicationServiceDep) -> SharedWheelResponse | None:
    """Return the pending wheel most in need of review, or null."""
    wheel = service.next_for_review()
    if wheel is None:
        return None
    return SharedWheelResponse.model_validate(wheel)


@router.get("/count", response_model=ReviewQueueCount)
async def get_review_queue_count(service: PublicationServiceDep) -> ReviewQueueCount:
    """Return how many wheels are waiting for review."""
    return ReviewQueueCount(wheels_in_review_queue=service.pending_count())


def _decide(
    service: PublicationServiceDep,
    path: str,
    decision: Decision,
    reviewer: str,
) -> dict[str, str]:
    try:
        changed = service.decide(path, decision, reviewer)
    except InvalidTransitionError as err:
        raise http_error(err) from err
    return {"status": "ok" if changed else "unchanged"}


@router.post("/{path}/approve")
async def approve_shared_wheel(
    path: str,
    service: PublicationServiceDep,
    reviewer: ReviewerDep,
) -> dict[str, str]:
    """Approve a pending wheel. Repeating the call is harmless."""
    return _decide(service, path, Decision.APPROVE, reviewer)


@router.post("/{path}/delete")
async def reject_shared_wheel(
    path: str,
    service: PublicationServiceDep,
    reviewer: ReviewerDep,
) -> dict[str, str]:
    """Reject and delete a pending wheel. Repeating the call is harmless."""
    return _decide(service, path, Decision.REJECT, reviewer)
