# src/wheel_spinner/api/v1/endpoints/users.py
"""Endpoints describing the current (stubbed) user."""

from __future__ import annotations

from fastapi import APIRouter

from wheel_spinner.api.v1.dependencies import ReviewerDep

router = APIRouter(prefix="/user", tags=["users"])


@router.get("/is-admin")
async def is_admin(reviewer: ReviewerDep) -> dict[str, bool]:
    """Report admin rights; the stubbed identity always has them."""
    return {"userIsAdmin": bool(reviewer)}
