# src/wheel_spinner/api/v1/endpoints/settings.py
"""Administrator-managed settings endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from wheel_spinner.api.v1.dependencies import PublicationServiceDep
from wheel_spinner.schemas.settings import DirtyWordsUpdate

router = APIRouter(prefix="/settings", tags=["settings"])


@router.get("/dirty-words", response_model=list[str])
async def get_dirty_words(service: PublicationServiceDep) -> list[str]:
    """Return the dirty-word list, sorted."""
    return service.dirty_words()


@router.post("/dirty-words")
async def replace_dirty_words(
    payload: DirtyWordsUpdate,
    service: PublicationServiceDep,
) -> dict[str, object]:
    """Replace the dirty-word list; words are stored lowercased and sorted."""
    words = service.replace_dirty_words(payload.words)
    return {"status": "ok", "words": words}


@router.get("/earnings-per-review", response_model=float)
async def get_earnings_per_review(service: PublicationServiceDep) -> float:
    return service.earnings_per_review()
