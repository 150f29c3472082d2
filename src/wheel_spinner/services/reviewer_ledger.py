# src/wheel_spinner/services/reviewer_ledger.py
"""Per-reviewer workload counters."""

from __future__ import annotations

import logging
from datetime import datetime

from wheel_spinner.models.admin import Admin
from wheel_spinner.repositories.admin_repo import AdminRepository
from wheel_spinner.services.errors import InvalidTransitionError, NotFoundError

logger = logging.getLogger(__name__)


class ReviewerLedger:
    """Track how many moderation decisions each reviewer has made.

    Methods flush but never commit, so a decision can be recorded in the same
    transaction as the queue mutation it accounts for.
    """

    def __init__(self, repo: AdminRepository) -> None:
        self.repo = repo

    def record_decision(self, uid: str, at: datetime) -> bool:
        """Count one decision for ``uid``.

        Unknown reviewers are ignored; the decision still stands on the queue.

        Returns:
            True if a reviewer row was updated.
        """
        updated = self.repo.increment_reviews(uid, at)
        if not updated:
            logger.info("Decision by unregistered reviewer %s not attributed", uid)
        return updated

    def reset_totals(self, uid: str) -> None:
        """Zero both the lifetime and the session counters."""
        if not self.repo.reset_counters(_require_uid(uid), include_total=True):
            raise NotFoundError("Reviewer", uid)

    def reset_session(self, uid: str) -> None:
        """Zero only the session counter."""
        if not self.repo.reset_counters(_require_uid(uid), include_total=False):
            raise NotFoundError("Reviewer", uid)

    def list_reviewers(self) -> list[Admin]:
        return self.repo.list_all()

    def register(self, uid: str, name: str) -> Admin:
        """Add a reviewer, or rename one that already exists."""
        if not name or not name.strip():
            raise InvalidTransitionError("Reviewer name must not be empty")
        return self.repo.upsert(_require_uid(uid), name.strip())

    def remove(self, uid: str) -> None:
        if not self.repo.delete(_require_uid(uid)):
            raise NotFoundError("Reviewer", uid)


def _require_uid(uid: str) -> str:
    if not uid or not uid.strip():
        raise InvalidTransitionError("Reviewer uid must not be empty")
    return uid
