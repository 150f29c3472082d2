# src/wheel_spinner/services/moderation.py
"""Moderation queue for shared wheels."""

from __future__ import annotations

import logging
from datetime import datetime
from enum import Enum

from sqlalchemy.orm import Session

from wheel_spinner.models.shared_wheel import (
    REVIEW_STATUS_APPROVED,
    REVIEW_STATUS_PENDING,
    SharedWheel,
)
from wheel_spinner.repositories.shared_wheel_repo import SharedWheelRepository
from wheel_spinner.services.errors import InvalidTransitionError
from wheel_spinner.services.reviewer_ledger import ReviewerLedger

logger = logging.getLogger(__name__)


class Decision(str, Enum):
    """Outcome a reviewer can choose for a pending wheel."""

    APPROVE = "approve"
    REJECT = "reject"


class ModerationQueue:
    """Order pending wheels for review and apply reviewer decisions.

    State machine per wheel: ``Pending -> Approved`` (row kept) or
    ``Pending -> deleted`` (row removed). A decision on a wheel that is no
    longer pending, or no longer exists, changes nothing and is not an error:
    two reviewers may be looking at the same stale queue head.
    """

    def __init__(
        self,
        session: Session,
        repo: SharedWheelRepository,
        ledger: ReviewerLedger,
    ) -> None:
        self.session = session
        self.repo = repo
        self.ledger = ledger

    def next(self) -> SharedWheel | None:
        """Return the pending wheel with the most reads, if any."""
        return self.repo.next_pending()

    def count(self) -> int:
        return self.repo.count_pending()

    def approve(self, path: str, reviewer_uid: str, at: datetime) -> bool:
        """Mark a pending wheel approved; return True if it was pending."""
        return self.decide(path, Decision.APPROVE, reviewer_uid, at)

    def reject(self, path: str, reviewer_uid: str, at: datetime) -> bool:
        """Delete a pending wheel; return True if it was pending."""
        return self.decide(path, Decision.REJECT, reviewer_uid, at)

    def decide(self, path: str, decision: Decision, reviewer_uid: str, at: datetime) -> bool:
        """Apply a decision and count it for the reviewer in one transaction.

        Only decisions that changed the queue are counted, so a reviewer
        repeating a stale decision is not credited twice.

        Raises:
            InvalidTransitionError: If ``path`` or ``reviewer_uid`` is blank, or
                the decision is unknown.
        """
        if not path or not path.strip():
            raise InvalidTransitionError("A shared wheel path is required")
        if not reviewer_uid or not reviewer_uid.strip():
            raise InvalidTransitionError("Reviewer uid must not be empty")
        try:
            decision = Decision(decision)
        except ValueError as err:
            raise InvalidTransitionError(f"Unknown decision: {decision!r}") from err

        try:
            if decision is Decision.APPROVE:
                changed = self.repo.update_status(
                    path,
                    REVIEW_STATUS_APPROVED,
                    only_if=REVIEW_STATUS_PENDING,
                )
            else:
                changed = self.repo.delete(path, only_if=REVIEW_STATUS_PENDING)

            if changed:
                self.ledger.record_decision(reviewer_uid, at)
            self.session.commit()
        except Exception:
            self.session.rollback()
            raise

        if changed:
            logger.info("Reviewer %s chose %s for %s", reviewer_uid, decision.value, path)
        else:
            logger.info(
                "Ignoring %s for %s by %s: wheel is no longer pending",
                decision.value,
                path,
                reviewer_uid,
            )
        return changed
