# src/wheel_spinner/services/publication.py
"""Boundary operations of the shared-wheel publication pipeline.

``PublicationService`` composes the content filter, the path allocator, the
moderation queue and the reviewer ledger over a single request-scoped
session. Each public method either commits its changes or leaves none
behind.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from datetime import datetime
from random import Random
from typing import Any

from sqlalchemy.orm import Session

from wheel_spinner.core.settings import settings
from wheel_spinner.db.time import utcnow
from wheel_spinner.models.admin import Admin
from wheel_spinner.models.setting import DIRTY_WORDS_KEY, EARNINGS_PER_REVIEW_KEY
from wheel_spinner.models.shared_wheel import REVIEW_STATUS_PENDING, SharedWheel
from wheel_spinner.repositories.admin_repo import AdminRepository
from wheel_spinner.repositories.settings_repo import SettingsRepository
from wheel_spinner.repositories.shared_wheel_repo import SharedWheelRepository
from wheel_spinner.services.content_filter import ContentFilter, DirtyWordList
from wheel_spinner.services.errors import (
    ContentBlockedError,
    InvalidTransitionError,
    NotFoundError,
    store_guard,
)
from wheel_spinner.services.moderation import Decision, ModerationQueue
from wheel_spinner.services.path_allocator import PathAllocator
from wheel_spinner.services.reviewer_ledger import ReviewerLedger

logger = logging.getLogger(__name__)


class PublicationService:
    """Publish, read and moderate shared wheels."""

    def __init__(
        self,
        db: Session,
        *,
        rng: Random | None = None,
        now: Callable[[], datetime] = utcnow,
    ) -> None:
        """Wire the pipeline components onto one session.

        Args:
            db: Request-scoped database session.
            rng: Random source for path generation; a system RNG by default.
            now: Clock used for creation, read and review timestamps.
        """
        self.db = db
        self.now = now
        self.wheels = SharedWheelRepository(db)
        self.settings_store = SettingsRepository(db)
        self.ledger = ReviewerLedger(AdminRepository(db))
        self.queue = ModerationQueue(db, self.wheels, self.ledger)
        self.allocator = PathAllocator(self.wheels, rng)

    # Publication

    def load_dirty_words(self) -> DirtyWordList:
        """Read the current dirty-word list from the settings store."""
        return DirtyWordList.from_iterable(self.settings_store.get(DIRTY_WORDS_KEY))

    def publish(
        self,
        config: Mapping[str, Any],
        copyable: bool,
        owner: str | None = None,
    ) -> str:
        """Screen a wheel, store it as pending under a new path and return the path.

        Raises:
            ContentBlockedError: If any entry contains a dirty word.
            StoreUnavailableError: If the store fails.
        """
        owner = owner or settings.default_owner_uid
        with store_guard(self.db, "publish"):
            content_filter = ContentFilter(self.load_dirty_words())
            if content_filter.is_config_blocked(config):
                logger.info("Blocked publish request from %s", owner)
                raise ContentBlockedError(settings.blocked_content_message)

            created_at = self.now()

            def insert(path: str) -> None:
                self.wheels.insert(
                    path=path,
                    owner=owner,
                    config={**config, "path": path},
                    copyable=bool(copyable),
                    status=REVIEW_STATUS_PENDING,
                    created_at=created_at,
                )

            path = self.allocator.allocate(insert)
            self.db.commit()

        logger.info("Published shared wheel %s for %s", path, owner)
        return path

    def get_published(self, path: str) -> SharedWheel:
        """Return a shared wheel by path.

        Raises:
            NotFoundError: If no wheel has that path.
        """
        _require_path(path)
        with store_guard(self.db, "get_published"):
            wheel = self.wheels.get_by_path(path)
        if wheel is None:
            raise NotFoundError("Shared wheel", path)
        return wheel

    def list_published(self, owner: str | None = None) -> list[SharedWheel]:
        with store_guard(self.db, "list_published"):
            return self.wheels.list_by_owner(owner or settings.default_owner_uid)

    def unpublish(self, path: str, owner: str | None = None) -> list[SharedWheel]:
        """Delete one of the owner's wheels and return what the owner has left."""
        _require_path(path)
        owner = owner or settings.default_owner_uid
        with store_guard(self.db, "unpublish"):
            if self.wheels.delete(path, owner=owner):
                logger.info("Owner %s deleted shared wheel %s", owner, path)
            self.db.commit()
            return self.wheels.list_by_owner(owner)

    def log_read(self, path: str | None) -> None:
        """Count a view of a shared wheel; unknown paths are ignored."""
        if not path:
            return
        with store_guard(self.db, "log_read"):
            self.wheels.increment_read(path, self.now())
            self.db.commit()

    # Moderation

    def next_for_review(self) -> SharedWheel | None:
        with store_guard(self.db, "next_for_review"):
            return self.queue.next()

    def pending_count(self) -> int:
        with store_guard(self.db, "pending_count"):
            return self.queue.count()

    def decide(self, path: str, outcome: Decision | str, reviewer_uid: str | None = None) -> bool:
        """Approve or reject a wheel on behalf of a reviewer.

        ``None`` stands for the stubbed default reviewer; a blank uid is an error.

        Returns:
            True if the wheel was pending and the decision took effect.
        """
        if reviewer_uid is None:
            reviewer_uid = settings.default_reviewer_uid
        with store_guard(self.db, "decide"):
            return self.queue.decide(path, outcome, reviewer_uid, self.now())

    # Reviewers

    def list_reviewers(self) -> list[Admin]:
        with store_guard(self.db, "list_reviewers"):
            return self.ledger.list_reviewers()

    def register_reviewer(self, uid: str, name: str) -> Admin:
        with store_guard(self.db, "register_reviewer"):
            admin = self.ledger.register(uid, name)
            self.db.commit()
        return admin

    def remove_reviewer(self, uid: str) -> None:
        with store_guard(self.db, "remove_reviewer"):
            self.ledger.remove(uid)
            self.db.commit()

    def reset_reviewer_totals(self, uid: str) -> None:
        with store_guard(self.db, "reset_reviewer_totals"):
            self.ledger.reset_totals(uid)
            self.db.commit()

    def reset_reviewer_session(self, uid: str) -> None:
        with store_guard(self.db, "reset_reviewer_session"):
            self.ledger.reset_session(uid)
            self.db.commit()

    # Settings

    def dirty_words(self) -> list[str]:
        with store_guard(self.db, "dirty_words"):
            return self.load_dirty_words().as_list()

    def replace_dirty_words(self, words: Iterable[str]) -> list[str]:
        """Replace the dirty-word list wholesale; return the stored list."""
        stored = DirtyWordList.from_iterable(words).as_list()
        with store_guard(self.db, "replace_dirty_words"):
            self.settings_store.put(DIRTY_WORDS_KEY, stored)
            self.db.commit()
        logger.info("Dirty-word list replaced with %d words", len(stored))
        return stored

    def earnings_per_review(self) -> float:
        with store_guard(self.db, "earnings_per_review"):
            value = self.settings_store.get(EARNINGS_PER_REVIEW_KEY)
        if value is None:
            return 0.0
        try:
            return float(value)
        except (TypeError, ValueError):
            logger.warning("Ignoring malformed %s setting: %r", EARNINGS_PER_REVIEW_KEY, value)
            return 0.0


def _require_path(path: str | None) -> str:
    if not path or not path.strip():
        raise InvalidTransitionError("A shared wheel path is required")
    return path
