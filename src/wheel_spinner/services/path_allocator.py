# src/wheel_spinner/services/path_allocator.py
"""Allocation of short public paths for shared wheels."""

from __future__ import annotations

import logging
import re
import secrets
from collections.abc import Callable
from random import Random
from typing import Final

from sqlalchemy.exc import IntegrityError

from wheel_spinner.repositories.shared_wheel_repo import SharedWheelRepository

logger = logging.getLogger(__name__)

# No 0/1/i/l/o: they are easily misread when a link is typed by hand.
PATH_ALPHABET: Final[str] = "abcdefghjkmnpqrstuvwxyz23456789"
PATH_GROUP_LENGTH: Final[int] = 3

SHARED_WHEEL_PATH_PATTERN: Final[re.Pattern[str]] = re.compile(r"^[a-z0-9]{3}-[a-z0-9]{3}$")

_SHARED_WHEEL_ROUTE = re.compile(
    r"^(/view)?/([a-z]{2}(-[A-Z]{2})?/)?[a-z0-9]{3}-[a-z0-9]{3}$"
)


def is_shared_wheel_route(url_path: str) -> bool:
    """Return True if a page URL addresses a shared wheel.

    Accepts an optional ``/view`` prefix and an optional locale segment such
    as ``en/`` or ``pt-BR/`` in front of the path.
    """
    return _SHARED_WHEEL_ROUTE.match(url_path) is not None


class PathAllocator:
    """Mint ``xxx-xxx`` paths that have never been issued.

    Paths stay reserved after their wheel is rejected or unpublished. The
    existence check only saves a round trip; the primary key on
    ``issued_paths.path`` decides. A candidate that loses an insert race is
    discarded and a fresh one drawn.
    """

    def __init__(
        self,
        repo: SharedWheelRepository,
        rng: Random | None = None,
    ) -> None:
        self.repo = repo
        self.rng = rng or secrets.SystemRandom()

    def generate(self) -> str:
        """Return a random candidate path without touching the store."""
        return f"{self._group()}-{self._group()}"

    def _group(self) -> str:
        return "".join(self.rng.choice(PATH_ALPHABET) for _ in range(PATH_GROUP_LENGTH))

    def allocate(self, insert: Callable[[str], None]) -> str:
        """Insert a row under a fresh path and return that path.

        Args:
            insert: Callback that inserts the row for a candidate path and
                raises ``IntegrityError`` if the path is already taken.

        Returns:
            The path the row was stored under.
        """
        attempts = 0
        while True:
            attempts += 1
            candidate = self.generate()
            if self.repo.exists(candidate):
                logger.debug("Path %s already in use, drawing again", candidate)
                continue
            try:
                insert(candidate)
            except IntegrityError:
                # Lost a race with a concurrent publisher.
                self.repo.session.rollback()
                if not self.repo.exists(candidate):
                    raise
                logger.info("Path %s taken by a concurrent insert, retrying", candidate)
                continue
            if attempts > 1:
                logger.debug("Allocated path %s after %d attempts", candidate, attempts)
            return candidate
