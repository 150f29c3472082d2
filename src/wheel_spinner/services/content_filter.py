# src/wheel_spinner/services/content_filter.py
"""Dirty-word screening for shared wheel entries."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

_NBSP = "&nbsp;"
# , . : ; ! / ? - + " [ ] ( ) _ # =
_WORD_BREAKS = re.compile(r'[,.:;!/?\-+"\[\]()_#=]')


@dataclass(frozen=True)
class DirtyWordList:
    """Immutable set of banned lowercase tokens."""

    words: frozenset[str] = field(default_factory=frozenset)

    @classmethod
    def from_iterable(cls, words: Iterable[str] | None) -> DirtyWordList:
        """Build a list from raw words, lowercasing and dropping blanks."""
        if not words:
            return cls()
        return cls(frozenset(w.strip().lower() for w in words if w and w.strip()))

    def as_list(self) -> list[str]:
        """Return the words in the order they are persisted."""
        return sorted(self.words)

    def __contains__(self, token: object) -> bool:
        return token in self.words

    def __bool__(self) -> bool:
        return bool(self.words)


def tokenize(text: str) -> list[str]:
    """Split entry text into lowercase tokens on whitespace and punctuation."""
    lowered = text.lower().replace(_NBSP, " ")
    return _WORD_BREAKS.sub(" ", lowered).split()


def is_entry_blocked(entry: Any, dirty_words: DirtyWordList) -> bool:
    """Return True if a single entry's text contains a dirty token."""
    if not isinstance(entry, Mapping):
        return False
    text = entry.get("text")
    if not text or not isinstance(text, str):
        return False
    return any(token in dirty_words for token in tokenize(text))


def is_blocked(entries: Iterable[Any] | None, dirty_words: DirtyWordList) -> bool:
    """Return True if any entry contains a dirty token.

    Matching is exact per token, so "foo" blocks "Foo." but not "foobar".
    Obfuscated spellings are not caught.
    """
    if not entries or not dirty_words:
        return False
    return any(is_entry_blocked(entry, dirty_words) for entry in entries)


class ContentFilter:
    """Screen wheel entries against a fixed dirty-word list."""

    def __init__(self, dirty_words: DirtyWordList) -> None:
        self.dirty_words = dirty_words

    def is_blocked(self, entries: Iterable[Any] | None) -> bool:
        """Return True if publishing these entries must be refused."""
        return is_blocked(entries, self.dirty_words)

    def is_config_blocked(self, config: Mapping[str, Any]) -> bool:
        """Screen the ``entries`` of a wheel config payload.

        Entries that are present but not a list cannot be screened and are
        refused.
        """
        entries = config.get("entries")
        if entries is None:
            return False
        if not isinstance(entries, list):
            return True
        return self.is_blocked(entries)
