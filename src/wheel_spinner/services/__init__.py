# src/wheel_spinner/services/__init__.py
"""Business logic services for the Wheel Spinner application."""

from .content_filter import ContentFilter, DirtyWordList
from .moderation import Decision, ModerationQueue
from .path_allocator import PathAllocator
from .publication import PublicationService
from .reviewer_ledger import ReviewerLedger

__all__ = [
    "ContentFilter",
    "Decision",
    "DirtyWordList",
    "ModerationQueue",
    "PathAllocator",
    "PublicationService",
    "ReviewerLedger",
]
