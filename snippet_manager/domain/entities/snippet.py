"""Snippet and per-user snippet status entities."""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum


class ReviewStatus(str, Enum):
    """Review/compilation state of a snippet for one user."""

    PENDING = "PENDING"
    COMPLIANT = "COMPLIANT"
    NOT_COMPLIANT = "NOT_COMPLIANT"
    FAILED = "FAILED"


@dataclass
class Snippet:
    """Metadata record for one piece of stored source code.

    The code body itself lives in the blob store under ``code_key``.
    """

    name: str
    language: str
    author: str  # identity of the creator, never reassigned
    id: int | None = None  # assigned by the metadata store on insert
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("Snippet name is required")
        if not self.language:
            raise ValueError("Snippet language is required")
        if not self.author:
            raise ValueError("Snippet author is required")

    @property
    def code_key(self) -> str:
        """Blob store key holding this snippet's code."""
        if self.id is None:
            raise ValueError("Snippet has no id yet")
        return code_key(self.id)


@dataclass
class SnippetStatus:
    """Review status of a snippet for one user.

    A row exists per (snippet_id, user_email) sharing relationship.
    """

    snippet_id: int
    user_email: str
    status: ReviewStatus = ReviewStatus.PENDING
    id: int | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __post_init__(self) -> None:
        if not self.user_email:
            raise ValueError("SnippetStatus user_email is required")

    def is_pending(self) -> bool:
        """Check if the snippet awaits re-evaluation for this user."""
        return self.status == ReviewStatus.PENDING

    def mark_pending(self) -> None:
        """Reset to PENDING so the review pipeline re-evaluates the code."""
        self.status = ReviewStatus.PENDING
        self.updated_at = datetime.now(UTC)


def code_key(snippet_id: int) -> str:
    """Stable blob key for a snippet's code body."""
    return str(snippet_id)
