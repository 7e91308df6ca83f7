"""SQLAlchemy database models."""

from snippet_manager.infrastructure.database.models.base import Base, TimestampMixin
from snippet_manager.infrastructure.database.models.snippet import (
    SnippetModel,
    SnippetStatusModel,
)

__all__ = [
    "Base",
    "TimestampMixin",
    "SnippetModel",
    "SnippetStatusModel",
]
