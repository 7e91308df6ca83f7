"""Repository implementations."""

from snippet_manager.infrastructure.repositories.base import BaseRepository
from snippet_manager.infrastructure.repositories.snippet_query_repository import (
    SnippetQueryRepositoryImpl,
)
from snippet_manager.infrastructure.repositories.snippet_repository import (
    SnippetRepositoryImpl,
)
from snippet_manager.infrastructure.repositories.snippet_status_repository import (
    SnippetStatusRepositoryImpl,
)

__all__ = [
    "BaseRepository",
    "SnippetQueryRepositoryImpl",
    "SnippetRepositoryImpl",
    "SnippetStatusRepositoryImpl",
]
