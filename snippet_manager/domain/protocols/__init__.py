"""Domain protocols - abstract interfaces for infrastructure implementations."""

from snippet_manager.domain.protocols.repositories import (
    SnippetQueryRepository,
    SnippetRepository,
    SnippetStatusRepository,
)
from snippet_manager.domain.protocols.storage import BlobStore

__all__ = [
    # Repositories
    "SnippetRepository",
    "SnippetStatusRepository",
    "SnippetQueryRepository",
    # Storage
    "BlobStore",
]
