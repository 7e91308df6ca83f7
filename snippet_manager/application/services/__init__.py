"""Application services."""

from snippet_manager.application.services.snippet_service import (
    SnippetService,
    has_status_relationship,
    is_author,
)

__all__ = ["SnippetService", "has_status_relationship", "is_author"]
