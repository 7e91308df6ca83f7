"""Domain entities - pure Python dataclasses representing business objects."""

from snippet_manager.domain.entities.identity import Identity
from snippet_manager.domain.entities.snippet import (
    ReviewStatus,
    Snippet,
    SnippetStatus,
    code_key,
)

__all__ = [
    "Identity",
    "ReviewStatus",
    "Snippet",
    "SnippetStatus",
    "code_key",
]
