"""Repository protocols - abstract interfaces for data access."""

from typing import Protocol

from snippet_manager.domain.entities import Snippet, SnippetStatus
from snippet_manager.schemas import Page, PageRequest, SnippetFilter, SnippetSummary


class SnippetRepository(Protocol):
    """Abstract interface for snippet metadata access."""

    async def get_by_id(self, snippet_id: int) -> Snippet | None:
        """Get snippet by ID."""
        ...

    async def create(self, snippet: Snippet) -> Snippet:
        """Insert a snippet and return it with its assigned ID."""
        ...

    async def delete(self, snippet_id: int) -> bool:
        """Delete a snippet by ID."""
        ...


class SnippetStatusRepository(Protocol):
    """Abstract interface for per-user snippet status access."""

    async def get_by_snippet_and_user(
        self, snippet_id: int, user_email: str
    ) -> SnippetStatus | None:
        """Get the status row for a user on a snippet."""
        ...

    async def create(self, status: SnippetStatus) -> SnippetStatus:
        """Insert a status row."""
        ...

    async def update(self, status: SnippetStatus) -> SnippetStatus:
        """Persist changes to an existing status row."""
        ...

    async def delete(self, status_id: int) -> bool:
        """Delete a status row by ID."""
        ...


class SnippetQueryRepository(Protocol):
    """Abstract interface for filtered snippet search."""

    async def filter_snippets(
        self,
        snippet_filter: SnippetFilter,
        page_request: PageRequest,
        user_email: str,
    ) -> Page[SnippetSummary]:
        """Return the page of snippets visible to ``user_email``."""
        ...
