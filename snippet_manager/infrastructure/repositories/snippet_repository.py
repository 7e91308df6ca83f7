"""Snippet repository implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from snippet_manager.domain.entities.snippet import Snippet
from snippet_manager.infrastructure.database.models.snippet import SnippetModel
from snippet_manager.infrastructure.repositories.base import BaseRepository


class SnippetRepositoryImpl(BaseRepository[SnippetModel, Snippet]):
    """SQLAlchemy implementation of SnippetRepository."""

    model_class = SnippetModel

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    async def get_by_id(self, snippet_id: int) -> Snippet | None:
        """Get snippet by ID."""
        return await super().get_by_id(snippet_id)

    async def delete(self, snippet_id: int) -> bool:
        """Delete a snippet; its status rows go with it (ON DELETE CASCADE)."""
        return await super().delete(snippet_id)
