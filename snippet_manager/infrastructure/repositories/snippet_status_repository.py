"""Snippet status repository implementation."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from snippet_manager.domain.entities.snippet import SnippetStatus
from snippet_manager.infrastructure.database.models.snippet import SnippetStatusModel
from snippet_manager.infrastructure.repositories.base import BaseRepository


class SnippetStatusRepositoryImpl(BaseRepository[SnippetStatusModel, SnippetStatus]):
    """SQLAlchemy implementation of SnippetStatusRepository."""

    model_class = SnippetStatusModel

    def __init__(self, session: AsyncSession):
        super().__init__(session)

    async def get_by_snippet_and_user(
        self, snippet_id: int, user_email: str
    ) -> SnippetStatus | None:
        """Get the status row for a user on a snippet."""
        stmt = select(SnippetStatusModel).where(
            SnippetStatusModel.snippet_id == snippet_id,
            SnippetStatusModel.user_email == user_email,
        )
        result = await self.session.execute(stmt)
        model = result.scalar_one_or_none()
        return model.to_entity() if model else None
