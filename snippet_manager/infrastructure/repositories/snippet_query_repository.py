"""Snippet search repository implementation."""

from typing import Any

from sqlalchemy import and_, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import aliased

from snippet_manager.domain.entities.snippet import ReviewStatus
from snippet_manager.infrastructure.database.models.snippet import (
    SnippetModel,
    SnippetStatusModel,
)
from snippet_manager.schemas import Page, PageRequest, SnippetFilter, SnippetSummary

_SORT_COLUMNS = {
    "id": SnippetModel.id,
    "name": SnippetModel.name,
    "language": SnippetModel.language,
}


class SnippetQueryRepositoryImpl:
    """SQLAlchemy implementation of SnippetQueryRepository.

    A snippet is visible to a user who authored it or holds a status row
    for it. The caller's own status is returned alongside each row.
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def filter_snippets(
        self,
        snippet_filter: SnippetFilter,
        page_request: PageRequest,
        user_email: str,
    ) -> Page[SnippetSummary]:
        """Return the page of snippets visible to ``user_email``."""
        caller_status = aliased(SnippetStatusModel)

        stmt = (
            select(SnippetModel, caller_status.status)
            .outerjoin(
                caller_status,
                and_(
                    caller_status.snippet_id == SnippetModel.id,
                    caller_status.user_email == user_email,
                ),
            )
            .where(*self._conditions(snippet_filter, caller_status, user_email))
        )

        count_stmt = select(func.count()).select_from(stmt.subquery())
        total = (await self.session.execute(count_stmt)).scalar_one()

        sort_column = _SORT_COLUMNS[page_request.sort_by]
        order = sort_column.desc() if page_request.direction == "desc" else sort_column.asc()
        stmt = stmt.order_by(order).offset(page_request.offset).limit(page_request.size)

        rows = (await self.session.execute(stmt)).all()
        items = [
            SnippetSummary(
                id=model.id,
                name=model.name,
                language=model.language,
                author=model.author,
                status=ReviewStatus(status) if status else None,
            )
            for model, status in rows
        ]

        return Page[SnippetSummary](
            items=items,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
        )

    @staticmethod
    def _conditions(
        snippet_filter: SnippetFilter,
        caller_status: Any,
        user_email: str,
    ) -> list[Any]:
        is_author = SnippetModel.author == user_email
        is_shared = caller_status.id.is_not(None)

        if snippet_filter.relation == "owned":
            conditions = [is_author]
        elif snippet_filter.relation == "shared":
            conditions = [~is_author, is_shared]
        else:
            conditions = [or_(is_author, is_shared)]

        if snippet_filter.name:
            conditions.append(
                SnippetModel.name.icontains(snippet_filter.name, autoescape=True)
            )
        if snippet_filter.language:
            conditions.append(SnippetModel.language == snippet_filter.language)
        if snippet_filter.status is not None:
            conditions.append(caller_status.status == snippet_filter.status.value)

        return conditions
