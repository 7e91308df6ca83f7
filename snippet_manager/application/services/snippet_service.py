"""Snippet service - coordinates snippet writes across independent stores.

A snippet spans three records: the metadata row, the caller's status row
and the code body in the blob store. There is no transaction covering all
three, so creation runs as a saga and undoes the relational rows when the
code upload fails.
"""

import time
from collections.abc import Generator
from contextlib import contextmanager

from sqlalchemy.ext.asyncio import AsyncSession

from snippet_manager.application.saga import CompensationFailure, Saga
from snippet_manager.config import Settings, get_settings
from snippet_manager.domain.entities import Identity, Snippet, SnippetStatus
from snippet_manager.domain.errors import (
    AppError,
    AuthError,
    PersistenceFailureError,
    SnippetEditForbiddenError,
    SnippetNotFoundError,
    SnippetNotSharedError,
    ValidationError,
)
from snippet_manager.domain.protocols import (
    BlobStore,
    SnippetQueryRepository,
    SnippetRepository,
    SnippetStatusRepository,
)
from snippet_manager.infrastructure.repositories import (
    SnippetQueryRepositoryImpl,
    SnippetRepositoryImpl,
    SnippetStatusRepositoryImpl,
)
from snippet_manager.infrastructure.telemetry import (
    create_span,
    get_logger,
    record_snippet_operation,
)
from snippet_manager.schemas import (
    Page,
    PageRequest,
    SnippetEdit,
    SnippetFilter,
    SnippetInput,
    SnippetOutput,
    SnippetSummary,
)

logger = get_logger(__name__)



def is_author(snippet: Snippet, identity: Identity) -> bool:
    """Check if ``identity`` created the snippet."""
    return snippet.author == identity.email


def has_status_relationship(status: SnippetStatus | None, identity: Identity) -> bool:
    """Check if a status row ties ``identity`` to the snippet.

    The row's existence is what proves the snippet was shared with the user.
    """
    return status is not None and status.user_email == identity.email


@contextmanager
def _track_operation(operation: str) -> Generator[None, None, None]:
    start = time.perf_counter()
    outcome = "success"
    try:
        yield
    except AppError as e:
        outcome = e.code
        raise
    except Exception:
        outcome = "error"
        raise
    finally:
        record_snippet_operation(operation, outcome, time.perf_counter() - start)


class SnippetService:
    """Service for creating, editing and searching snippets.

    Holds no state between calls; every call runs its store operations one
    after another, awaiting each before the next. Concurrent edits of the
    same snippet are not serialized: the last writer wins.
    """

    def __init__(
        self,
        snippet_repo: SnippetRepository,
        status_repo: SnippetStatusRepository,
        blob_store: BlobStore,
        query_repo: SnippetQueryRepository,
        settings: Settings | None = None,
    ):
        self.snippet_repo = snippet_repo
        self.status_repo = status_repo
        self.blob_store = blob_store
        self.query_repo = query_repo
        self.settings = settings or get_settings()

    @classmethod
    def from_session(
        cls,
        db: AsyncSession,
        blob_store: BlobStore,
        settings: Settings | None = None,
    ) -> "SnippetService":
        """Build a service whose relational stores share one database session."""
        return cls(
            snippet_repo=SnippetRepositoryImpl(db),
            status_repo=SnippetStatusRepositoryImpl(db),
            blob_store=blob_store,
            query_repo=SnippetQueryRepositoryImpl(db),
            settings=settings,
        )

    async def create_snippet(
        self,
        snippet_input: SnippetInput,
        identity: Identity,
    ) -> SnippetOutput:
        """Create a snippet, its author's PENDING status and its code body.

        Args:
            snippet_input: Name, language and code
            identity: Caller, recorded as the author

        Returns:
            The stored snippet with its code

        Raises:
            PersistenceFailureError: If any store write fails. Rows written
                before the failure are deleted again, newest first.
        """
        saga = Saga("create_snippet")

        with _track_operation("create"), create_span(
            "snippet.create",
            {"snippet.language": snippet_input.language, "user.email": identity.email},
        ):
            try:
                snippet = await saga.run_step(
                    "insert_snippet",
                    lambda: self.snippet_repo.create(
                        Snippet(
                            name=snippet_input.name,
                            language=snippet_input.language,
                            author=identity.email,
                        )
                    ),
                    compensate=lambda created: self.snippet_repo.delete(created.id),
                )
                await saga.run_step(
                    "insert_status",
                    lambda: self.status_repo.create(
                        SnippetStatus(snippet_id=snippet.id, user_email=identity.email)
                    ),
                    compensate=lambda created: self.status_repo.delete(created.id),
                )
                await saga.run_step(
                    "put_code",
                    lambda: self.blob_store.put(snippet.code_key, snippet_input.code),
                )
            except Exception as e:
                failures = await saga.compensate()
                raise self._persistence_failure(saga, e, failures) from e

            saga.complete()

        logger.info(
            "Snippet created",
            extra={
                "snippet_id": snippet.id,
                "author": snippet.author,
                "language": snippet.language,
            },
        )

        return SnippetOutput(
            id=snippet.id,
            name=snippet.name,
            language=snippet.language,
            code=snippet_input.code,
            author=snippet.author,
        )

    async def edit_snippet(
        self,
        snippet_id: int,
        snippet_edit: SnippetEdit,
        identity: Identity,
    ) -> SnippetOutput:
        """Replace a snippet's code and reset the caller's status to PENDING.

        The old code body is deleted before the new one is written. A failure
        after that point is reported but not undone: the status stays PENDING
        and the snippet may be left without code until the next edit.

        Args:
            snippet_id: Snippet to edit
            snippet_edit: New code
            identity: Caller, must be the author and hold a status row

        Returns:
            The snippet with its new code

        Raises:
            SnippetNotFoundError: If the snippet does not exist
            SnippetEditForbiddenError: If the caller is not the author
            SnippetNotSharedError: If the caller has no status row
            PersistenceFailureError: If a store operation fails
        """
        saga = Saga("edit_snippet")

        with _track_operation("edit"), create_span(
            "snippet.edit",
            {"snippet.id": snippet_id, "user.email": identity.email},
        ):
            try:
                snippet = await self.snippet_repo.get_by_id(snippet_id)
                if snippet is None:
                    raise SnippetNotFoundError(
                        message=f"Snippet {snippet_id} not found",
                        details={"snippet_id": snippet_id},
                    )

                if not is_author(snippet, identity):
                    raise SnippetEditForbiddenError(
                        message="No permission to edit this snippet",
                        details={"snippet_id": snippet_id},
                    )

                status = await self.status_repo.get_by_snippet_and_user(
                    snippet_id, identity.email
                )
                if not has_status_relationship(status, identity):
                    raise SnippetNotSharedError(
                        message="Snippet was never shared with this user",
                        details={"snippet_id": snippet_id},
                    )

                status.mark_pending()
                await saga.run_step("reset_status", lambda: self.status_repo.update(status))
                await saga.run_step("delete_code", lambda: self.blob_store.delete(snippet.code_key))
                await saga.run_step(
                    "put_code",
                    lambda: self.blob_store.put(snippet.code_key, snippet_edit.code),
                )
            except (SnippetNotFoundError, AuthError):
                raise
            except Exception as e:
                if "delete_code" in saga.completed_steps:
                    logger.warning(
                        "Snippet code deleted but new code not stored",
                        extra={"snippet_id": snippet_id, "failed_step": saga.failed_step},
                    )
                raise self._persistence_failure(saga, e) from e

            saga.complete()

        logger.info(
            "Snippet edited",
            extra={"snippet_id": snippet_id, "user_email": identity.email},
        )

        return SnippetOutput(
            id=snippet.id,
            name=snippet.name,
            language=snippet.language,
            code=snippet_edit.code,
            author=snippet.author,
        )

    async def search_snippets(
        self,
        snippet_filter: SnippetFilter,
        page: int,
        size: int | None,
        identity: Identity,
    ) -> Page[SnippetSummary]:
        """Search snippets visible to the caller, newest first.

        Args:
            snippet_filter: Search criteria
            page: Zero-based page index
            size: Page size, defaults to the configured page size
            identity: Caller; scopes visibility

        Returns:
            One page of snippet summaries

        Raises:
            ValidationError: If page or size is out of range
        """
        with _track_operation("search"):
            if size is None:
                size = self.settings.default_page_size

            if page < 0:
                raise ValidationError(
                    message="Page index must not be negative",
                    details={"page": page},
                )
            if not 1 <= size <= self.settings.max_page_size:
                raise ValidationError(
                    message=f"Page size must be between 1 and {self.settings.max_page_size}",
                    details={"size": size},
                )

            page_request = PageRequest(page=page, size=size, sort_by="id", direction="desc")
            return await self.query_repo.filter_snippets(
                snippet_filter, page_request, identity.email
            )

    @staticmethod
    def _persistence_failure(
        saga: Saga,
        error: Exception,
        compensation_failures: list[CompensationFailure] | None = None,
    ) -> PersistenceFailureError:
        failures = compensation_failures or []
        logger.error(
            "Snippet write failed",
            extra={
                "saga": saga.name,
                "failed_step": saga.failed_step or "lookup",
                "completed_steps": saga.completed_steps,
                "saga_state": saga.state.value,
                "error_type": type(error).__name__,
            },
        )
        return PersistenceFailureError(
            message=f"Error saving snippet: {error}",
            operation=saga.name,
            cause=error,
            details={
                "failed_step": saga.failed_step or "lookup",
                "completed_steps": saga.completed_steps,
                "compensation_failures": [f.to_dict() for f in failures],
            },
        )
