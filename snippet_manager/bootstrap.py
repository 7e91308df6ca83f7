"""Process setup and per-request wiring for the snippet service."""

from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from snippet_manager.application.services import SnippetService
from snippet_manager.config import Settings, get_settings
from snippet_manager.domain.protocols import BlobStore
from snippet_manager.infrastructure.database import close_db, get_db_session, get_engine
from snippet_manager.infrastructure.storage import AssetServiceBlobStore
from snippet_manager.infrastructure.telemetry import (
    configure_logging,
    configure_tracing,
    get_logger,
    instrument_httpx,
    instrument_sqlalchemy,
    set_service_info,
    shutdown_tracing,
)

logger = get_logger(__name__)


def configure_observability(settings: Settings | None = None) -> None:
    """Configure logging, metrics and (optionally) tracing for the process."""
    if settings is None:
        settings = get_settings()

    configure_logging(
        level=settings.log_level,
        format_type=settings.log_format,
        service_name=settings.otel_service_name,
    )

    if settings.prometheus_enabled:
        set_service_info(
            version=settings.version,
            environment=settings.environment,
        )

    if settings.otel_enabled:
        configure_tracing(
            service_name=settings.otel_service_name,
            service_version=settings.version,
            environment=settings.environment,
            otlp_endpoint=settings.otlp_endpoint or None,
        )
        instrument_httpx()
        instrument_sqlalchemy(get_engine(settings).sync_engine)

    logger.info(
        "Snippet manager configured",
        extra={
            "version": settings.version,
            "environment": settings.environment,
        },
    )


async def shutdown() -> None:
    """Release the database pool and flush pending spans (call on exit)."""
    await close_db()
    shutdown_tracing()
    logger.info("Snippet manager shut down")


@asynccontextmanager
async def snippet_service_scope(
    settings: Settings | None = None,
    blob_store: BlobStore | None = None,
) -> AsyncGenerator[SnippetService, None]:
    """Yield a SnippetService bound to one database session.

    The session commits when the block exits normally and rolls back when it
    raises. An asset-service client is created (and closed) unless
    ``blob_store`` is given.
    """
    if settings is None:
        settings = get_settings()

    owned_store = None
    if blob_store is None:
        owned_store = AssetServiceBlobStore(settings)
        blob_store = owned_store

    try:
        async with get_db_session(settings) as db:
            yield SnippetService.from_session(db, blob_store, settings)
    finally:
        if owned_store is not None:
            await owned_store.close()
