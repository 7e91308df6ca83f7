"""Telemetry infrastructure (logging, tracing, metrics)."""

from snippet_manager.infrastructure.telemetry.logging import (
    ContextLogger,
    clear_request_context,
    configure_logging,
    get_logger,
    request_id_var,
    set_request_context,
    snippet_id_var,
    user_email_var,
)
from snippet_manager.infrastructure.telemetry.metrics import (
    record_blob_request,
    record_compensation,
    record_snippet_operation,
    set_service_info,
)
from snippet_manager.infrastructure.telemetry.tracing import (
    configure_tracing,
    create_span,
    get_tracer,
    instrument_httpx,
    instrument_sqlalchemy,
    shutdown_tracing,
)

__all__ = [
    # Logging
    "ContextLogger",
    "configure_logging",
    "get_logger",
    "set_request_context",
    "clear_request_context",
    "request_id_var",
    "user_email_var",
    "snippet_id_var",
    # Tracing
    "configure_tracing",
    "get_tracer",
    "create_span",
    "instrument_httpx",
    "instrument_sqlalchemy",
    "shutdown_tracing",
    # Metrics
    "set_service_info",
    "record_snippet_operation",
    "record_compensation",
    "record_blob_request",
]
