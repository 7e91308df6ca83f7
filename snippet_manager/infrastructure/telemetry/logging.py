"""Structured logging with context injection."""

import json
import logging
import sys
from contextvars import ContextVar
from datetime import UTC, datetime
from typing import Any

# Context variables for correlation IDs
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)
user_email_var: ContextVar[str | None] = ContextVar("user_email", default=None)
snippet_id_var: ContextVar[str | None] = ContextVar("snippet_id", default=None)

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RECORD_ATTRS = frozenset(
    logging.LogRecord("", logging.INFO, "", 0, "", None, None).__dict__
) | {"message", "asctime", "taskName"}


def set_request_context(
    request_id: str | None = None,
    user_email: str | None = None,
    snippet_id: str | int | None = None,
) -> None:
    """Set context variables for request correlation."""
    if request_id is not None:
        request_id_var.set(request_id)
    if user_email is not None:
        user_email_var.set(user_email)
    if snippet_id is not None:
        snippet_id_var.set(str(snippet_id))


def clear_request_context() -> None:
    """Clear all context variables."""
    request_id_var.set(None)
    user_email_var.set(None)
    snippet_id_var.set(None)


def _extra_fields(record: logging.LogRecord) -> dict[str, Any]:
    return {
        key: value
        for key, value in record.__dict__.items()
        if key not in _RECORD_ATTRS and not key.startswith("_")
    }


class StructuredFormatter(logging.Formatter):
    """JSON formatter with automatic context injection."""

    def __init__(self, service_name: str | None = None) -> None:
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_data: dict[str, Any] = {
            "ts": datetime.now(UTC).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "message": record.getMessage(),
            "service": self.service_name,
        }

        # Add correlation IDs from context
        if request_id := request_id_var.get():
            log_data["request_id"] = request_id
        if user_email := user_email_var.get():
            log_data["user_email"] = user_email
        if snippet_id := snippet_id_var.get():
            log_data["snippet_id"] = snippet_id

        # Add exception info if present
        if record.exc_info:
            log_data["exc_info"] = self.formatException(record.exc_info)

        log_data.update(_extra_fields(record))

        # Filter out None values
        log_data = {k: v for k, v in log_data.items() if v is not None}

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """Human-readable text formatter for development."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.now(UTC).strftime("%Y-%m-%d %H:%M:%S")
        level = record.levelname
        name = record.name
        message = record.getMessage()

        # Build context string
        context_parts = []
        if request_id := request_id_var.get():
            context_parts.append(f"req={request_id[:8]}")
        if user_email := user_email_var.get():
            context_parts.append(f"user={user_email}")
        if snippet_id := snippet_id_var.get():
            context_parts.append(f"snippet={snippet_id}")

        context_str = f" [{', '.join(context_parts)}]" if context_parts else ""

        base = f"{timestamp} | {level:8} | {name}{context_str} | {message}"

        extra = _extra_fields(record)
        if extra:
            base += " | " + " ".join(f"{k}={v}" for k, v in extra.items())

        if record.exc_info:
            base += "\n" + self.formatException(record.exc_info)

        return base


class ContextLogger(logging.LoggerAdapter):
    """Logger adapter that supports extra fields."""

    def process(
        self, msg: str, kwargs: dict[str, Any]
    ) -> tuple[str, dict[str, Any]]:
        extra = kwargs.get("extra", {})
        if self.extra:
            extra.update(self.extra)
        kwargs["extra"] = extra
        return msg, kwargs


def configure_logging(
    level: str = "INFO",
    format_type: str = "json",
    service_name: str = "snippet-manager",
) -> None:
    """Configure structured logging for the application.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR)
        format_type: Output format ('json' or 'text')
        service_name: Service name for log identification
    """
    handler = logging.StreamHandler(sys.stdout)

    if format_type == "json":
        formatter: logging.Formatter = StructuredFormatter(service_name)
    else:
        formatter = TextFormatter()

    handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.handlers.clear()
    root_logger.addHandler(handler)
    root_logger.setLevel(getattr(logging, level.upper()))

    # Reduce noise from external libraries
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if level == "DEBUG" else logging.WARNING
    )


def get_logger(name: str, **extra: Any) -> ContextLogger:
    """Get a context-aware logger.

    Args:
        name: Logger name (usually __name__)
        **extra: Additional fields to include in every log message

    Returns:
        ContextLogger instance
    """
    logger = logging.getLogger(name)
    return ContextLogger(logger, extra)
