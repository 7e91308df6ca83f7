"""Typed error hierarchy for the snippet manager.

All application errors inherit from AppError and provide:
- code: Machine-readable error code
- message: Human-readable description
- details: Additional context as dict
- retryable: Whether the operation can be retried
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass
class AppError(Exception):
    """Base application error with full context."""

    code: str = "APP_ERROR"
    message: str = ""
    details: dict[str, Any] = field(default_factory=dict)
    retryable: bool = False
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"

    def __post_init__(self) -> None:
        super().__init__(str(self))

    def to_dict(self) -> dict[str, Any]:
        """Serialize error for API responses and logging."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
            "retryable": self.retryable,
            "timestamp": self.timestamp.isoformat(),
        }


# --- Not Found Errors ---


@dataclass
class NotFoundError(AppError):
    """Resource not found."""

    code: str = "NOT_FOUND"
    retryable: bool = False


@dataclass
class SnippetNotFoundError(NotFoundError):
    """Snippet not found."""

    code: str = "SNIPPET_NOT_FOUND"


# --- Validation Errors ---


@dataclass
class ValidationError(AppError):
    """Input validation failed."""

    code: str = "VALIDATION_ERROR"
    retryable: bool = False


# --- Auth Errors ---


@dataclass
class AuthError(AppError):
    """Authentication/authorization failed."""

    code: str = "AUTH_ERROR"
    retryable: bool = False


@dataclass
class ForbiddenError(AuthError):
    """Caller is known but not allowed to perform the operation."""

    code: str = "FORBIDDEN"


@dataclass
class SnippetEditForbiddenError(ForbiddenError):
    """Caller is not the author of the snippet."""

    code: str = "SNIPPET_EDIT_FORBIDDEN"


@dataclass
class SnippetNotSharedError(AuthError):
    """Snippet was never shared with the caller (no status row)."""

    code: str = "SNIPPET_NOT_SHARED"


# --- Provider Errors ---


@dataclass
class ProviderError(AppError):
    """External provider failed."""

    code: str = "PROVIDER_ERROR"
    provider: str = ""
    operation: str = ""


@dataclass
class BlobStoreError(ProviderError):
    """Blob store rejected or failed an operation."""

    code: str = "BLOB_STORE_ERROR"
    key: str = ""


@dataclass
class BlobStoreTimeoutError(BlobStoreError):
    """Blob store call timed out."""

    code: str = "BLOB_STORE_TIMEOUT"
    retryable: bool = True


@dataclass
class BlobStoreUnavailableError(BlobStoreError):
    """Blob store is unavailable."""

    code: str = "BLOB_STORE_UNAVAILABLE"
    retryable: bool = True


# --- Database Errors ---


@dataclass
class DatabaseError(AppError):
    """Database operation failed."""

    code: str = "DATABASE_ERROR"
    operation: str = ""


# --- Persistence Errors ---


@dataclass
class PersistenceFailureError(AppError):
    """A store operation inside a snippet write failed.

    Always carries the originating failure in ``cause``. Compensations that
    could not be applied are listed under ``details["compensation_failures"]``
    and never replace the cause.
    """

    code: str = "PERSISTENCE_FAILURE"
    retryable: bool = True
    operation: str = ""
    cause: BaseException | None = None

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        if self.cause is not None:
            data["cause"] = {
                "type": type(self.cause).__name__,
                "message": str(self.cause),
            }
        return data
