"""Prometheus metrics configuration."""

from prometheus_client import Counter, Histogram, Info

# Service info
SERVICE_INFO = Info("snippet_manager", "Snippet manager service information")

# Coordinator metrics
SNIPPET_OPERATIONS_TOTAL = Counter(
    "snippet_operations_total",
    "Total snippet create/edit/search operations",
    ["operation", "outcome"],  # outcome: success or the error code
)

SNIPPET_OPERATION_DURATION_SECONDS = Histogram(
    "snippet_operation_duration_seconds",
    "Snippet operation latency in seconds",
    ["operation"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)

SAGA_COMPENSATIONS_TOTAL = Counter(
    "saga_compensations_total",
    "Total compensating actions run after a failed write",
    ["saga", "step", "status"],  # status: success/failure
)

# Blob store metrics
BLOB_REQUESTS_TOTAL = Counter(
    "blob_requests_total",
    "Total blob store requests",
    ["operation", "status"],
)

BLOB_REQUEST_DURATION_SECONDS = Histogram(
    "blob_request_duration_seconds",
    "Blob store request latency in seconds",
    ["operation"],
    buckets=(0.01, 0.025, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0),
)


def set_service_info(version: str, environment: str) -> None:
    """Set service information.

    Args:
        version: Service version
        environment: Deployment environment
    """
    SERVICE_INFO.info({
        "version": version,
        "environment": environment,
    })


def record_snippet_operation(
    operation: str,
    outcome: str,
    duration_seconds: float,
) -> None:
    """Record a coordinator operation.

    Args:
        operation: create, edit or search
        outcome: "success" or the error code that ended the operation
        duration_seconds: Operation duration in seconds
    """
    SNIPPET_OPERATIONS_TOTAL.labels(
        operation=operation,
        outcome=outcome,
    ).inc()
    SNIPPET_OPERATION_DURATION_SECONDS.labels(
        operation=operation,
    ).observe(duration_seconds)


def record_compensation(saga: str, step: str, status: str) -> None:
    """Record a compensating action.

    Args:
        saga: Saga name
        step: Step being undone
        status: success or failure
    """
    SAGA_COMPENSATIONS_TOTAL.labels(
        saga=saga,
        step=step,
        status=status,
    ).inc()


def record_blob_request(
    operation: str,
    status: str,
    duration_seconds: float,
) -> None:
    """Record a blob store request.

    Args:
        operation: put or delete
        status: HTTP status code or error label
        duration_seconds: Request duration in seconds
    """
    BLOB_REQUESTS_TOTAL.labels(
        operation=operation,
        status=status,
    ).inc()
    BLOB_REQUEST_DURATION_SECONDS.labels(
        operation=operation,
    ).observe(duration_seconds)
