"""Ordered writes across independent stores with reverse-order compensation.

A saga records each step that completed, together with the action that
undoes it. When a later step fails the caller runs ``compensate()``, which
undoes completed steps newest-first. Progress is kept as explicit state on
the saga, so compensation does not depend on how the failure was raised.
"""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, TypeVar

from snippet_manager.infrastructure.telemetry.logging import get_logger
from snippet_manager.infrastructure.telemetry.metrics import record_compensation

logger = get_logger(__name__)

T = TypeVar("T")


class SagaState(str, Enum):
    """Lifecycle of a saga."""

    RUNNING = "running"
    COMPLETED = "completed"
    COMPENSATING = "compensating"
    COMPENSATED = "compensated"
    COMPENSATION_FAILED = "compensation_failed"


@dataclass
class CompletedStep:
    """A step that succeeded, with the value its compensation needs."""

    name: str
    result: Any
    compensate: Callable[[Any], Awaitable[Any]] | None = None


@dataclass
class CompensationFailure:
    """A compensating action that raised."""

    step: str
    error: Exception

    def to_dict(self) -> dict[str, str]:
        return {
            "step": self.step,
            "error_type": type(self.error).__name__,
            "error": str(self.error),
        }


@dataclass
class Saga:
    """State of one multi-store write."""

    name: str
    state: SagaState = SagaState.RUNNING
    completed: list[CompletedStep] = field(default_factory=list)
    failed_step: str | None = None
    compensation_failures: list[CompensationFailure] = field(default_factory=list)

    @property
    def completed_steps(self) -> list[str]:
        return [step.name for step in self.completed]

    async def run_step(
        self,
        name: str,
        action: Callable[[], Awaitable[T]],
        compensate: Callable[[T], Awaitable[Any]] | None = None,
    ) -> T:
        """Run one step and remember how to undo it.

        Args:
            name: Step name for logs and metrics
            action: Zero-argument coroutine function performing the write
            compensate: Called with the step's result to undo it

        Returns:
            The step's result

        Raises:
            Whatever ``action`` raises; the step is then not recorded.
        """
        if self.state != SagaState.RUNNING:
            raise RuntimeError(f"Saga {self.name} is {self.state.value}, cannot run {name}")

        try:
            result = await action()
        except Exception:
            self.failed_step = name
            raise

        self.completed.append(CompletedStep(name=name, result=result, compensate=compensate))
        return result

    def complete(self) -> None:
        """Mark every step as done; nothing will be compensated."""
        self.state = SagaState.COMPLETED

    async def compensate(self) -> list[CompensationFailure]:
        """Undo completed steps in reverse order.

        Every compensation is attempted even if an earlier one fails.
        Failures are logged and returned, never raised.
        """
        if self.state in (SagaState.COMPLETED, SagaState.COMPENSATED):
            raise RuntimeError(f"Saga {self.name} is {self.state.value}, nothing to compensate")

        self.state = SagaState.COMPENSATING

        for step in reversed(self.completed):
            if step.compensate is None:
                continue
            try:
                await step.compensate(step.result)
            except Exception as e:
                self.compensation_failures.append(CompensationFailure(step=step.name, error=e))
                record_compensation(self.name, step.name, "failure")
                logger.error(
                    "Compensation failed, data may be inconsistent",
                    exc_info=True,
                    extra={
                        "saga": self.name,
                        "step": step.name,
                        "failed_step": self.failed_step,
                    },
                )
            else:
                record_compensation(self.name, step.name, "success")
                logger.info(
                    "Step compensated",
                    extra={"saga": self.name, "step": step.name},
                )

        self.state = (
            SagaState.COMPENSATION_FAILED
            if self.compensation_failures
            else SagaState.COMPENSATED
        )
        return list(self.compensation_failures)
