"""Tests for the saga step/compensation bookkeeping."""

import pytest

from snippet_manager.application.saga import Saga, SagaState


class Ledger:
    """Records compensations in the order they run."""

    def __init__(self, fail_on: set[str] | None = None):
        self.undone: list[str] = []
        self.fail_on = fail_on or set()

    def undo(self, label: str):
        async def _undo(result):
            if label in self.fail_on:
                raise RuntimeError(f"cannot undo {label}")
            self.undone.append(f"{label}:{result}")

        return _undo


async def _value(value):
    return value


async def _boom():
    raise RuntimeError("step failed")


@pytest.mark.asyncio
async def test_run_step_returns_result_and_records_step():
    saga = Saga("test")

    result = await saga.run_step("first", lambda: _value(42))

    assert result == 42
    assert saga.completed_steps == ["first"]
    assert saga.state == SagaState.RUNNING
    assert saga.failed_step is None


@pytest.mark.asyncio
async def test_failed_step_is_not_recorded():
    saga = Saga("test")
    await saga.run_step("first", lambda: _value(1))

    with pytest.raises(RuntimeError, match="step failed"):
        await saga.run_step("second", _boom)

    assert saga.completed_steps == ["first"]
    assert saga.failed_step == "second"


@pytest.mark.asyncio
async def test_compensate_runs_in_reverse_order_with_step_results():
    ledger = Ledger()
    saga = Saga("test")
    await saga.run_step("a", lambda: _value(1), compensate=ledger.undo("a"))
    await saga.run_step("b", lambda: _value(2), compensate=ledger.undo("b"))
    await saga.run_step("c", lambda: _value(3))

    failures = await saga.compensate()

    assert failures == []
    assert ledger.undone == ["b:2", "a:1"]
    assert saga.state == SagaState.COMPENSATED


@pytest.mark.asyncio
async def test_compensate_continues_past_failures():
    ledger = Ledger(fail_on={"b"})
    saga = Saga("test")
    await saga.run_step("a", lambda: _value(1), compensate=ledger.undo("a"))
    await saga.run_step("b", lambda: _value(2), compensate=ledger.undo("b"))

    failures = await saga.compensate()

    assert ledger.undone == ["a:1"]
    assert [f.step for f in failures] == ["b"]
    assert failures[0].to_dict() == {
        "step": "b",
        "error_type": "RuntimeError",
        "error": "cannot undo b",
    }
    assert saga.state == SagaState.COMPENSATION_FAILED


@pytest.mark.asyncio
async def test_completed_saga_cannot_run_or_compensate():
    saga = Saga("test")
    await saga.run_step("a", lambda: _value(1))
    saga.complete()

    assert saga.state == SagaState.COMPLETED
    with pytest.raises(RuntimeError):
        await saga.run_step("b", lambda: _value(2))
    with pytest.raises(RuntimeError):
        await saga.compensate()
