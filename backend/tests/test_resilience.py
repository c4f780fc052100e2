"""Tests for the retry and deadline policies."""
from __future__ import annotations

import asyncio

import pytest

pytestmark = pytest.mark.anyio("asyncio")

from iconset.services import resilience
from iconset.services.errors import GenerationTimeoutError, NoImageProducedError
from iconset.services.resilience import is_retryable, with_retry, with_timeout


class _FlakyTask:
    def __init__(self, failures: list[Exception], result: str = "ok") -> None:
        self._failures = list(failures)
        self._result = result
        self.calls = 0

    async def __call__(self) -> str:
        self.calls += 1
        if self._failures:
            raise self._failures.pop(0)
        return self._result


@pytest.fixture
def recorded_sleeps(monkeypatch: pytest.MonkeyPatch) -> list[float]:
    sleeps: list[float] = []

    async def fake_sleep(seconds: float) -> None:
        sleeps.append(seconds)

    monkeypatch.setattr(resilience, "_sleep", fake_sleep)
    return sleeps


async def test_retry_returns_first_success(recorded_sleeps: list[float]) -> None:
    task = _FlakyTask([])

    assert await with_retry(task, attempts=3, base_delay=1.0) == "ok"
    assert task.calls == 1
    assert recorded_sleeps == []


async def test_retry_recovers_from_transient_failures(recorded_sleeps: list[float]) -> None:
    task = _FlakyTask([ConnectionError("reset by peer"), NoImageProducedError("No image generated")])

    assert await with_retry(task, attempts=3, base_delay=2.0) == "ok"
    assert task.calls == 3
    assert recorded_sleeps == [2.0, 4.0]


async def test_retry_reraises_last_error_after_budget(recorded_sleeps: list[float]) -> None:
    task = _FlakyTask([ConnectionError("one"), ConnectionError("two"), ConnectionError("three")])

    with pytest.raises(ConnectionError, match="three"):
        await with_retry(task, attempts=3, base_delay=1.0)
    assert task.calls == 3
    assert recorded_sleeps == [1.0, 2.0]


@pytest.mark.parametrize("message", ["Invalid prompt", "field prompt is required"])
async def test_retry_stops_on_validation_errors(
    recorded_sleeps: list[float], message: str
) -> None:
    task = _FlakyTask([ValueError(message)])

    with pytest.raises(ValueError, match=message):
        await with_retry(task, attempts=3, base_delay=1.0)
    assert task.calls == 1
    assert recorded_sleeps == []


def test_is_retryable_classifies_messages() -> None:
    assert is_retryable(ConnectionError("timeout talking to upstream"))
    assert is_retryable(NoImageProducedError("No image generated"))
    assert not is_retryable(ValueError("INVALID size"))
    assert not is_retryable(ValueError("model is required"))


async def test_timeout_passes_through_results() -> None:
    async def quick() -> str:
        return "done"

    assert await with_timeout(quick(), 1.0) == "done"


async def test_timeout_raises_generation_timeout() -> None:
    async def slow() -> str:
        await asyncio.sleep(1)
        return "late"

    with pytest.raises(GenerationTimeoutError, match="timed out"):
        await with_timeout(slow(), 0.05)


async def test_deadline_bounds_whole_retry_sequence() -> None:
    task = _FlakyTask([ConnectionError("a"), ConnectionError("b"), ConnectionError("c")])

    with pytest.raises(GenerationTimeoutError):
        await with_timeout(with_retry(task, attempts=3, base_delay=0.5), 0.1)
    # second attempt never ran: the first backoff outlived the deadline
    assert task.calls == 1
