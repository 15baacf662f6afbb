import asyncio

import pytest

from resilience_core.circuit_breaker import (
    CircuitBreaker,
    CircuitBreakerConfig,
    CircuitOpenError,
    Failure,
    Success,
)
from tests.resilience_core.support.fakes import FakeClock

pytestmark = pytest.mark.asyncio


def _breaker(threshold: int = 1, cooldown: int = 1000) -> CircuitBreaker:
    return CircuitBreaker(
        CircuitBreakerConfig(threshold=threshold, cooldown=cooldown),
        name="svc",
    )


async def _fail() -> None:
    raise RuntimeError("nope")


async def _ok() -> str:
    return "ok"


async def test_async_success_stays_closed() -> None:
    breaker = _breaker()

    result = await breaker.attempt_async(_ok)

    assert result == Success("ok")
    assert breaker.is_closed()


async def test_async_failure_opens_and_rejects(fake_clock: FakeClock) -> None:
    breaker = _breaker()
    ran = False

    async def _tracked() -> str:
        nonlocal ran
        ran = True
        return "ok"

    failed = await breaker.attempt_async(_fail)
    rejected = await breaker.attempt_async(_tracked)

    assert isinstance(failed, Failure)
    assert isinstance(failed.error, RuntimeError)
    assert isinstance(rejected.error, CircuitOpenError)
    assert rejected.error.last_failure is failed.error
    assert ran is False
    assert breaker.is_open()


async def test_async_probe_success_closes(fake_clock: FakeClock) -> None:
    breaker = _breaker()
    await breaker.attempt_async(_fail)
    fake_clock.advance_ms(1000)

    result = await breaker.attempt_async(_ok)

    assert result.get() == "ok"
    assert breaker.is_closed()
    assert breaker.failure_from_last_attempt is None


async def test_async_arguments_are_forwarded() -> None:
    breaker = _breaker()

    async def _add(left: int, right: int, *, scale: int) -> int:
        return (left + right) * scale

    result = await breaker.attempt_async(_add, 1, 2, scale=10)

    assert result.get() == 30


async def test_half_open_admits_concurrent_async_probes(
    fake_clock: FakeClock,
) -> None:
    breaker = _breaker()
    await breaker.attempt_async(_fail)
    fake_clock.advance_ms(1000)

    started = 0
    both_started = asyncio.Event()
    release = asyncio.Event()

    async def _probe() -> str:
        nonlocal started
        started += 1
        if started == 2:
            both_started.set()
        await release.wait()
        return "ok"

    first = asyncio.create_task(breaker.attempt_async(_probe))
    second = asyncio.create_task(breaker.attempt_async(_probe))
    await asyncio.wait_for(both_started.wait(), timeout=1.0)
    assert breaker.is_half_open()

    release.set()
    results = await asyncio.gather(first, second)

    assert [result.get() for result in results] == ["ok", "ok"]
    assert breaker.is_closed()


async def test_cancelled_operation_records_nothing(fake_clock: FakeClock) -> None:
    breaker = _breaker()
    entered = asyncio.Event()

    async def _hang() -> None:
        entered.set()
        await asyncio.Event().wait()

    task = asyncio.create_task(breaker.attempt_async(_hang))
    await entered.wait()
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task

    assert breaker.is_closed()
    assert breaker.failure_count == 0
