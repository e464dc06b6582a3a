from __future__ import annotations

import time

import pytest

from fakes import Boom
from taskchain import RetryExhaustedError, defer, delay, faulted, fulfilled


@pytest.mark.asyncio
async def test_delay_waits_the_configured_time() -> None:
    started = time.perf_counter()
    assert await delay(fulfilled(1), 0.015) == 1
    assert time.perf_counter() - started >= 0.014


@pytest.mark.asyncio
async def test_delay_passes_fault_through_immediately() -> None:
    started = time.perf_counter()
    with pytest.raises(Boom):
        await delay(faulted(Boom()), 5.0)
    assert time.perf_counter() - started < 1.0


@pytest.mark.asyncio
async def test_delay_does_not_wrap_retry_exhausted_error() -> None:
    error = RetryExhaustedError(1, TypeError("root"))
    with pytest.raises(RetryExhaustedError) as info:
        await delay(faulted(error), 0)
    assert info.value is error
    assert isinstance(info.value.cause, TypeError)


@pytest.mark.asyncio
async def test_defer_runs_supplier_after_delay() -> None:
    calls: list[float] = []
    started = time.perf_counter()

    def supplier() -> int:
        calls.append(time.perf_counter() - started)
        return 1

    assert await defer(supplier, 0.05) == 1
    assert calls[0] >= 0.045


@pytest.mark.asyncio
async def test_defer_accepts_async_supplier() -> None:
    assert await defer(lambda: fulfilled("async"), 0) == "async"
