from __future__ import annotations

import asyncio

import pytest
from kungfu import Error, Ok

from fakes import Boom, slow
from taskchain import attempt, cancelled, faulted, from_result, fulfilled, lift, settle


@pytest.mark.asyncio
async def test_settle_fulfilled() -> None:
    match await settle(slow(1)):
        case Ok(value):
            assert value == 1
        case Error(exc):
            pytest.fail(f"unexpected error {exc!r}")


@pytest.mark.asyncio
async def test_settle_faulted_keeps_identity() -> None:
    error = Boom()
    match await settle(faulted(error)):
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(exc):
            assert exc is error


@pytest.mark.asyncio
async def test_settle_cancelled() -> None:
    match await settle(cancelled()):
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(exc):
            assert isinstance(exc, asyncio.CancelledError)


@pytest.mark.asyncio
async def test_settle_does_not_catch_base_exceptions() -> None:
    async def interrupted() -> None:
        raise KeyboardInterrupt

    with pytest.raises(KeyboardInterrupt):
        await settle(interrupted())


@pytest.mark.asyncio
async def test_cancelled_future_is_cancelled() -> None:
    assert cancelled().cancelled()


@pytest.mark.asyncio
async def test_from_result() -> None:
    assert await from_result(Ok(3)) == 3
    with pytest.raises(Boom):
        await from_result(Error(Boom()))


@pytest.mark.asyncio
async def test_attempt_is_lazy_and_rerunnable() -> None:
    calls: list[int] = []

    async def supplier() -> int:
        calls.append(1)
        return len(calls)

    lazy = attempt(supplier)
    assert calls == []
    match await lazy:
        case Ok(value):
            assert value == 1
        case Error(exc):
            pytest.fail(f"unexpected error {exc!r}")
    match await lazy:
        case Ok(value):
            assert value == 2
        case Error(exc):
            pytest.fail(f"unexpected error {exc!r}")


@pytest.mark.asyncio
async def test_attempt_captures_sync_raise() -> None:
    def supplier() -> int:
        raise Boom("sync")

    match await attempt(supplier):
        case Ok(value):
            pytest.fail(f"unexpected value {value!r}")
        case Error(exc):
            assert isinstance(exc, Boom)


def test_namespaces() -> None:
    assert lift.up.fulfilled is fulfilled
    assert lift.down.settle is settle
