from __future__ import annotations

import asyncio

import pytest

from fakes import Boom, Probe, slow, slow_fail
from taskchain import (
    ap,
    bibind,
    bimap,
    bind,
    cancelled,
    faulted,
    fmap,
    fulfilled,
    identity,
    map_error,
    then,
)


# fmap


@pytest.mark.asyncio
async def test_fmap_transforms_value() -> None:
    assert await fmap(fulfilled("12345"), len) == 5


@pytest.mark.asyncio
async def test_fmap_identity_law() -> None:
    assert await fmap(slow(7), identity) == 7

    error = Boom("left alone")
    with pytest.raises(Boom) as info:
        await fmap(faulted(error), identity)
    assert info.value is error


@pytest.mark.asyncio
async def test_fmap_composition_law() -> None:
    def f(x: int) -> int:
        return x + 1

    def g(x: int) -> str:
        return str(x * 2)

    chained = await fmap(fmap(fulfilled(3), f), g)
    composed = await fmap(fulfilled(3), lambda x: g(f(x)))
    assert chained == composed == "8"


@pytest.mark.asyncio
async def test_fmap_does_not_invoke_function_on_fault() -> None:
    probe = Probe()
    with pytest.raises(Boom):
        await fmap(slow_fail(Boom()), probe)
    assert not probe.called


@pytest.mark.asyncio
async def test_fmap_turns_raise_into_fault() -> None:
    error = ValueError("bad")

    def explode(_: str) -> int:
        raise error

    with pytest.raises(ValueError) as info:
        await fmap(fulfilled("x"), explode)
    assert info.value is error


@pytest.mark.asyncio
async def test_fmap_does_not_await_returned_awaitable() -> None:
    result = await fmap(fulfilled(1), lambda v: slow(v + 1))
    assert asyncio.iscoroutine(result)
    assert await result == 2


@pytest.mark.asyncio
async def test_fmap_on_cancelled_future_raises_cancelled_error() -> None:
    probe = Probe()
    with pytest.raises(asyncio.CancelledError):
        await fmap(cancelled(), probe)
    assert not probe.called


# bind


@pytest.mark.asyncio
async def test_bind_flattens() -> None:
    assert await bind(fulfilled("abc"), lambda s: slow(s.upper())) == "ABC"


@pytest.mark.asyncio
async def test_bind_takes_outcome_of_returned_future() -> None:
    error = Boom("inner")
    with pytest.raises(Boom) as info:
        await bind(fulfilled(1), lambda _: slow_fail(error))
    assert info.value is error


@pytest.mark.asyncio
async def test_bind_does_not_invoke_function_on_fault() -> None:
    probe = Probe()

    async def step(value: int) -> int:
        probe(value)
        return value

    with pytest.raises(Boom):
        await bind(faulted(Boom()), step)
    assert not probe.called


# bimap / bibind


@pytest.mark.asyncio
async def test_bimap_maps_value_branch() -> None:
    assert await bimap(fulfilled(2), lambda e: RuntimeError(str(e)), lambda v: v * 10) == 20


@pytest.mark.asyncio
async def test_bimap_keeps_fault_a_fault() -> None:
    original = Boom("low level")
    with pytest.raises(RuntimeError) as info:
        await bimap(faulted(original), lambda e: RuntimeError(f"wrapped: {e}"), identity)
    assert str(info.value) == "wrapped: low level"


@pytest.mark.asyncio
async def test_bibind_recovers_from_fault() -> None:
    result = await bibind(
        faulted(Boom("nope")),
        lambda e: fulfilled(len(str(e))),
        lambda v: fulfilled(v),
    )
    assert result == 4


@pytest.mark.asyncio
async def test_bibind_routes_cancellation_to_error_branch() -> None:
    seen: list[BaseException] = []

    async def on_error(exc: BaseException) -> str:
        seen.append(exc)
        return "recovered"

    result = await bibind(cancelled(), on_error, lambda v: fulfilled(v))
    assert result == "recovered"
    assert isinstance(seen[0], asyncio.CancelledError)


# ap


@pytest.mark.asyncio
async def test_ap_applies_async_function() -> None:
    assert await ap(fulfilled("12345"), fulfilled(len)) == 5


@pytest.mark.asyncio
async def test_ap_faults_for_faulted_value() -> None:
    with pytest.raises(Boom):
        await ap(faulted(Boom()), fulfilled(len))


@pytest.mark.asyncio
async def test_ap_checks_function_future_first() -> None:
    error = Boom("no function")
    value = slow("never awaited")
    with pytest.raises(Boom) as info:
        await ap(value, faulted(error))
    assert info.value is error
    # the untouched coroutine was closed, awaiting it now is an error
    with pytest.raises(RuntimeError):
        await value


# map_error / then


@pytest.mark.asyncio
async def test_map_error_leaves_value_alone() -> None:
    probe = Probe()
    assert await map_error(fulfilled(1), probe) == 1
    assert not probe.called


@pytest.mark.asyncio
async def test_map_error_replaces_error() -> None:
    with pytest.raises(KeyError):
        await map_error(faulted(Boom()), lambda _: KeyError("k"))


@pytest.mark.asyncio
async def test_then_with_sync_and_async_handlers() -> None:
    assert await then(fulfilled("abc"), len) == 3
    assert await then(fulfilled("abc"), lambda s: slow(s * 2)) == "abcabc"


@pytest.mark.asyncio
async def test_then_recovers_with_on_faulted() -> None:
    assert await then(faulted(Boom("xy")), len, lambda e: str(e)) == "xy"
    assert await then(faulted(Boom()), len, lambda _: slow(-1)) == -1


@pytest.mark.asyncio
async def test_then_without_on_faulted_propagates() -> None:
    with pytest.raises(Boom):
        await then(faulted(Boom()), len)


@pytest.mark.asyncio
async def test_error_envelope_is_unwrapped_once() -> None:
    inner = Boom("root cause")
    seen: list[BaseException] = []

    async def on_error(exc: BaseException) -> int:
        seen.append(exc)
        return 0

    await bibind(faulted(ExceptionGroup("envelope", [inner])), on_error, fulfilled)
    assert seen == [inner]


@pytest.mark.asyncio
async def test_envelope_with_several_errors_is_passed_through() -> None:
    group = ExceptionGroup("many", [Boom("a"), Boom("b")])
    with pytest.raises(ExceptionGroup) as info:
        await fmap(faulted(group), identity)
    assert info.value is group


@pytest.mark.asyncio
async def test_own_cancellation_is_not_swallowed() -> None:
    probe = Probe()
    task = asyncio.create_task(fmap(asyncio.sleep(10), probe))
    await asyncio.sleep(0)
    task.cancel()
    with pytest.raises(asyncio.CancelledError):
        await task
    assert task.cancelled()
    assert not probe.called
