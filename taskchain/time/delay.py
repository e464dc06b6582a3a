"""Delay combinators

Non-blocking waits around a computation."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from .._helpers import resolve
from .._types import MaybeAwaitable
from ..lift.down import settle


async def delay[T](aw: Awaitable[T], seconds: float) -> T:
    """
    Hold a fulfilled value back for seconds before passing it on.

    Faults pass through immediately and unchanged (a RetryExhaustedError
    keeps its original cause).
    """
    match await settle(aw):
        case Ok(value):
            if seconds > 0.0:
                await asyncio.sleep(seconds)
            return value
        case Error(exc):
            raise exc


async def defer[T](supplier: Callable[[], MaybeAwaitable[T]], seconds: float) -> T:
    """Sleep, then run supplier. supplier may be sync or async."""
    if seconds > 0.0:
        await asyncio.sleep(seconds)
    return await resolve(supplier())


__all__ = ("defer", "delay")
