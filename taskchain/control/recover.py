"""Recover combinators

Leave the faulted branch: substitute another awaitable, or compute a
value from the error. Cancellation counts as a fault here."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from .._helpers import discard
from .._types import Supplier
from ..lift.down import settle


async def alt[T](aw: Awaitable[T], other: Awaitable[T]) -> T:
    """
    Use other if aw faults.

    NOTE: other is awaited only when needed. An unused coroutine is closed.
    """
    match await settle(aw):
        case Ok(value):
            discard(other)
            return value
        case Error(_):
            return await other


async def alt_with[T](aw: Awaitable[T], supplier: Supplier[Awaitable[T]]) -> T:
    """Build the substitute lazily: supplier() runs only if aw faults."""
    match await settle(aw):
        case Ok(value):
            return value
        case Error(_):
            return await supplier()


async def recover[T](aw: Awaitable[T], handler: Callable[[BaseException], T]) -> T:
    """Turn any fault into a fulfilment using handler(error)."""
    match await settle(aw):
        case Ok(value):
            return value
        case Error(exc):
            return handler(exc)


async def recover_with[T](
    aw: Awaitable[T],
    handler: Callable[[BaseException], Awaitable[T]],
) -> T:
    """
    Async recovery: the awaitable returned by handler(error) decides the outcome.

    Pairs with resolve_if() for conditional recovery:
        await recover_with(fetch(url), resolve_if(is_timeout, lambda _: CACHED))
    """
    match await settle(aw):
        case Ok(value):
            return value
        case Error(exc):
            return await handler(exc)


__all__ = (
    "alt",
    "alt_with",
    "recover",
    "recover_with",
)
