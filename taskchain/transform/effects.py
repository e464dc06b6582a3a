"""Side effects combinators

Effects run for observation only (logging, metrics, auditing) and don't
change the outcome, unless the effect itself raises: then its error
replaces the outcome.

Effects may be sync or async. An awaitable returned by an effect is
awaited before the combinator settles, so the next stage never sees the
value while the effect is still running."""

from __future__ import annotations

from collections.abc import Awaitable

from kungfu import Error, Ok

from .._helpers import resolve
from .._types import Effect
from ..lift.down import settle


async def if_fulfilled[T](aw: Awaitable[T], effect: Effect[T]) -> T:
    """Run effect on the fulfilled value, pass the value through."""
    match await settle(aw):
        case Ok(value):
            await resolve(effect(value))
            return value
        case Error(exc):
            raise exc


async def if_faulted[T](aw: Awaitable[T], effect: Effect[BaseException]) -> T:
    """
    Run effect on the error (cancellation included), then raise the error again.
    """
    match await settle(aw):
        case Ok(value):
            return value
        case Error(exc):
            await resolve(effect(exc))
            raise exc


async def tap[T](
    aw: Awaitable[T],
    on_fulfilled: Effect[T],
    on_faulted: Effect[BaseException],
) -> T:
    """
    Observe both branches, pass the outcome through.

    NOTE: If on_fulfilled raises, on_faulted is NOT called for that error:
          the failure was born on the success path and is reported once.
    """
    match await settle(aw):
        case Ok(value):
            await resolve(on_fulfilled(value))
            return value
        case Error(exc):
            await resolve(on_faulted(exc))
            raise exc


__all__ = ("if_faulted", "if_fulfilled", "tap")
