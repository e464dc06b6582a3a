"""
Observe awaitables as values.

Bring a settled future down into a Result so its outcome can be matched:
Ok(value) when fulfilled, Error(exc) when faulted or cancelled.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import is_cancelling, resolve, unwrap_error
from .._types import MaybeAwaitable, Outcome


async def settle[T](aw: Awaitable[T]) -> Outcome[T]:
    """
    Wait for aw and report how it ended.

    Every combinator observes its input through here, so this is the one
    place where the three outcomes collapse into Ok/Error and where the
    error envelope is stripped (exactly once).

    Example:
        match await settle(fetch_user(42)):
            case Ok(user): ...
            case Error(exc): ...  # exc may be asyncio.CancelledError

    NOTE: CancelledError aimed at the *current* task is re-raised, not
          captured. Only the cancellation of aw itself becomes an Error.
    """
    try:
        return Ok(await aw)
    except asyncio.CancelledError as exc:
        if is_cancelling():
            raise
        return Error(unwrap_error(exc))
    except Exception as exc:
        return Error(unwrap_error(exc))


def attempt[T](
    supplier: Callable[[], MaybeAwaitable[T]],
) -> LazyCoroResult[T, BaseException]:
    """
    Wrap a supplier into a LazyCoroResult that never raises.

    **When to use:** handing an exception-based computation to
    Result-based code. The supplier runs anew on every await.

    Example:
        r = await attempt(lambda: client.get_user(42))
        r.unwrap_or(None)
    """

    async def run() -> Result[T, BaseException]:
        try:
            produced = supplier()
        except Exception as exc:
            return Error(unwrap_error(exc))
        return await settle(resolve(produced))

    return LazyCoroResult(run)


__all__ = ("attempt", "settle")
