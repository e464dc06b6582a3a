"""
Lift plain values into awaitables.

Counterparts of Task.FromResult / Task.FromException: already-decided
futures used to start a chain or to answer from inside bind/bibind.
"""

from __future__ import annotations

import asyncio
from typing import Never

from kungfu import Error, Ok, Result


async def fulfilled[T](value: T) -> T:
    """
    Awaitable that fulfils with value.

    Example:
        await fmap(fulfilled("abc"), len)  # 3
    """
    return value


async def faulted(error: BaseException) -> Never:
    """Awaitable that faults with error. Dual of fulfilled()."""
    raise error


def cancelled[T]() -> asyncio.Future[T]:
    """
    Future that is already cancelled.

    NOTE: Needs a running event loop (call it from async code).
    """
    future: asyncio.Future[T] = asyncio.get_running_loop().create_future()
    future.cancel()
    return future


async def from_result[T](result: Result[T, BaseException]) -> T:
    """
    Lift a computed Result back into the exception world.

    Ok(value) fulfils with value, Error(exc) raises exc.
    """
    match result:
        case Ok(value):
            return value
        case Error(exc):
            raise exc


__all__ = ("cancelled", "faulted", "from_result", "fulfilled")
