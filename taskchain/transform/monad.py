"""
Monadic combinators
===================

Transform a single awaitable without branching on its outcome by hand.

Every function observes its input through settle(), so a cancelled input
takes the same route as a faulted one: handlers on the error side receive
the asyncio.CancelledError, and unhandled it is raised again.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from .._helpers import discard, resolve
from .._types import MaybeAwaitable, Morphism
from ..lift.down import settle


# ============================================================================
# Functor / monad
# ============================================================================


async def fmap[T, R](aw: Awaitable[T], f: Morphism[T, R]) -> R:
    """
    Apply f to the fulfilled value.

    Faults and cancellations pass through and f is not called.
    Whatever f raises becomes the fault of the result.

    NOTE: f's return value is never awaited. Use bind() for that.
    """
    match await settle(aw):
        case Ok(value):
            return f(value)
        case Error(exc):
            raise exc


async def bind[T, R](aw: Awaitable[T], f: Callable[[T], Awaitable[R]]) -> R:
    """
    Chain an async step: f(value) is awaited and its outcome is the result.

    Faults and cancellations pass through and f is not called.
    """
    match await settle(aw):
        case Ok(value):
            return await f(value)
        case Error(exc):
            raise exc


async def bibind[T, R](
    aw: Awaitable[T],
    on_error: Callable[[BaseException], Awaitable[R]],
    on_value: Callable[[T], Awaitable[R]],
) -> R:
    """
    Chain an async step on both branches.

    on_error may recover: if the awaitable it returns fulfils,
    so does the result.
    """
    match await settle(aw):
        case Ok(value):
            return await on_value(value)
        case Error(exc):
            return await on_error(exc)


async def bimap[T, R](
    aw: Awaitable[T],
    on_error: Morphism[BaseException, BaseException],
    on_value: Morphism[T, R],
) -> R:
    """
    Transform both branches without crossing between them.

    on_error returns the replacement exception, which is raised:
    a fault stays a fault.
    """
    match await settle(aw):
        case Ok(value):
            return on_value(value)
        case Error(exc):
            raise on_error(exc)


async def map_error[T](
    aw: Awaitable[T],
    f: Morphism[BaseException, BaseException],
) -> T:
    """Replace the error of a faulted awaitable. Fulfilment passes through."""
    match await settle(aw):
        case Ok(value):
            return value
        case Error(exc):
            raise f(exc)


# ============================================================================
# Applicative
# ============================================================================


async def ap[T, R](aw: Awaitable[T], aw_fn: Awaitable[Callable[[T], R]]) -> R:
    """
    Apply a function that arrives asynchronously.

    aw_fn is settled first: if it faults, aw is never awaited and
    the result faults with aw_fn's error.
    """
    match await settle(aw_fn):
        case Ok(fn):
            return await fmap(aw, fn)
        case Error(exc):
            discard(aw)
            raise exc


# ============================================================================
# Two-branch continuation
# ============================================================================


async def then[T, R](
    aw: Awaitable[T],
    on_fulfilled: Callable[[T], MaybeAwaitable[R]],
    on_faulted: Callable[[BaseException], MaybeAwaitable[R]] | None = None,
) -> R:
    """
    Continue with on_fulfilled, or recover with on_faulted.

    Either handler may be sync or async. Without on_faulted the error
    passes through.

    Example:
        await then(fetch(url), parse, lambda exc: DEFAULT)
    """
    match await settle(aw):
        case Ok(value):
            return await resolve(on_fulfilled(value))
        case Error(exc):
            if on_faulted is None:
                raise exc
            return await resolve(on_faulted(exc))


__all__ = (
    "ap",
    "bibind",
    "bimap",
    "bind",
    "fmap",
    "map_error",
    "then",
)
