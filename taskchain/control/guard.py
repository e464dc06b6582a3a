"""Guard combinators

Predicate-gated handlers to plug into bind(), recover_with() and
if_fulfilled(). Each builder returns an async function, so the result is
always awaitable whatever branch is taken."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from .._helpers import resolve
from .._types import Effect, MaybeAwaitable, Predicate


def reject_if[T](
    predicate: Predicate[T],
    error: Callable[[T], MaybeAwaitable[BaseException]],
) -> Callable[[T], Awaitable[T]]:
    """
    Fault when predicate holds, pass the value through otherwise.

    Example (validation):
        await bind(fulfilled(name), reject_if(str.isspace, lambda s: ValueError("blank")))
    """

    async def guard(value: T) -> T:
        if predicate(value):
            raise await resolve(error(value))
        return value

    return guard


def resolve_if[T](
    predicate: Predicate[BaseException],
    value: Callable[[BaseException], MaybeAwaitable[T]],
) -> Callable[[BaseException], Awaitable[T]]:
    """Recover when predicate holds for the error, raise it again otherwise."""

    async def guard(exc: BaseException) -> T:
        if predicate(exc):
            return await resolve(value(exc))
        raise exc

    return guard


def re_reject_if[T](
    predicate: Predicate[BaseException],
    error: Callable[[BaseException], BaseException],
) -> Callable[[BaseException], Awaitable[T]]:
    """
    Swap the error for error(exc) when predicate holds.

    Useful to add context to low-level failures:
        await recover_with(aw, re_reject_if(is_http_error, lambda e: ServiceUnavailable(str(e))))
    """

    async def guard(exc: BaseException) -> T:
        if predicate(exc):
            raise error(exc)
        raise exc

    return guard


def invoke_if[T](
    predicate: Predicate[T],
    action: Effect[T],
) -> Callable[[T], Awaitable[T]]:
    """
    Run action when predicate holds; the original value always passes through.

    action may be sync or async, and whatever it returns is dropped.
    """

    async def guard(value: T) -> T:
        if predicate(value):
            await resolve(action(value))
        return value

    return guard


__all__ = (
    "invoke_if",
    "re_reject_if",
    "reject_if",
    "resolve_if",
)
