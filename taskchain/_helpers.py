"""Internal helpers for combinators.

Common functions used across multiple combinator modules.
Not part of the public API."""

from __future__ import annotations

import asyncio
import inspect
import typing
from collections.abc import Awaitable

from ._types import MaybeAwaitable


def unwrap_error(exc: BaseException) -> BaseException:
    """
    Strip one level of envelope from an error.

    A group holding exactly one exception is replaced by that exception.
    Anything else, including groups with several members, passes through.
    """
    if isinstance(exc, BaseExceptionGroup) and len(exc.exceptions) == 1:
        return exc.exceptions[0]
    return exc


def is_cancelling() -> bool:
    """True when the task running this code has been asked to cancel."""
    task = asyncio.current_task()
    return task is not None and task.cancelling() > 0


async def resolve[T](value: MaybeAwaitable[T]) -> T:
    """Await value if it is awaitable, return it as is otherwise."""
    if inspect.isawaitable(value):
        return await typing.cast(Awaitable[T], value)
    return typing.cast(T, value)


def discard(aw: Awaitable[typing.Any]) -> None:
    """
    Drop an awaitable that will never be awaited.

    Coroutines are closed so they don't warn about never being awaited.
    Futures and tasks are left alone: they belong to whoever scheduled them.
    """
    if inspect.iscoroutine(aw):
        aw.close()


__all__ = (
    "discard",
    "is_cancelling",
    "resolve",
    "unwrap_error",
)
