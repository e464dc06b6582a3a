"""Partition combinators

Settle many awaitables and split them by outcome."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Iterable
from typing import NamedTuple

from kungfu import Error, Ok

from ..lift.down import settle


class Partitioned[T](NamedTuple):
    """Errors and values, each in input order."""

    faulted: list[BaseException]
    fulfilled: list[T]


async def partition[T](aws: Iterable[Awaitable[T]]) -> Partitioned[T]:
    """
    Run all, separate into (faulted, fulfilled). Never fails.

    Every awaitable is settled: one failure doesn't stop the others.
    Cancelled inputs land in faulted as their CancelledError.

    Example:
        errors, users = await partition(fetch_user(i) for i in ids)
    """
    outcomes = await asyncio.gather(*(settle(aw) for aw in aws))

    faulted: list[BaseException] = []
    fulfilled: list[T] = []

    for outcome in outcomes:
        match outcome:
            case Ok(value):
                fulfilled.append(value)
            case Error(exc):
                faulted.append(exc)

    return Partitioned(faulted, fulfilled)


__all__ = ("Partitioned", "partition")
