"""
Core type definitions for taskchain.

Aliases shared by the combinator modules.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Supplier = zero-arg factory, called lazily
type Supplier[T] = Callable[[], T]

# Morphism = plain value transformation
type Morphism[T, R] = Callable[[T], R]

# Effect = side effect, sync or async; the return value is ignored
type Effect[T] = Callable[[T], object]

# MaybeAwaitable = plain value or something that produces it later
type MaybeAwaitable[T] = T | Awaitable[T]

# Outcome = settled future observed as a Result.
# NOTE: cancellation is Error(asyncio.CancelledError), never its own branch.
type Outcome[T] = Result[T, BaseException]

__all__ = (
    "Effect",
    "MaybeAwaitable",
    "Morphism",
    "Outcome",
    "Predicate",
    "Supplier",
)
