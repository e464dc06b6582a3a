"""
Lift helpers with semantic namespaces.

    from taskchain import lift as L

    L.up.fulfilled(42)        # value -> awaitable
    L.up.faulted(exc)         # error -> awaitable
    await L.down.settle(aw)   # awaitable -> Ok/Error
    await L.attempt(fn)       # supplier -> LazyCoroResult
"""

from __future__ import annotations

from . import down, up
from .down import attempt, settle
from .up import cancelled, faulted, from_result, fulfilled

__all__ = (
    # Namespaces
    "down",
    "up",
    # Up
    "cancelled",
    "faulted",
    "from_result",
    "fulfilled",
    # Down
    "attempt",
    "settle",
)
