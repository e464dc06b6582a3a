"""
Combinators over single-shot awaitables.

Transform, sequence, recover from and retry asynchronous computations
without writing try/except around every await.

Architecture:
- Any Awaitable is a future: asyncio.Future, Task or coroutine
- settle() observes it as Ok(value) / Error(exc); cancellation is an Error
- Every combinator is a coroutine function returning a fresh awaitable
- flow() chains the same combinators fluently
"""

# Core types
from ._types import Effect, MaybeAwaitable, Morphism, Outcome, Predicate, Supplier

# Primitive helpers
from .functions import compose, constant, identity, invoke, passthrough

# Lift helpers
from . import lift
from .lift import attempt, cancelled, faulted, from_result, fulfilled, settle

# Fluent API
from .flow import Flow, flow

# Transform / effects
from .transform import (
    ap,
    bibind,
    bimap,
    bind,
    fault,
    filter_or,
    fmap,
    if_faulted,
    if_fulfilled,
    map_error,
    tap,
    then,
)

# Control flow
from .control import (
    DEFAULT_RETRY_POLICY,
    Jitter,
    OnRetry,
    RetryPolicy,
    alt,
    alt_with,
    backoff_delay,
    invoke_if,
    proportional_jitter,
    re_reject_if,
    recover,
    recover_with,
    reject_if,
    resolve_if,
    retry,
    then_retry,
    uniform_jitter,
)

# Collection operations
from .collection import Partitioned, partition

# Time operations
from .time import defer, delay

# Errors
from ._errors import RetryExhaustedError

__all__ = (
    # Types
    "Effect",
    "MaybeAwaitable",
    "Morphism",
    "Outcome",
    "Predicate",
    "Supplier",
    # Primitive helpers
    "compose",
    "constant",
    "identity",
    "invoke",
    "passthrough",
    # Lift
    "lift",
    "attempt",
    "cancelled",
    "faulted",
    "from_result",
    "fulfilled",
    "settle",
    # Fluent
    "Flow",
    "flow",
    # Transform
    "ap",
    "bibind",
    "bimap",
    "bind",
    "fault",
    "filter_or",
    "fmap",
    "map_error",
    "then",
    # Effects
    "if_faulted",
    "if_fulfilled",
    "tap",
    # Control
    "DEFAULT_RETRY_POLICY",
    "Jitter",
    "OnRetry",
    "RetryPolicy",
    "alt",
    "alt_with",
    "backoff_delay",
    "invoke_if",
    "proportional_jitter",
    "re_reject_if",
    "recover",
    "recover_with",
    "reject_if",
    "resolve_if",
    "retry",
    "then_retry",
    "uniform_jitter",
    # Collection
    "Partitioned",
    "partition",
    # Time
    "defer",
    "delay",
    # Errors
    "RetryExhaustedError",
)
