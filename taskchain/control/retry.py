"""
Retry combinators
=================

Re-invoke a supplier until it fulfils, the policy refuses to retry the
error, or the attempt budget is spent. Delays grow exponentially:

    delay(attempts) = initial_interval * backoff_rate ** attempts (+ jitter)

where attempts counts the failures so far, so the first retry waits
exactly initial_interval.
"""

from __future__ import annotations

import asyncio
import random
from collections.abc import Awaitable, Callable
from dataclasses import dataclass

import structlog
from kungfu import Error, Ok

from .._errors import RetryExhaustedError
from .._helpers import resolve, unwrap_error
from .._types import MaybeAwaitable, Predicate
from ..lift.down import settle

logger = structlog.get_logger(__name__)


# OnRetry = (attempts_so_far, delay_seconds, error) -> None
type OnRetry = Callable[[int, float, BaseException], None]

# Jitter = (attempts_so_far, delay_seconds) -> extra_seconds
type Jitter = Callable[[int, float], float]


def _no_op(attempt: int, delay: float, error: BaseException) -> None:
    _ = (attempt, delay, error)


def _always(error: BaseException) -> bool:
    _ = error
    return True


def uniform_jitter(max_seconds: float) -> Jitter:
    """Add between 0 and max_seconds to every delay."""
    if max_seconds < 0.0:
        raise ValueError("max_seconds must be >= 0")

    def jitter(attempt: int, delay: float) -> float:
        _ = (attempt, delay)
        return random.uniform(0.0, max_seconds)

    return jitter


def proportional_jitter(factor: float = 0.3) -> Jitter:
    """Delay ± factor * delay. Spreads out clients that failed together."""
    if factor < 0.0 or factor > 1.0:
        raise ValueError("factor must be in [0, 1]")

    def jitter(attempt: int, delay: float) -> float:
        _ = attempt
        return delay * random.uniform(-factor, factor)

    return jitter


@dataclass(frozen=True, slots=True)
class RetryPolicy:
    """
    Retry configuration. Immutable; one instance can serve any number of calls.

    max_retries is the total number of supplier invocations.
    initial_interval is in seconds.
    """

    max_retries: int = 3
    initial_interval: float = 1.0
    backoff_rate: float = 2.0
    on_retry: OnRetry = _no_op
    should_retry: Predicate[BaseException] = _always
    jitter: Jitter | None = None

    def __post_init__(self) -> None:
        if self.max_retries < 0:
            raise ValueError("RetryPolicy.max_retries must be >= 0")
        if self.initial_interval < 0.0:
            raise ValueError("RetryPolicy.initial_interval must be >= 0")
        if self.backoff_rate < 1.0:
            raise ValueError("RetryPolicy.backoff_rate must be >= 1.0")


DEFAULT_RETRY_POLICY = RetryPolicy()


def backoff_delay(policy: RetryPolicy, attempts: int) -> float:
    """Seconds to wait after the failure number attempts (zero-based)."""
    delay = policy.initial_interval * (policy.backoff_rate ** attempts)
    if policy.jitter is not None:
        delay += policy.jitter(attempts, delay)
    return max(0.0, delay)


async def retry[T](
    supplier: Callable[[], MaybeAwaitable[T]],
    policy: RetryPolicy | None = None,
) -> T:
    """
    Call supplier until it fulfils.

    supplier may return a value or an awaitable; raising synchronously
    counts as a failed attempt too.

    Outcomes:
        - fulfilment: returned at once
        - should_retry(error) is False: error raised as is, no wrapping
        - max_retries attempts failed: RetryExhaustedError(max_retries, last error)

    Errors raised by should_retry, on_retry or jitter abort the loop.

    NOTE: The wait between attempts is asyncio.sleep(), so cancelling the
          task awaiting retry() stops it. The policy has no cancellation
          hook of its own.

    Example:
        await retry(lambda: client.get(url), RetryPolicy(max_retries=5, initial_interval=0.2))
    """
    policy = DEFAULT_RETRY_POLICY if policy is None else policy
    attempts = 0
    last: BaseException | None = None

    while True:
        if attempts >= policy.max_retries:
            logger.info("Retries exhausted", attempts=attempts, error=repr(last))
            exhausted = RetryExhaustedError(attempts, last)
            raise exhausted from exhausted.cause

        try:
            produced = supplier()
        except Exception as exc:
            outcome = Error(unwrap_error(exc))
        else:
            outcome = await settle(resolve(produced))

        match outcome:
            case Ok(value):
                return value
            case Error(error):
                last = error

        if not policy.should_retry(last):
            logger.debug("Retry refused by policy", attempt=attempts, error=repr(last))
            raise last

        delay = backoff_delay(policy, attempts)
        policy.on_retry(attempts, delay, last)
        logger.debug("Retry scheduled", attempt=attempts, delay=delay, error=repr(last))
        await asyncio.sleep(delay)
        attempts += 1


async def then_retry[T, R](
    aw: Awaitable[T],
    fn: Callable[[T], MaybeAwaitable[R]],
    policy: RetryPolicy | None = None,
) -> R:
    """
    Once aw fulfils with value, retry fn(value) under policy.

    A fault of aw itself is not retried; it passes through.
    """
    match await settle(aw):
        case Ok(value):
            return await retry(lambda: fn(value), policy)
        case Error(exc):
            raise exc


__all__ = (
    "DEFAULT_RETRY_POLICY",
    "Jitter",
    "OnRetry",
    "RetryPolicy",
    "backoff_delay",
    "proportional_jitter",
    "retry",
    "then_retry",
    "uniform_jitter",
)
