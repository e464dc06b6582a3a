"""
Fluent chaining over a single awaitable.

    result = await (
        flow(fetch_user(42))
        .filter_or(lambda u: u.is_active, morphism=lambda u: Inactive(u.id))
        .fmap(lambda u: u.name)
        .if_fulfilled(audit)
    )

Direct value-based implementation (no AST): each method calls the
matching combinator and wraps the new awaitable. Nothing runs until the
Flow is awaited, and like any coroutine it can be awaited once.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Generator
from dataclasses import dataclass, replace

from ._helpers import discard
from ._types import Effect, MaybeAwaitable, Morphism, Predicate, Supplier
from .control.recover import alt, alt_with, recover, recover_with
from .control.retry import DEFAULT_RETRY_POLICY, RetryPolicy, then_retry
from .time.delay import delay
from .transform.effects import if_faulted, if_fulfilled, tap
from .transform.filter import fault, filter_or
from .transform.monad import ap, bibind, bimap, bind, fmap, map_error, then


@dataclass(frozen=True, slots=True)
class Flow[T]:
    """Fluent builder for chaining combinators."""

    value: Awaitable[T]

    def __await__(self) -> Generator[typing.Any, None, T]:
        return self.value.__await__()

    # Algebra

    def fmap[R](self, f: Morphism[T, R]) -> Flow[R]:
        return Flow(fmap(self.value, f))

    def bind[R](self, f: Callable[[T], Awaitable[R]]) -> Flow[R]:
        return Flow(bind(self.value, f))

    def bimap[R](
        self,
        on_error: Morphism[BaseException, BaseException],
        on_value: Morphism[T, R],
    ) -> Flow[R]:
        return Flow(bimap(self.value, on_error, on_value))

    def bibind[R](
        self,
        on_error: Callable[[BaseException], Awaitable[R]],
        on_value: Callable[[T], Awaitable[R]],
    ) -> Flow[R]:
        return Flow(bibind(self.value, on_error, on_value))

    def ap[R](self, aw_fn: Awaitable[Callable[[T], R]]) -> Flow[R]:
        return Flow(ap(self.value, aw_fn))

    def map_error(self, f: Morphism[BaseException, BaseException]) -> Flow[T]:
        return Flow(map_error(self.value, f))

    def then[R](
        self,
        on_fulfilled: Callable[[T], MaybeAwaitable[R]],
        on_faulted: Callable[[BaseException], MaybeAwaitable[R]] | None = None,
    ) -> Flow[R]:
        return Flow(then(self.value, on_fulfilled, on_faulted))

    def filter_or(
        self,
        predicate: Callable[[T], MaybeAwaitable[bool]],
        *,
        error: BaseException | None = None,
        supplier: Callable[[], MaybeAwaitable[BaseException]] | None = None,
        morphism: Callable[[T], MaybeAwaitable[BaseException]] | None = None,
    ) -> Flow[T]:
        return Flow(
            filter_or(self.value, predicate, error=error, supplier=supplier, morphism=morphism)
        )

    def fault(self, error: BaseException | Callable[[T], MaybeAwaitable[BaseException]]) -> Flow[T]:
        return Flow(fault(self.value, error))

    # Recovery

    def alt(self, other: Awaitable[T]) -> Flow[T]:
        return Flow(alt(self.value, other))

    def alt_with(self, supplier: Supplier[Awaitable[T]]) -> Flow[T]:
        return Flow(alt_with(self.value, supplier))

    def recover(self, handler: Callable[[BaseException], T]) -> Flow[T]:
        return Flow(recover(self.value, handler))

    def recover_with(self, handler: Callable[[BaseException], Awaitable[T]]) -> Flow[T]:
        return Flow(recover_with(self.value, handler))

    # Effects

    def if_fulfilled(self, effect: Effect[T]) -> Flow[T]:
        return Flow(if_fulfilled(self.value, effect))

    def if_faulted(self, effect: Effect[BaseException]) -> Flow[T]:
        return Flow(if_faulted(self.value, effect))

    def tap(self, on_fulfilled: Effect[T], on_faulted: Effect[BaseException]) -> Flow[T]:
        return Flow(tap(self.value, on_fulfilled, on_faulted))

    # Control / time

    def retry[R](
        self,
        fn: Callable[[T], MaybeAwaitable[R]],
        *,
        policy: RetryPolicy | None = None,
        max_retries: int | None = None,
        initial_interval: float | None = None,
        backoff_rate: float | None = None,
        should_retry: Predicate[BaseException] | None = None,
    ) -> Flow[R]:
        """
        Retry fn(value) once the current value is available.

        Pass a whole policy, or inline settings that override
        DEFAULT_RETRY_POLICY field by field. Mixing both is a ValueError.
        """
        inline = {
            name: setting
            for name, setting in (
                ("max_retries", max_retries),
                ("initial_interval", initial_interval),
                ("backoff_rate", backoff_rate),
                ("should_retry", should_retry),
            )
            if setting is not None
        }
        if inline:
            if policy is not None:
                discard(self.value)
                raise ValueError(
                    f"retry(): pass either 'policy' or inline settings, not both (got {sorted(inline)})"
                )
            try:
                policy = replace(DEFAULT_RETRY_POLICY, **inline)
            except ValueError:
                discard(self.value)
                raise
        return Flow(then_retry(self.value, fn, policy))

    def delay(self, *, seconds: float) -> Flow[T]:
        return Flow(delay(self.value, seconds))


def flow[T](aw: Awaitable[T]) -> Flow[T]:
    """Start a fluent chain from any awaitable."""
    return Flow(aw)


__all__ = ("Flow", "flow")
