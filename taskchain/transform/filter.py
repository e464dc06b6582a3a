"""Filter combinators

Turn a fulfilment into a fault when the value is not acceptable."""

from __future__ import annotations

from collections.abc import Awaitable, Callable

from kungfu import Error, Ok

from .._helpers import discard, resolve
from .._types import MaybeAwaitable
from ..lift.down import settle


def _rejection[T](
    *,
    error: BaseException | None,
    supplier: Callable[[], MaybeAwaitable[BaseException]] | None,
    morphism: Callable[[T], MaybeAwaitable[BaseException]] | None,
) -> Callable[[T], MaybeAwaitable[BaseException]]:
    given = [source for source in (error, supplier, morphism) if source is not None]
    if len(given) != 1:
        raise ValueError("filter_or(): provide exactly one of 'error', 'supplier' or 'morphism'")

    if error is not None:
        exc = error
        return lambda _: exc
    if supplier is not None:
        make = supplier
        return lambda _: make()
    assert morphism is not None
    return morphism


def filter_or[T](
    aw: Awaitable[T],
    predicate: Callable[[T], MaybeAwaitable[bool]],
    *,
    error: BaseException | None = None,
    supplier: Callable[[], MaybeAwaitable[BaseException]] | None = None,
    morphism: Callable[[T], MaybeAwaitable[BaseException]] | None = None,
) -> Awaitable[T]:
    """
    Keep the value if predicate holds, fault otherwise.

    The fault comes from exactly one source:
        error=exc              raise this exception
        supplier=lambda: exc   build it lazily
        morphism=lambda v: exc build it from the rejected value

    predicate, supplier and morphism may all return awaitables.
    Faults and cancellations pass through; predicate is not called.

    Example:
        await filter_or(fetch_user(42), lambda u: u.is_active,
                        morphism=lambda u: InactiveUser(u.id))
    """
    try:
        reject = _rejection(error=error, supplier=supplier, morphism=morphism)
    except ValueError:
        discard(aw)
        raise

    async def run() -> T:
        match await settle(aw):
            case Ok(value):
                if await resolve(predicate(value)):
                    return value
                raise await resolve(reject(value))
            case Error(exc):
                raise exc

    return run()


async def fault[T](
    aw: Awaitable[T],
    error: BaseException | Callable[[T], MaybeAwaitable[BaseException]],
) -> T:
    """
    Force a fulfilled awaitable to fault, discarding its value.

    error is the exception to raise, or a function building it from the value.
    An awaitable that already faulted keeps its own error.
    """
    match await settle(aw):
        case Ok(value):
            if isinstance(error, BaseException):
                raise error
            raise await resolve(error(value))
        case Error(exc):
            raise exc


__all__ = ("fault", "filter_or")
