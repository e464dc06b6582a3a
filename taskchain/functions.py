"""Primitive functional glue.

Small stateless helpers used to assemble handlers for the combinators."""

from __future__ import annotations

from collections.abc import Callable


def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x


def constant[T](value: T) -> Callable[..., T]:
    """Function that ignores its arguments and always returns value."""

    def const(*_: object, **__: object) -> T:
        return value

    return const


def compose[A, B, C](f: Callable[[A], B], g: Callable[[B], C]) -> Callable[[A], C]:
    """Left-to-right composition: compose(f, g)(x) == g(f(x))."""

    def composed(x: A) -> C:
        return g(f(x))

    return composed


def passthrough[T](consumer: Callable[[T], object]) -> Callable[[T], T]:
    """Turn a consumer into a function that returns its input after calling it."""

    def tapped(value: T) -> T:
        consumer(value)
        return value

    return tapped


def invoke[T](supplier: Callable[[], T]) -> T:
    """Call supplier with no arguments and return its result."""
    return supplier()


__all__ = (
    "compose",
    "constant",
    "identity",
    "invoke",
    "passthrough",
)
