"""Plain function helpers: identity, composition and currying."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

A = TypeVar("A")
B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")


def identity(a: A) -> A:
    return a


def compose(g: Callable[[B], C], f: Callable[[A], B]) -> Callable[[A], C]:
    """Return g after f.

    compose is associative and identity is neutral on both sides.
    """

    def composed(a: A) -> C:
        return g(f(a))

    return composed


def curry2(g: Callable[[B, C], D]) -> Callable[[B], Callable[[C], D]]:
    """Turn a two-argument function into a chain of unary ones."""

    def outer(b: B) -> Callable[[C], D]:
        def inner(c: C) -> D:
            return g(b, c)

        return inner

    return outer


def curry3(g: Callable[[A, B, C], D]) -> Callable[[A], Callable[[B], Callable[[C], D]]]:
    def outer(a: A) -> Callable[[B], Callable[[C], D]]:
        return curry2(lambda b, c: g(a, b, c))

    return outer
