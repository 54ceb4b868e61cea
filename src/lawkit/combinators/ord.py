"""Ord combinators and stock instances."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawkit.kernel.instances import Ord, Ordering, from_compare, sign

A = TypeVar("A")
B = TypeVar("B")


def _compare_natural(x: Any, y: Any) -> int:
    if x < y:
        return -1
    if x > y:
        return 1
    return 0


ord_number: Ord[int | float] = from_compare(_compare_natural)
ord_string: Ord[str] = from_compare(_compare_natural)
ord_bool: Ord[bool] = from_compare(_compare_natural)


def contramap_ord(f: Callable[[B], A], ord: Ord[A]) -> Ord[B]:
    """Order B values by their projection into A."""

    def equals(x: B, y: B) -> bool:
        return ord.equals(f(x), f(y))

    def compare(x: B, y: B) -> Ordering:
        return ord.compare(f(x), f(y))

    return Ord(equals=equals, compare=compare)


def dual_ord(ord: Ord[A]) -> Ord[A]:
    """Reverse an ordering. Equality is unchanged."""

    def compare(x: A, y: A) -> Ordering:
        return sign(-ord.compare(x, y))

    return Ord(equals=ord.equals, compare=compare)


def min_(ord: Ord[A]) -> Callable[[A, A], A]:
    """Lesser of two values; the left one on ties."""

    def minimum(x: A, y: A) -> A:
        return y if ord.compare(x, y) > 0 else x

    return minimum


def max_(ord: Ord[A]) -> Callable[[A, A], A]:
    """Greater of two values, defined as min under the dual order."""
    return min_(dual_ord(ord))


def clamp(ord: Ord[A]) -> Callable[[A, A, A], A]:
    """Clamp a value between low and high (inclusive)."""
    lesser = min_(ord)
    greater = max_(ord)

    def clamped(low: A, high: A, a: A) -> A:
        return lesser(greater(a, low), high)

    return clamped


def between(ord: Ord[A]) -> Callable[[A, A, A], bool]:
    """Test whether low <= a <= high."""

    def inside(low: A, high: A, a: A) -> bool:
        return ord.compare(a, low) >= 0 and ord.compare(a, high) <= 0

    return inside
