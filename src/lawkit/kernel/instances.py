"""Type class instance records - pure data, no logic."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, Literal, TypeVar

A = TypeVar("A")

Ordering = Literal[-1, 0, 1]


def sign(n: int | float) -> Ordering:
    """Clamp any number to an Ordering."""
    if n < 0:
        return -1
    if n > 0:
        return 1
    return 0


@dataclass(frozen=True)
class Eq(Generic[A]):
    """
    Equality instance for a type A.

    Laws:
    - reflexivity: equals(x, x)
    - symmetry: equals(x, y) == equals(y, x)
    - transitivity: equals(x, y) and equals(y, z) implies equals(x, z)
    """

    equals: Callable[[A, A], bool]


@dataclass(frozen=True)
class Ord(Eq[A]):
    """
    Total ordering instance for a type A.

    compare(x, y) is -1 when x < y, 0 when x equals y and 1 when x > y.
    It must agree with equals: compare(x, y) == 0 iff equals(x, y).
    """

    compare: Callable[[A, A], Ordering]


@dataclass(frozen=True)
class Semigroup(Generic[A]):
    """Associative binary operation on A."""

    combine: Callable[[A, A], A]


@dataclass(frozen=True)
class Monoid(Semigroup[A]):
    """
    Semigroup with a neutral element.

    combine(x, identity) == x == combine(identity, x) for all x.
    """

    identity: A


def from_compare(compare: Callable[[A, A], int]) -> Ord[A]:
    """Build an Ord from a compare function alone.

    The equality is derived from compare, so the two always agree.
    The result of compare is clamped to {-1, 0, 1}.
    """

    def _compare(x: A, y: A) -> Ordering:
        return sign(compare(x, y))

    def _equals(x: A, y: A) -> bool:
        return compare(x, y) == 0

    return Ord(equals=_equals, compare=_compare)


def from_equals(equals: Callable[[A, A], bool]) -> Eq[A]:
    """Build an Eq whose first check is reference identity."""

    def _equals(x: A, y: A) -> bool:
        return x is y or equals(x, y)

    return Eq(_equals)
