"""Generic lifting, written once against any Functor or Applicative instance.

Nothing here looks inside a wrapped value or at the witness; only the
instance operations are called.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from lawkit.kernel.function import curry2, curry3
from lawkit.kernel.hkt import Apply, Functor, Kind

B = TypeVar("B")
C = TypeVar("C")
D = TypeVar("D")
E = TypeVar("E")


def lift(F: Functor) -> Callable[[Callable[[B], C]], Callable[[Kind], Kind]]:
    """Lift a unary function g: B -> C to F[B] -> F[C]."""

    def lifter(g: Callable[[B], C]) -> Callable[[Kind], Kind]:
        def lifted(fb: Kind) -> Kind:
            return F.map(fb, g)

        return lifted

    return lifter


def ap(F: Apply, fab: Kind, fa: Kind) -> Kind:
    """Unpack a wrapped function against a wrapped argument."""
    return F.apply(fab, fa)


def lift_a2(F: Apply) -> Callable[[Callable[[B, C], D]], Callable[[Kind, Kind], Kind]]:
    """Lift a two-argument function g: (B, C) -> D to (F[B], F[C]) -> F[D].

    Defined as apply(map(fb, curry(g)), fc).

    Example:
        >>> from lawkit.effects import array
        >>> lift_a2(array.applicative)(lambda b, c: b + c)([1, 2], [10, 20])
        [11, 21, 12, 22]
    """

    def lifter(g: Callable[[B, C], D]) -> Callable[[Kind, Kind], Kind]:
        curried = curry2(g)

        def lifted(fb: Kind, fc: Kind) -> Kind:
            return F.apply(F.map(fb, curried), fc)

        return lifted

    return lifter


def lift_a3(F: Apply) -> Callable[[Callable[[B, C, D], E]], Callable[[Kind, Kind, Kind], Kind]]:
    """Three-argument version of lift_a2."""

    def lifter(g: Callable[[B, C, D], E]) -> Callable[[Kind, Kind, Kind], Kind]:
        curried = curry3(g)

        def lifted(fb: Kind, fc: Kind, fd: Kind) -> Kind:
            return F.apply(F.apply(F.map(fb, curried), fc), fd)

        return lifted

    return lifter


def sequence_pair(F: Apply, fb: Kind, fc: Kind) -> Kind:
    """Pair two wrapped values into a wrapped tuple."""
    return lift_a2(F)(_pair)(fb, fc)


def _pair(b: Any, c: Any) -> tuple[Any, Any]:
    return (b, c)
