"""Semigroup combinators, stock instances and folding."""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any, TypeVar

from lawkit.combinators.ord import max_, min_
from lawkit.kernel.instances import Monoid, Ord, Semigroup
from lawkit.kernel.record import build_record, check_shape, get_field

A = TypeVar("A")

_MISSING: Any = object()


semigroup_sum: Semigroup[int | float] = Semigroup(lambda x, y: x + y)
semigroup_product: Semigroup[int | float] = Semigroup(lambda x, y: x * y)
semigroup_string: Semigroup[str] = Semigroup(lambda x, y: x + y)
semigroup_all: Semigroup[bool] = Semigroup(lambda x, y: x and y)
semigroup_any: Semigroup[bool] = Semigroup(lambda x, y: x or y)


def first_semigroup() -> Semigroup[Any]:
    """Always keep the left operand."""
    return Semigroup(lambda x, _: x)


def last_semigroup() -> Semigroup[Any]:
    """Always keep the right operand."""
    return Semigroup(lambda _, y: y)


def array_semigroup() -> Semigroup[Sequence[Any]]:
    """Free semigroup: concatenation. Results are lists."""
    return Semigroup(lambda xs, ys: [*xs, *ys])


def meet(ord: Ord[A]) -> Semigroup[A]:
    """Semigroup keeping the lesser value under ord."""
    return Semigroup(min_(ord))


def join(ord: Ord[A]) -> Semigroup[A]:
    """Semigroup keeping the greater value under ord."""
    return Semigroup(max_(ord))


def struct_semigroup(fields: Mapping[str, Semigroup[Any]], record_type: type | None = None) -> Semigroup[Any]:
    """Combine records field by field, each field with its own semigroup.

    Raises:
        ShapeMismatch: If the field set does not match record_type
    """
    names = check_shape("struct_semigroup", fields, record_type)
    instances = tuple((name, fields[name]) for name in names)

    def combine(x: Any, y: Any) -> Any:
        values = {name: s.combine(get_field(x, name), get_field(y, name)) for name, s in instances}
        return build_record(record_type, values)

    return Semigroup(combine)


def fold(instance: Semigroup[A], sequence: Iterable[A], initial: A = _MISSING) -> A:
    """Reduce a sequence from left to right.

    Any semigroup can fold when an initial value is given. Without one the
    instance must be a Monoid and its identity is the starting value.

    Raises:
        TypeError: If no initial value is given and instance is not a Monoid
    """
    if initial is _MISSING:
        if not isinstance(instance, Monoid):
            raise TypeError("fold needs an initial value unless the instance is a Monoid")
        initial = instance.identity
    result = initial
    for item in sequence:
        result = instance.combine(result, item)
    return result
