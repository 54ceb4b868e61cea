"""Monoid combinators and stock instances."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, TypeVar

from lawkit.combinators.semigroup import struct_semigroup
from lawkit.kernel.instances import Monoid, Semigroup
from lawkit.kernel.option import NOTHING, Option, Some
from lawkit.kernel.record import build_record, check_shape

A = TypeVar("A")


monoid_sum: Monoid[int | float] = Monoid(combine=lambda x, y: x + y, identity=0)
monoid_product: Monoid[int | float] = Monoid(combine=lambda x, y: x * y, identity=1)
monoid_string: Monoid[str] = Monoid(combine=lambda x, y: x + y, identity="")
monoid_all: Monoid[bool] = Monoid(combine=lambda x, y: x and y, identity=True)
monoid_any: Monoid[bool] = Monoid(combine=lambda x, y: x or y, identity=False)


def array_monoid() -> Monoid[Sequence[Any]]:
    return Monoid(combine=lambda xs, ys: [*xs, *ys], identity=[])


def struct_monoid(fields: Mapping[str, Monoid[Any]], record_type: type | None = None) -> Monoid[Any]:
    """Derive a Monoid for a record from one Monoid per field.

    combine works field by field; the identity is the record made of every
    field's identity.

    Args:
        fields: Mapping of field name to the Monoid instance for that field
        record_type: Optional record class; results are rebuilt as this type
            (plain dicts otherwise) and its field set is validated

    Returns:
        Monoid instance over records

    Raises:
        ShapeMismatch: If the field set does not match record_type
    """
    names = check_shape("struct_monoid", fields, record_type)
    semigroup = struct_semigroup(fields, record_type)
    identity = build_record(record_type, {name: fields[name].identity for name in names})
    return Monoid(combine=semigroup.combine, identity=identity)


def _first(x: Option[A], y: Option[A]) -> Option[A]:
    return x if isinstance(x, Some) else y


def _last(x: Option[A], y: Option[A]) -> Option[A]:
    return y if isinstance(y, Some) else x


def first() -> Monoid[Option[Any]]:
    """Monoid keeping the left-most present value."""
    return Monoid(combine=_first, identity=NOTHING)


def last() -> Monoid[Option[Any]]:
    """Monoid keeping the right-most present value."""
    return Monoid(combine=_last, identity=NOTHING)


def option_monoid(semigroup: Semigroup[A]) -> Monoid[Option[A]]:
    """Combine present values with semigroup, skipping absent ones."""

    def combine(x: Option[A], y: Option[A]) -> Option[A]:
        if isinstance(x, Some) and isinstance(y, Some):
            return Some(semigroup.combine(x.value, y.value))
        return x if isinstance(x, Some) else y

    return Monoid(combine=combine, identity=NOTHING)


def apply_monoid(monoid: Monoid[A]) -> Monoid[Option[A]]:
    """Combine two present values with monoid; an absent side makes the result absent.

    The identity is Some(monoid.identity).
    """

    def combine(x: Option[A], y: Option[A]) -> Option[A]:
        if isinstance(x, Some) and isinstance(y, Some):
            return Some(monoid.combine(x.value, y.value))
        return NOTHING

    return Monoid(combine=combine, identity=Some(monoid.identity))
