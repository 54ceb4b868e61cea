"""Eq combinators and stock instances."""

from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

from lawkit.kernel.instances import Eq
from lawkit.kernel.option import Option, Some
from lawkit.kernel.record import check_shape, get_field

A = TypeVar("A")
B = TypeVar("B")


def _strict_equals(x: Any, y: Any) -> bool:
    return x == y


eq_strict: Eq[Any] = Eq(_strict_equals)
eq_number: Eq[int | float] = Eq(_strict_equals)
eq_string: Eq[str] = Eq(_strict_equals)
eq_bool: Eq[bool] = Eq(_strict_equals)


def struct_eq(fields: Mapping[str, Eq[Any]], record_type: type | None = None) -> Eq[Any]:
    """Derive an Eq for a record from one Eq per field.

    Two records are equal when every listed field is equal under its own
    instance. The field set is fixed here; when record_type is given it must
    declare exactly these fields.

    Args:
        fields: Mapping of field name to the Eq instance for that field
        record_type: Optional record class to validate the field set against

    Returns:
        Eq instance comparing records field by field

    Raises:
        ShapeMismatch: If the field set does not match record_type
    """
    names = check_shape("struct_eq", fields, record_type)
    instances = tuple((name, fields[name]) for name in names)

    def equals(x: Any, y: Any) -> bool:
        if x is y:
            return True
        return all(eq.equals(get_field(x, name), get_field(y, name)) for name, eq in instances)

    return Eq(equals)


def contramap_eq(f: Callable[[B], A], eq: Eq[A]) -> Eq[B]:
    """Transport an Eq backwards through a projection f."""

    def equals(x: B, y: B) -> bool:
        return eq.equals(f(x), f(y))

    return Eq(equals)


def array_eq(eq: Eq[A]) -> Eq[Sequence[A]]:
    """Sequences are equal when they have the same length and equal elements."""

    def equals(xs: Sequence[A], ys: Sequence[A]) -> bool:
        if len(xs) != len(ys):
            return False
        return all(eq.equals(x, y) for x, y in zip(xs, ys))

    return Eq(equals)


def tuple_eq(*eqs: Eq[Any]) -> Eq[tuple[Any, ...]]:
    """Eq for fixed-size tuples, one instance per position."""

    def equals(xs: tuple[Any, ...], ys: tuple[Any, ...]) -> bool:
        if len(xs) != len(eqs) or len(ys) != len(eqs):
            return False
        return all(eq.equals(x, y) for eq, x, y in zip(eqs, xs, ys))

    return Eq(equals)


def option_eq(eq: Eq[A]) -> Eq[Option[A]]:
    """Two absents are equal; two present values are compared with eq."""

    def equals(x: Option[A], y: Option[A]) -> bool:
        if isinstance(x, Some) and isinstance(y, Some):
            return eq.equals(x.value, y.value)
        return not isinstance(x, Some) and not isinstance(y, Some)

    return Eq(equals)


def elem(eq: Eq[A]) -> Callable[[A, Sequence[A]], bool]:
    """Membership test under an Eq instance."""

    def contains(a: A, xs: Sequence[A]) -> bool:
        return any(eq.equals(item, a) for item in xs)

    return contains
