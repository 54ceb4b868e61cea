"""Tests for Eq combinators."""

import pytest
from fakes import Point, PointDict, Settings, User, Vector, points, users, vectors

from lawkit import Eq, ShapeMismatch, assert_lawful, check_laws, eq_laws
from lawkit.combinators import (
    array_eq,
    contramap_eq,
    elem,
    eq_number,
    eq_string,
    option_eq,
    struct_eq,
    tuple_eq,
)
from lawkit.kernel import NOTHING, Some
from lawkit.runtime import integers, prop

eq_point = struct_eq({"x": eq_number, "y": eq_number}, Point)
eq_vector = struct_eq({"start": eq_point, "end": eq_point}, Vector)


def test_eq_number() -> None:
    assert not eq_number.equals(2, 3)
    assert eq_number.equals(2, 2)


def test_struct_eq_on_dataclasses() -> None:
    assert eq_point.equals(Point(1, 2), Point(1, 2))
    assert not eq_point.equals(Point(1, 2), Point(2, 3))


def test_struct_eq_nests() -> None:
    """Struct instances can be fed back into struct_eq."""
    v1 = Vector(Point(1, 2), Point(1, 2))
    v2 = Vector(Point(2, 3), Point(3, 4))
    v3 = Vector(Point(10, 4), Point(10, 4))
    v4 = Vector(Point(10, 4), Point(10, 4))
    assert not eq_vector.equals(v1, v2)
    assert eq_vector.equals(v3, v4)


def test_struct_eq_on_plain_dicts() -> None:
    eq = struct_eq({"x": eq_number, "y": eq_number})
    assert eq.equals({"x": 1, "y": 2}, {"x": 1, "y": 2})
    assert not eq.equals({"x": 1, "y": 2}, {"x": 1, "y": 3})


def test_struct_eq_ignores_unlisted_fields_without_record_type() -> None:
    eq = struct_eq({"x": eq_number})
    assert eq.equals({"x": 1, "y": 2}, {"x": 1, "y": 99})


def test_struct_eq_missing_field_fails_at_construction() -> None:
    with pytest.raises(ShapeMismatch) as info:
        struct_eq({"x": eq_number}, Point)
    assert info.value.missing == frozenset({"y"})
    assert info.value.unknown == frozenset()


def test_struct_eq_unknown_field_fails_at_construction() -> None:
    with pytest.raises(ShapeMismatch) as info:
        struct_eq({"x": eq_number, "y": eq_number, "z": eq_number}, Point)
    assert info.value.unknown == frozenset({"z"})
    assert "z" in repr(info.value)


@pytest.mark.parametrize("record_type", [User, Settings, PointDict])
def test_struct_eq_reads_field_sets_of_all_record_kinds(record_type: type) -> None:
    with pytest.raises(ShapeMismatch):
        struct_eq({"nope": eq_number}, record_type)


def test_struct_eq_accepts_pydantic_models() -> None:
    eq_user = struct_eq({"user_id": eq_number, "name": eq_string}, User)
    assert eq_user.equals(User(user_id=1, name="Serj"), User(user_id=1, name="Serj"))
    assert not eq_user.equals(User(user_id=1, name="Serj"), User(user_id=1, name="Geezer"))


def test_contramap_eq_compares_projections() -> None:
    """Two users are equal if their user_id is equal."""
    eq_user = contramap_eq(lambda user: user.user_id, eq_number)
    user1 = User(user_id=1, name="Serj")
    user2 = User(user_id=2, name="Morello")
    user3 = User(user_id=1, name="Geezer")
    assert not eq_user.equals(user1, user2)
    assert eq_user.equals(user1, user3)


def test_array_eq() -> None:
    eq_points = array_eq(eq_point)
    assert eq_points.equals([Point(10, 4), Point(10, 4)], [Point(10, 4), Point(10, 4)])
    assert not eq_points.equals([Point(10, 4)], [Point(10, 4), Point(10, 4)])
    assert eq_points.equals([], [])


def test_option_eq() -> None:
    eq = option_eq(eq_number)
    assert eq.equals(NOTHING, NOTHING)
    assert eq.equals(Some(1), Some(1))
    assert not eq.equals(Some(1), Some(2))
    assert not eq.equals(Some(1), NOTHING)
    assert not eq.equals(NOTHING, Some(1))


def test_tuple_eq() -> None:
    eq = tuple_eq(eq_number, eq_string)
    assert eq.equals((1, "a"), (1, "a"))
    assert not eq.equals((1, "a"), (1, "b"))
    assert not eq.equals((1,), (1,))


def test_elem() -> None:
    assert elem(eq_number)(1, [1, 2, 3])
    assert not elem(eq_number)(4, [1, 2, 3])


def test_struct_eq_is_reflexive_for_generated_records() -> None:
    result = assert_lawful(prop(lambda v: eq_vector.equals(v, v), vectors), seed=7)
    assert result.passed


def test_struct_eq_satisfies_eq_laws() -> None:
    results = check_laws(eq_laws(eq_point, points), seed=11)
    assert {name: r.kind for name, r in results.items()} == {
        "reflexivity": "passed",
        "symmetry": "passed",
        "transitivity": "passed",
    }


def test_contramap_eq_satisfies_eq_laws() -> None:
    eq_user = contramap_eq(lambda user: user.user_id, eq_number)
    for result in check_laws(eq_laws(eq_user, users), seed=3).values():
        result.raise_on_failure()


def test_eq_laws_reject_an_intransitive_equality() -> None:
    """'Close enough' equality is reflexive and symmetric but not transitive."""
    near = Eq(lambda a, b: abs(a - b) <= 1)
    results = check_laws(eq_laws(near, integers(-3, 3)), seed=5, num_runs=500)
    assert results["reflexivity"].passed
    assert results["symmetry"].passed
    assert results["transitivity"].failed
    x, y, z = results["transitivity"].counterexample
    assert near.equals(x, y) and near.equals(y, z) and not near.equals(x, z)
