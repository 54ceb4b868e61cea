"""Tests for Monoid combinators."""

import pytest
from fakes import Point, PointDict, Settings, point_dicts, points, settings, small_ints

from lawkit import NOTHING, ShapeMismatch, Some, check_laws, monoid_laws
from lawkit.combinators import (
    apply_monoid,
    array_monoid,
    first,
    fold,
    last,
    monoid_all,
    monoid_any,
    monoid_product,
    monoid_string,
    monoid_sum,
    option_monoid,
    semigroup_sum,
    struct_monoid,
)
from lawkit.runtime import arrays, options


def test_struct_monoid_on_dicts() -> None:
    monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum})
    assert monoid_point.combine({"x": 10, "y": 15}, {"x": 3, "y": 5}) == {"x": 13, "y": 20}
    assert monoid_point.identity == {"x": 0, "y": 0}


def test_struct_monoid_identity_is_neutral() -> None:
    monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum})
    p = {"x": 10, "y": 15}
    assert monoid_point.combine(p, monoid_point.identity) == p
    assert monoid_point.combine(monoid_point.identity, p) == p


def test_struct_monoid_rebuilds_the_record_type() -> None:
    monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum}, Point)
    assert monoid_point.identity == Point(0, 0)
    assert monoid_point.combine(Point(1, 2), Point(3, 4)) == Point(4, 6)


def test_struct_monoid_on_typed_dicts_gives_dicts() -> None:
    monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum}, PointDict)
    assert monoid_point.identity == {"x": 0, "y": 0}


def test_struct_monoid_rejects_a_wrong_shape() -> None:
    with pytest.raises(ShapeMismatch) as info:
        struct_monoid({"x": monoid_sum, "z": monoid_sum}, Point)
    assert info.value.missing == frozenset({"y"})
    assert info.value.unknown == frozenset({"z"})


def test_folds_over_stock_monoids() -> None:
    assert fold(monoid_sum, [1, 2, 3, 4]) == 10
    assert fold(monoid_product, [1, 2, 3, 4]) == 24
    assert fold(monoid_string, ["a", "b", "c"]) == "abc"
    assert fold(monoid_all, [True, False, True]) is False
    assert fold(monoid_any, [True, False, True]) is True


def test_fold_of_nothing_is_the_identity() -> None:
    assert fold(monoid_sum, []) == 0
    assert fold(monoid_all, []) is True
    assert fold(array_monoid(), []) == []


def test_fold_of_records() -> None:
    monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum}, Point)
    assert fold(monoid_point, [Point(1, 1), Point(2, 3), Point(0, -1)]) == Point(3, 3)


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (Some(1), NOTHING, Some(1)),
        (NOTHING, Some(1), Some(1)),
        (Some(1), Some(2), Some(1)),
        (NOTHING, NOTHING, NOTHING),
    ],
)
def test_first(x, y, expected) -> None:
    assert first().combine(x, y) == expected


@pytest.mark.parametrize(
    "x, y, expected",
    [
        (Some(1), NOTHING, Some(1)),
        (NOTHING, Some(1), Some(1)),
        (Some(1), Some(2), Some(2)),
        (NOTHING, NOTHING, NOTHING),
    ],
)
def test_last(x, y, expected) -> None:
    assert last().combine(x, y) == expected


def test_last_monoid_merges_settings() -> None:
    """Later settings override earlier ones field by field when present."""
    monoid_settings = struct_monoid(
        {"font_family": last(), "font_size": last(), "max_column": last()},
        Settings,
    )
    work = Settings(font_family=Some("Courier"), font_size=NOTHING, max_column=Some(80))
    home = Settings(font_family=Some("Fira Code"), font_size=Some(12), max_column=NOTHING)
    assert monoid_settings.combine(work, home) == Settings(
        font_family=Some("Fira Code"), font_size=Some(12), max_column=Some(80)
    )
    assert monoid_settings.identity == Settings(NOTHING, NOTHING, NOTHING)


def test_option_monoid_skips_absent_values() -> None:
    monoid = option_monoid(semigroup_sum)
    assert monoid.combine(Some(1), Some(2)) == Some(3)
    assert monoid.combine(Some(1), NOTHING) == Some(1)
    assert monoid.combine(NOTHING, Some(2)) == Some(2)
    assert monoid.identity is NOTHING


def test_apply_monoid_absent_side_wins() -> None:
    monoid = apply_monoid(monoid_sum)
    assert monoid.combine(Some(1), Some(2)) == Some(3)
    assert monoid.combine(Some(1), NOTHING) is NOTHING
    assert monoid.identity == Some(0)


def test_monoids_satisfy_monoid_laws() -> None:
    cases = [
        (monoid_sum, small_ints),
        (struct_monoid({"x": monoid_sum, "y": monoid_sum}, Point), points),
        (struct_monoid({"x": monoid_sum, "y": monoid_sum}), point_dicts),
        (array_monoid(), arrays(small_ints)),
        (first(), options(small_ints)),
        (last(), options(small_ints)),
        (option_monoid(semigroup_sum), options(small_ints)),
        (apply_monoid(monoid_sum), options(small_ints)),
        (struct_monoid({"font_family": last(), "font_size": last(), "max_column": last()}, Settings), settings),
    ]
    for monoid, arb in cases:
        for result in check_laws(monoid_laws(monoid, arb), seed=17).values():
            result.raise_on_failure()
