"""Tests for the kernel: instance records, Option, function helpers, results."""

import pytest

from lawkit.kernel import (
    NOTHING,
    Eq,
    Monoid,
    PropertyFailed,
    RunResult,
    Semigroup,
    Some,
    compose,
    curry2,
    curry3,
    from_compare,
    from_equals,
    from_nullable,
    get_or_else,
    identity,
    is_nothing,
    is_some,
    sign,
    some,
)


def test_sign_clamps_to_ordering() -> None:
    assert sign(-42) == -1
    assert sign(0) == 0
    assert sign(7.5) == 1


def test_from_compare_derives_equals() -> None:
    """Equality derived from compare agrees with it."""
    by_length = from_compare(lambda x, y: len(x) - len(y))
    assert by_length.compare("ab", "abcd") == -1
    assert by_length.compare("abcd", "ab") == 1
    assert by_length.compare("ab", "cd") == 0
    assert by_length.equals("ab", "cd")
    assert not by_length.equals("a", "cd")


def test_from_equals_short_circuits_on_identity() -> None:
    calls = []

    def equals(x: object, y: object) -> bool:
        calls.append((x, y))
        return False

    eq = from_equals(equals)
    value = object()
    assert eq.equals(value, value)
    assert calls == []


def test_monoid_is_a_semigroup() -> None:
    monoid = Monoid(combine=lambda x, y: x + y, identity=0)
    assert isinstance(monoid, Semigroup)
    assert monoid.combine(monoid.identity, 5) == 5


def test_instances_are_immutable() -> None:
    eq = Eq(lambda x, y: x == y)
    with pytest.raises(AttributeError):
        eq.equals = lambda x, y: True  # type: ignore[misc]


def test_option_helpers() -> None:
    assert some(1) == Some(1)
    assert is_some(Some(None))
    assert is_nothing(NOTHING)
    assert from_nullable(None) is NOTHING
    assert from_nullable(0) == Some(0)
    assert get_or_else(NOTHING, 3) == 3
    assert get_or_else(Some(4), 3) == 4
    assert repr(Some("a")) == "Some('a')"
    assert repr(NOTHING) == "NOTHING"


def test_compose_and_identity() -> None:
    length = len
    longer_than_two = compose(lambda n: n > 2, length)
    assert longer_than_two("abc")
    assert not longer_than_two("ab")
    assert compose(identity, length)("abcd") == length("abcd")
    assert compose(length, identity)("abcd") == length("abcd")


def test_curry() -> None:
    assert curry2(lambda b, c: b - c)(10)(3) == 7
    assert curry3(lambda a, b, c: a * 100 + b * 10 + c)(1)(2)(3) == 123


def test_run_result_passed() -> None:
    result = RunResult.Passed(name="p", num_runs=100, run_seed=1)
    assert result.passed
    assert not result.failed
    assert result.raise_on_failure() is result
    assert "passed after 100 runs" in result.describe()


def test_run_result_failed_reports_seed_and_counterexample() -> None:
    result = RunResult.Failed((0, 1), seed=1234, shrink_steps=3, name="p", original=(17, 40), num_runs=5)
    assert result.failed
    with pytest.raises(PropertyFailed) as info:
        result.raise_on_failure()
    message = str(info.value)
    assert "seed=1234" in message
    assert "(0, 1)" in message
    assert "(17, 40)" in message
    assert info.value.result is result


def test_run_result_failed_defaults_original_to_counterexample() -> None:
    result = RunResult.Failed(("x",), seed=1, shrink_steps=0)
    assert result.original == ("x",)
