"""Algebraic laws as ready-made properties.

Each *_laws function returns a mapping of law name to Property for one
instance; check_laws runs such a mapping. The laws checked are:

Eq
  reflexivity   equals(x, x)
  symmetry      equals(x, y) == equals(y, x)
  transitivity  equals(x, y) and equals(y, z) => equals(x, z)

Ord (in addition to consistency with its own equals)
  reflexivity   compare(x, x) == 0
  antisymmetry  compare(x, y) <= 0 and compare(y, x) <= 0 => equals(x, y)
  transitivity  compare(x, y) <= 0 and compare(y, z) <= 0 => compare(x, z) <= 0

Semigroup
  associativity combine(combine(x, y), z) == combine(x, combine(y, z))

Monoid (in addition to associativity)
  right identity combine(x, identity) == x
  left identity  combine(identity, x) == x

Functor
  identity      map(fa, identity) == fa
  composition   map(fa, g . f) == map(map(fa, f), g)

Applicative (in addition to the functor laws)
  identity      apply(lift(identity), fa) == fa
  homomorphism  apply(lift(f), lift(x)) == lift(f(x))
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

from lawkit.combinators.eq import eq_strict
from lawkit.kernel.function import compose, identity
from lawkit.kernel.hkt import Applicative, Functor
from lawkit.kernel.instances import Eq, Monoid, Ord, Semigroup
from lawkit.kernel.result import RunResult
from lawkit.runtime.arbitrary import Arbitrary
from lawkit.runtime.config import RunConfig
from lawkit.runtime.property import Property, assert_lawful, prop
from lawkit.runtime.trace import Trace


def _implies(antecedent: bool, consequent: bool) -> bool:
    return not antecedent or consequent


def eq_laws(eq: Eq[Any], arb: Arbitrary[Any]) -> dict[str, Property]:
    def reflexivity(x: Any) -> bool:
        return eq.equals(x, x)

    def symmetry(x: Any, y: Any) -> bool:
        return eq.equals(x, y) == eq.equals(y, x)

    def transitivity(x: Any, y: Any, z: Any) -> bool:
        return _implies(eq.equals(x, y) and eq.equals(y, z), eq.equals(x, z))

    return {
        "reflexivity": prop(reflexivity, arb, name="eq.reflexivity"),
        "symmetry": prop(symmetry, arb, arb, name="eq.symmetry"),
        "transitivity": prop(transitivity, arb, arb, arb, name="eq.transitivity"),
    }


def ord_laws(ord: Ord[Any], arb: Arbitrary[Any]) -> dict[str, Property]:
    def reflexivity(x: Any) -> bool:
        return ord.compare(x, x) == 0

    def antisymmetry(x: Any, y: Any) -> bool:
        return _implies(ord.compare(x, y) <= 0 and ord.compare(y, x) <= 0, ord.equals(x, y))

    def transitivity(x: Any, y: Any, z: Any) -> bool:
        return _implies(ord.compare(x, y) <= 0 and ord.compare(y, z) <= 0, ord.compare(x, z) <= 0)

    def consistency(x: Any, y: Any) -> bool:
        return (ord.compare(x, y) == 0) == ord.equals(x, y)

    return {
        "reflexivity": prop(reflexivity, arb, name="ord.reflexivity"),
        "antisymmetry": prop(antisymmetry, arb, arb, name="ord.antisymmetry"),
        "transitivity": prop(transitivity, arb, arb, arb, name="ord.transitivity"),
        "consistency": prop(consistency, arb, arb, name="ord.consistency"),
    }


def associativity(semigroup: Semigroup[Any], arb: Arbitrary[Any], eq: Eq[Any] | None = None) -> Property:
    eq = eq or eq_strict

    def associative(x: Any, y: Any, z: Any) -> bool:
        combine = semigroup.combine
        return eq.equals(combine(combine(x, y), z), combine(x, combine(y, z)))

    return prop(associative, arb, arb, arb, name="semigroup.associativity")


def commutativity(semigroup: Semigroup[Any], arb: Arbitrary[Any], eq: Eq[Any] | None = None) -> Property:
    eq = eq or eq_strict

    def commutative(x: Any, y: Any) -> bool:
        return eq.equals(semigroup.combine(x, y), semigroup.combine(y, x))

    return prop(commutative, arb, arb, name="semigroup.commutativity")


def idempotence(semigroup: Semigroup[Any], arb: Arbitrary[Any], eq: Eq[Any] | None = None) -> Property:
    eq = eq or eq_strict

    def idempotent(x: Any) -> bool:
        return eq.equals(semigroup.combine(x, x), x)

    return prop(idempotent, arb, name="semigroup.idempotence")


def semigroup_laws(semigroup: Semigroup[Any], arb: Arbitrary[Any], eq: Eq[Any] | None = None) -> dict[str, Property]:
    return {"associativity": associativity(semigroup, arb, eq)}


def monoid_laws(monoid: Monoid[Any], arb: Arbitrary[Any], eq: Eq[Any] | None = None) -> dict[str, Property]:
    eq = eq or eq_strict

    def right_identity(x: Any) -> bool:
        return eq.equals(monoid.combine(x, monoid.identity), x)

    def left_identity(x: Any) -> bool:
        return eq.equals(monoid.combine(monoid.identity, x), x)

    return {
        "associativity": associativity(monoid, arb, eq),
        "right_identity": prop(right_identity, arb, name="monoid.right_identity"),
        "left_identity": prop(left_identity, arb, name="monoid.left_identity"),
    }


def functor_laws(
    F: Functor,
    arb: Arbitrary[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    eq: Eq[Any] | None = None,
) -> dict[str, Property]:
    """Functor laws for wrapped values drawn by arb, using f then g for composition."""
    eq = eq or eq_strict

    def preserves_identity(fa: Any) -> bool:
        return eq.equals(F.map(fa, identity), fa)

    def preserves_composition(fa: Any) -> bool:
        return eq.equals(F.map(fa, compose(g, f)), F.map(F.map(fa, f), g))

    return {
        "identity": prop(preserves_identity, arb, name=f"functor[{F.witness}].identity"),
        "composition": prop(preserves_composition, arb, name=f"functor[{F.witness}].composition"),
    }


def applicative_laws(
    F: Applicative,
    arb: Arbitrary[Any],
    wrapped: Arbitrary[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    eq: Eq[Any] | None = None,
) -> dict[str, Property]:
    """Functor laws plus applicative identity and homomorphism.

    Args:
        F: Applicative instance under test
        arb: Plain values
        wrapped: Wrapped values
        f, g: Unary functions on plain values
        eq: Equality on wrapped values
    """
    eq = eq or eq_strict

    def applicative_identity(fa: Any) -> bool:
        return eq.equals(F.apply(F.lift(identity), fa), fa)

    def homomorphism(x: Any) -> bool:
        return eq.equals(F.apply(F.lift(f), F.lift(x)), F.lift(f(x)))

    laws = functor_laws(F, wrapped, f, g, eq)
    laws["applicative_identity"] = prop(applicative_identity, wrapped, name=f"applicative[{F.witness}].identity")
    laws["homomorphism"] = prop(homomorphism, arb, name=f"applicative[{F.witness}].homomorphism")
    return laws


def check_laws(
    laws: Mapping[str, Property],
    config: RunConfig | None = None,
    *,
    seed: int | None = None,
    num_runs: int | None = None,
    trace: Trace | None = None,
) -> dict[str, RunResult]:
    """Run every law and return its result under the same name."""
    return {
        name: assert_lawful(law, config, seed=seed, num_runs=num_runs, trace=trace)
        for name, law in laws.items()
    }
