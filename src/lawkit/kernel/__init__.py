"""Kernel layer - pure instance records and data types for lawkit."""

from lawkit.kernel.errors import DuplicateWitness, InvalidBound, LawkitError, ShapeMismatch
from lawkit.kernel.function import compose, curry2, curry3, identity
from lawkit.kernel.hkt import Applicative, Apply, Functor, Witness, WitnessTable
from lawkit.kernel.instances import Eq, Monoid, Ord, Ordering, Semigroup, from_compare, from_equals, sign
from lawkit.kernel.option import (
    NOTHING,
    Nothing,
    Option,
    Some,
    from_nullable,
    get_or_else,
    is_nothing,
    is_some,
    some,
)
from lawkit.kernel.result import PropertyFailed, RunResult

__all__ = [
    # Instances
    "Eq",
    "Ord",
    "Ordering",
    "Semigroup",
    "Monoid",
    "from_compare",
    "from_equals",
    "sign",
    # Higher-kinded
    "Witness",
    "Functor",
    "Apply",
    "Applicative",
    "WitnessTable",
    # Option
    "Option",
    "Some",
    "Nothing",
    "NOTHING",
    "some",
    "is_some",
    "is_nothing",
    "from_nullable",
    "get_or_else",
    # Functions
    "identity",
    "compose",
    "curry2",
    "curry3",
    # Results & errors
    "RunResult",
    "PropertyFailed",
    "LawkitError",
    "ShapeMismatch",
    "InvalidBound",
    "DuplicateWitness",
]
