from .combinators import (
    contramap_eq,
    contramap_ord,
    dual_ord,
    first,
    fold,
    join,
    last,
    meet,
    struct_eq,
    struct_monoid,
    struct_semigroup,
)
from .combinators.laws import check_laws, eq_laws, monoid_laws, ord_laws, semigroup_laws
from .effects import EFFECTS, Deferred, ap, lift, lift_a2
from .kernel import (
    NOTHING,
    Applicative,
    Apply,
    DuplicateWitness,
    Eq,
    Functor,
    InvalidBound,
    LawkitError,
    Monoid,
    Option,
    Ord,
    PropertyFailed,
    RunResult,
    Semigroup,
    ShapeMismatch,
    Some,
    Witness,
    WitnessTable,
)
from .runtime import Arbitrary, Property, RunConfig, Trace, assert_lawful, prop

__all__ = [
    # Instances
    "Eq",
    "Ord",
    "Semigroup",
    "Monoid",
    "Option",
    "Some",
    "NOTHING",
    # Combinators
    "struct_eq",
    "contramap_eq",
    "contramap_ord",
    "dual_ord",
    "meet",
    "join",
    "struct_semigroup",
    "struct_monoid",
    "first",
    "last",
    "fold",
    # Higher-kinded
    "Witness",
    "Functor",
    "Apply",
    "Applicative",
    "WitnessTable",
    "EFFECTS",
    "Deferred",
    "lift",
    "ap",
    "lift_a2",
    # Verification
    "Arbitrary",
    "Property",
    "prop",
    "assert_lawful",
    "RunConfig",
    "RunResult",
    "Trace",
    "eq_laws",
    "ord_laws",
    "semigroup_laws",
    "monoid_laws",
    "check_laws",
    # Errors
    "LawkitError",
    "ShapeMismatch",
    "InvalidBound",
    "DuplicateWitness",
    "PropertyFailed",
]
