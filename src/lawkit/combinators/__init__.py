"""Combinators - derive instances from instances of their parts.

Every combinator validates its inputs when it is called and returns an
immutable instance; nothing is checked later, at combine time.
"""

from .eq import (
    array_eq,
    contramap_eq,
    elem,
    eq_bool,
    eq_number,
    eq_strict,
    eq_string,
    option_eq,
    struct_eq,
    tuple_eq,
)
from .monoid import (
    apply_monoid,
    array_monoid,
    first,
    last,
    monoid_all,
    monoid_any,
    monoid_product,
    monoid_string,
    monoid_sum,
    option_monoid,
    struct_monoid,
)
from .ord import between, clamp, contramap_ord, dual_ord, max_, min_, ord_bool, ord_number, ord_string
from .semigroup import (
    array_semigroup,
    first_semigroup,
    fold,
    join,
    last_semigroup,
    meet,
    semigroup_all,
    semigroup_any,
    semigroup_product,
    semigroup_string,
    semigroup_sum,
    struct_semigroup,
)

__all__ = [
    # Eq
    "eq_strict",
    "eq_number",
    "eq_string",
    "eq_bool",
    "struct_eq",
    "contramap_eq",
    "array_eq",
    "tuple_eq",
    "option_eq",
    "elem",
    # Ord
    "ord_number",
    "ord_string",
    "ord_bool",
    "contramap_ord",
    "dual_ord",
    "min_",
    "max_",
    "clamp",
    "between",
    # Semigroup
    "semigroup_sum",
    "semigroup_product",
    "semigroup_string",
    "semigroup_all",
    "semigroup_any",
    "first_semigroup",
    "last_semigroup",
    "array_semigroup",
    "meet",
    "join",
    "struct_semigroup",
    "fold",
    # Monoid
    "monoid_sum",
    "monoid_product",
    "monoid_string",
    "monoid_all",
    "monoid_any",
    "array_monoid",
    "struct_monoid",
    "first",
    "last",
    "option_monoid",
    "apply_monoid",
]
