"""Runtime layer - arbitraries, shrinking and the property engine."""

from lawkit.runtime.arbitrary import (
    DEFAULT_ALPHABET,
    Arbitrary,
    arrays,
    booleans,
    constant,
    integers,
    options,
    records,
    sampled_from,
    strings,
    tuples,
)
from lawkit.runtime.config import IntegerBounds, LengthBounds, RunConfig
from lawkit.runtime.property import Property, PropertyRunner, RunState, assert_lawful, prop
from lawkit.runtime.seed import fresh_seed, splitmix64
from lawkit.runtime.trace import Evidence, Trace

__all__ = [
    # Arbitraries
    "Arbitrary",
    "DEFAULT_ALPHABET",
    "integers",
    "booleans",
    "strings",
    "constant",
    "sampled_from",
    "options",
    "arrays",
    "tuples",
    "records",
    # Engine
    "Property",
    "PropertyRunner",
    "RunState",
    "prop",
    "assert_lawful",
    # Config
    "RunConfig",
    "IntegerBounds",
    "LengthBounds",
    # Seeds
    "splitmix64",
    "fresh_seed",
    # Tracing
    "Trace",
    "Evidence",
]
