"""Stock effects and generic lifting.

EFFECTS is filled once, here, and cannot change afterwards. Generic code
should take the instance it needs as an argument rather than look it up.
"""

from lawkit.kernel.hkt import WitnessTable

from . import array, deferred, option
from .deferred import Deferred
from .lift import ap, lift, lift_a2, lift_a3, sequence_pair

EFFECTS = WitnessTable((array.applicative, option.applicative, deferred.applicative))

__all__ = [
    "EFFECTS",
    "array",
    "option",
    "deferred",
    "Deferred",
    "lift",
    "ap",
    "lift_a2",
    "lift_a3",
    "sequence_pair",
]
