"""Higher-kinded witnesses and their Functor / Apply / Applicative records.

Python has no type constructors as values, so each effect shape is named by a
Witness tag and described by one instance record. Generic code receives the
record explicitly and only ever calls its operations.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from lawkit.kernel.errors import DuplicateWitness

# Wrapped values are opaque to generic code.
Kind = Any


@dataclass(frozen=True)
class Witness:
    """Opaque tag standing for one effect shape."""

    name: str

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Functor:
    """
    map(fa, f) -> fb

    Laws:
    - identity: map(fa, identity) == fa
    - composition: map(fa, compose(g, f)) == map(map(fa, f), g)
    """

    witness: Witness
    map: Callable[[Kind, Callable[[Any], Any]], Kind]


@dataclass(frozen=True)
class Apply(Functor):
    """Functor that can unpack a wrapped function against a wrapped argument."""

    apply: Callable[[Kind, Kind], Kind]


@dataclass(frozen=True)
class Applicative(Apply):
    """Apply that can lift a plain value into the effect."""

    lift: Callable[[Any], Kind]


class WitnessTable(Mapping[Witness, Applicative]):
    """Read-only table of one Applicative instance per witness.

    The table is filled once at construction; there is no way to add,
    replace or remove an entry afterwards.
    """

    def __init__(self, instances: Iterable[Applicative] = ()) -> None:
        entries: dict[Witness, Applicative] = {}
        for instance in instances:
            if instance.witness in entries:
                raise DuplicateWitness(instance.witness)
            entries[instance.witness] = instance
        self._entries = MappingProxyType(entries)

    def get_instance(self, witness: Witness) -> Applicative:
        """Get the instance registered for a witness."""
        if witness not in self._entries:
            raise KeyError(f"Witness '{witness}' not found in table")
        return self._entries[witness]

    def __getitem__(self, witness: Witness) -> Applicative:
        return self.get_instance(witness)

    def __iter__(self) -> Iterator[Witness]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        names = ", ".join(str(w) for w in self._entries)
        return f"WitnessTable({names})"
