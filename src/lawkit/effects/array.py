"""Zero-or-more effect: Python lists as a non-deterministic computation."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, TypeVar

from lawkit.kernel.hkt import Applicative, Witness

A = TypeVar("A")
B = TypeVar("B")

URI = Witness("Array")


def map_(fa: Sequence[A], f: Callable[[A], B]) -> list[B]:
    return [f(a) for a in fa]


def flatten(ffa: Sequence[Sequence[Any]]) -> list[Any]:
    return [a for fa in ffa for a in fa]


def apply(fab: Sequence[Callable[[A], B]], fa: Sequence[A]) -> list[B]:
    """Apply every function to every argument (N functions x M arguments)."""
    return flatten(map_(fab, lambda f: map_(fa, f)))


def of(a: A) -> list[A]:
    return [a]


applicative: Applicative = Applicative(witness=URI, map=map_, apply=apply, lift=of)
