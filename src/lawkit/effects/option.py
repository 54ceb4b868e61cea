"""Optional effect: a computation that may produce nothing."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

from lawkit.kernel.hkt import Applicative, Witness
from lawkit.kernel.option import NOTHING, Option, Some

A = TypeVar("A")
B = TypeVar("B")

URI = Witness("Option")


def map_(fa: Option[A], f: Callable[[A], B]) -> Option[B]:
    if isinstance(fa, Some):
        return Some(f(fa.value))
    return NOTHING


def apply(fab: Option[Callable[[A], B]], fa: Option[A]) -> Option[B]:
    if isinstance(fab, Some):
        return map_(fa, fab.value)
    return NOTHING


def of(a: A) -> Option[A]:
    return Some(a)


applicative: Applicative = Applicative(witness=URI, map=map_, apply=apply, lift=of)
