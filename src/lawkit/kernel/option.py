"""Option - a value that may be absent."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeGuard, TypeVar

A = TypeVar("A")


@dataclass(frozen=True)
class Some(Generic[A]):
    """A present value."""

    value: A

    def __repr__(self) -> str:
        return f"Some({self.value!r})"


@dataclass(frozen=True)
class Nothing:
    """The absent value. Use the NOTHING singleton."""

    def __repr__(self) -> str:
        return "NOTHING"


NOTHING = Nothing()

Option = Some[A] | Nothing


def some(value: A) -> Some[A]:
    return Some(value)


def is_some(fa: Any) -> TypeGuard[Some[Any]]:
    return isinstance(fa, Some)


def is_nothing(fa: Any) -> TypeGuard[Nothing]:
    return isinstance(fa, Nothing)


def from_nullable(value: A | None) -> Option[A]:
    """Wrap a value, mapping None to NOTHING."""
    if value is None:
        return NOTHING
    return Some(value)


def get_or_else(fa: Option[A], default: A) -> A:
    if isinstance(fa, Some):
        return fa.value
    return default
