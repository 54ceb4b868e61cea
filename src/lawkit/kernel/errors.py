"""Error types raised when instances, arbitraries or runs are built wrongly."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


class LawkitError(Exception):
    """Base class for construction-time errors."""


class ShapeMismatch(LawkitError):
    """Error raised when a field-instance map does not match a record shape.

    Both field-name sets are kept for debugging purposes.
    """

    def __init__(self, message: str, expected: Iterable[str], actual: Iterable[str]) -> None:
        self.expected = frozenset(expected)
        self.actual = frozenset(actual)
        super().__init__(message)

    @property
    def missing(self) -> frozenset[str]:
        return self.expected - self.actual

    @property
    def unknown(self) -> frozenset[str]:
        return self.actual - self.expected

    def __repr__(self) -> str:
        return (
            f"ShapeMismatch({super().__str__()!r}, "
            f"missing={sorted(self.missing)!r}, unknown={sorted(self.unknown)!r})"
        )


class InvalidBound(LawkitError):
    """Error raised when a generator or run option is out of range."""

    def __init__(self, message: str, option: str, value: Any) -> None:
        self.option = option
        self.value = value
        super().__init__(message)

    def __repr__(self) -> str:
        return f"InvalidBound({super().__str__()!r}, option={self.option!r}, value={self.value!r})"


class DuplicateWitness(LawkitError):
    """Error raised when one witness is registered twice in a table."""

    def __init__(self, witness: Any) -> None:
        self.witness = witness
        super().__init__(f"Witness '{witness}' is already registered")
