"""Record shape helpers shared by the struct combinators."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from typing import Any, is_typeddict

from pydantic import BaseModel

from lawkit.kernel.errors import ShapeMismatch


def declared_fields(record_type: type) -> tuple[str, ...]:
    """Field names declared by a record type, in declaration order.

    Supports dataclasses, pydantic models, named tuples and TypedDicts.
    """
    if dataclasses.is_dataclass(record_type):
        return tuple(f.name for f in dataclasses.fields(record_type))
    if isinstance(record_type, type) and issubclass(record_type, BaseModel):
        return tuple(record_type.model_fields)
    if is_typeddict(record_type):
        return tuple(record_type.__annotations__)
    named_fields = getattr(record_type, "_fields", None)
    if isinstance(named_fields, tuple):
        return named_fields
    raise TypeError(f"Cannot read the fields of {record_type!r}")


def check_shape(combinator: str, fields: Mapping[str, Any], record_type: type | None) -> tuple[str, ...]:
    """Validate a field-instance map and return its field names.

    Raises:
        ShapeMismatch: if record_type is given and declares a different field set
    """
    names = tuple(fields)
    for name in names:
        if not isinstance(name, str):
            raise ShapeMismatch(f"{combinator}: field names must be strings, got {name!r}", (), names)
    if record_type is None:
        return names
    expected = declared_fields(record_type)
    if set(expected) != set(names):
        missing = sorted(set(expected) - set(names))
        unknown = sorted(set(names) - set(expected))
        raise ShapeMismatch(
            f"{combinator}: instances for {record_type.__name__} do not match its fields "
            f"(missing: {missing}, unknown: {unknown})",
            expected,
            names,
        )
    # Keep the record's own order so rebuilt records look natural.
    return expected


def get_field(record: Any, name: str) -> Any:
    if isinstance(record, Mapping):
        return record[name]
    return getattr(record, name)


def build_record(record_type: type | None, values: dict[str, Any]) -> Any:
    """Rebuild a record of the given type from field values (a dict by default)."""
    if record_type is None or is_typeddict(record_type):
        return values
    if isinstance(record_type, type) and issubclass(record_type, dict):
        return record_type(values)
    return record_type(**values)
