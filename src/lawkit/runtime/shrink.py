"""Shrink strategies.

A strategy maps a value to a finite, ordered sequence of candidates that are
strictly smaller than it, most aggressive first. Because every candidate is
smaller, repeatedly accepting candidates always terminates.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from typing import Any, TypeVar

from lawkit.kernel.option import NOTHING, Some
from lawkit.kernel.record import build_record, get_field

T = TypeVar("T")
S = TypeVar("S", bound=Sequence[Any])

Shrinker = Callable[[T], Iterable[T]]


def no_shrink(value: Any) -> Iterator[Any]:
    return iter(())


def shrink_integer(value: int, target: int = 0) -> Iterator[int]:
    """Move toward target, halving the distance each time.

    For 100 toward 0 this yields 0, 50, 75, 88, 94, 97, 99.
    """
    delta = value - target
    while delta != 0:
        yield value - delta
        # Halve toward zero for both signs.
        delta = -((-delta) // 2) if delta < 0 else delta // 2


def shrink_bool(value: bool) -> Iterator[bool]:
    if value:
        yield False


def shrink_length(items: S, min_length: int = 0) -> Iterator[S]:
    """Drop chunks of decreasing size, never going below min_length."""
    n = len(items)
    size = n - min_length
    while size > 0:
        for start in range(0, n - size + 1, size):
            yield items[:start] + items[start + size :]  # type: ignore[return-value]
        size //= 2


def shrink_each(items: list[T], shrink_item: Shrinker[T]) -> Iterator[list[T]]:
    """Shrink one element at a time, keeping the others."""
    for index, item in enumerate(items):
        for candidate in shrink_item(item):
            yield [*items[:index], candidate, *items[index + 1 :]]


def shrink_list(items: list[T], min_length: int, shrink_item: Shrinker[T]) -> Iterator[list[T]]:
    yield from shrink_length(items, min_length)
    yield from shrink_each(items, shrink_item)


def shrink_string(value: str, min_length: int, alphabet: str) -> Iterator[str]:
    """Shorten first, then move characters toward the front of the alphabet."""
    yield from shrink_length(value, min_length)
    positions = {}
    for index, char in enumerate(alphabet):
        positions.setdefault(char, index)
    for index, char in enumerate(value):
        position = positions.get(char)
        if position is None:
            continue
        for smaller in shrink_integer(position, 0):
            yield value[:index] + alphabet[smaller] + value[index + 1 :]


def shrink_sampled(value: T, values: Sequence[T]) -> Iterator[T]:
    """Move toward the first of the sampled values."""
    try:
        position = values.index(value)
    except ValueError:
        return
    for smaller in shrink_integer(position, 0):
        yield values[smaller]


def shrink_option(value: Any, shrink_inner: Shrinker[Any]) -> Iterator[Any]:
    if isinstance(value, Some):
        yield NOTHING
        for candidate in shrink_inner(value.value):
            yield Some(candidate)


def shrink_tuple(values: tuple[Any, ...], shrinkers: Sequence[Shrinker[Any]]) -> Iterator[tuple[Any, ...]]:
    for index, (item, shrink_item) in enumerate(zip(values, shrinkers)):
        for candidate in shrink_item(item):
            yield values[:index] + (candidate,) + values[index + 1 :]


def shrink_record(
    record: Any,
    shrinkers: Mapping[str, Shrinker[Any]],
    record_type: type | None = None,
) -> Iterator[Any]:
    """Shrink one field at a time, rebuilding the record around it."""
    current = {name: get_field(record, name) for name in shrinkers}
    for name, shrink_field in shrinkers.items():
        for candidate in shrink_field(current[name]):
            yield build_record(record_type, {**current, name: candidate})
