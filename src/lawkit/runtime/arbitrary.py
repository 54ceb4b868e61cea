"""Arbitraries - seedable value generators with their shrink strategies."""

from __future__ import annotations

import random
import string
from collections.abc import Callable, Iterable, Iterator, Mapping, Sequence
from dataclasses import dataclass, replace
from typing import Any, Generic, TypeVar

from lawkit.kernel.errors import InvalidBound
from lawkit.kernel.option import NOTHING, Option, Some
from lawkit.kernel.record import build_record, check_shape
from lawkit.runtime import shrink as strategies
from lawkit.runtime.config import DEFAULT_MAX_INT, DEFAULT_MAX_LENGTH, DEFAULT_MIN_INT, IntegerBounds, LengthBounds

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_ALPHABET = (
    string.ascii_lowercase + string.ascii_uppercase + string.digits + string.punctuation + " "
)

# Share of integer draws that pick an edge value (target or a bound).
_EDGE_RATE = 0.1


@dataclass(frozen=True)
class Arbitrary(Generic[T]):
    """How to draw a value of T, and how to make a failing one smaller.

    Attributes:
        draw: Draws one value from the given random source
        shrinker: Maps a value to strictly smaller candidates
        description: Readable name used in reports
    """

    draw: Callable[[random.Random], T]
    shrinker: Callable[[T], Iterable[T]] = strategies.no_shrink
    description: str = "arbitrary"

    def generate(self, rng: random.Random) -> T:
        return self.draw(rng)

    def shrink(self, value: T) -> Iterator[T]:
        return iter(self.shrinker(value))

    def sample(self, seed: int, count: int = 10) -> list[T]:
        """Draw count values from one seeded source (for inspection)."""
        rng = random.Random(seed)
        return [self.draw(rng) for _ in range(count)]

    def map(
        self,
        f: Callable[[T], U],
        inverse: Callable[[U], T] | None = None,
        description: str | None = None,
    ) -> Arbitrary[U]:
        """Transform drawn values.

        Shrinking goes through inverse; without one the mapped arbitrary
        does not shrink.
        """
        source = self

        def draw(rng: random.Random) -> U:
            return f(source.draw(rng))

        if inverse is None:
            shrinker: Callable[[U], Iterable[U]] = strategies.no_shrink
        else:

            def shrinker(value: U) -> Iterator[U]:
                return (f(candidate) for candidate in source.shrink(inverse(value)))

        return Arbitrary(draw, shrinker, description or f"{self.description}.map({_name_of(f)})")

    def with_shrinker(self, shrinker: Callable[[T], Iterable[T]]) -> Arbitrary[T]:
        return replace(self, shrinker=shrinker)

    def __repr__(self) -> str:
        return f"Arbitrary({self.description})"


def _name_of(f: Callable[..., Any]) -> str:
    return getattr(f, "__name__", type(f).__name__)


def integers(min_value: int = DEFAULT_MIN_INT, max_value: int = DEFAULT_MAX_INT) -> Arbitrary[int]:
    """Integers in [min_value, max_value], shrinking toward zero.

    Raises:
        InvalidBound: If min_value > max_value
    """
    bounds = IntegerBounds(min_value=min_value, max_value=max_value).checked()
    low, high, target = bounds.min_value, bounds.max_value, bounds.shrink_target
    edges = (target, low, high)

    def draw(rng: random.Random) -> int:
        if rng.random() < _EDGE_RATE:
            return rng.choice(edges)
        return rng.randint(low, high)

    def shrinker(value: int) -> Iterator[int]:
        return strategies.shrink_integer(value, target)

    return Arbitrary(draw, shrinker, f"integers({low}, {high})")


def booleans() -> Arbitrary[bool]:
    def draw(rng: random.Random) -> bool:
        return rng.random() < 0.5

    return Arbitrary(draw, strategies.shrink_bool, "booleans()")


def strings(
    min_length: int = 0,
    max_length: int = DEFAULT_MAX_LENGTH,
    alphabet: str = DEFAULT_ALPHABET,
) -> Arbitrary[str]:
    """Strings over alphabet with a bounded length.

    Raises:
        InvalidBound: If the length range is invalid or alphabet is empty
    """
    bounds = LengthBounds(min_length=min_length, max_length=max_length).checked()
    if not alphabet:
        raise InvalidBound("alphabet must not be empty", "alphabet", alphabet)
    low, high = bounds.min_length, bounds.max_length

    def draw(rng: random.Random) -> str:
        length = rng.randint(low, high)
        return "".join(rng.choice(alphabet) for _ in range(length))

    def shrinker(value: str) -> Iterator[str]:
        return strategies.shrink_string(value, low, alphabet)

    return Arbitrary(draw, shrinker, f"strings({low}, {high})")


def constant(value: T) -> Arbitrary[T]:
    def draw(rng: random.Random) -> T:
        return value

    return Arbitrary(draw, strategies.no_shrink, f"constant({value!r})")


def sampled_from(values: Sequence[T]) -> Arbitrary[T]:
    """Pick one of values; shrinks toward the first one.

    Raises:
        InvalidBound: If values is empty
    """
    choices = tuple(values)
    if not choices:
        raise InvalidBound("sampled_from needs at least one value", "values", values)

    def draw(rng: random.Random) -> T:
        return rng.choice(choices)

    def shrinker(value: T) -> Iterator[T]:
        return strategies.shrink_sampled(value, choices)

    return Arbitrary(draw, shrinker, f"sampled_from({len(choices)} values)")


def options(inner: Arbitrary[T], absent_rate: float = 0.2) -> Arbitrary[Option[T]]:
    """Optional values: NOTHING with probability absent_rate, else Some(inner).

    Raises:
        InvalidBound: If absent_rate is outside [0, 1]
    """
    if not 0.0 <= absent_rate <= 1.0:
        raise InvalidBound(f"absent_rate must be within [0, 1], got {absent_rate}", "absent_rate", absent_rate)

    def draw(rng: random.Random) -> Option[T]:
        if rng.random() < absent_rate:
            return NOTHING
        return Some(inner.draw(rng))

    def shrinker(value: Option[T]) -> Iterator[Option[T]]:
        return strategies.shrink_option(value, inner.shrink)

    return Arbitrary(draw, shrinker, f"options({inner.description})")


def arrays(
    element: Arbitrary[T],
    min_length: int = 0,
    max_length: int = DEFAULT_MAX_LENGTH,
) -> Arbitrary[list[T]]:
    """Lists of element draws with a bounded length.

    Raises:
        InvalidBound: If the length range is invalid
    """
    bounds = LengthBounds(min_length=min_length, max_length=max_length).checked()
    low, high = bounds.min_length, bounds.max_length

    def draw(rng: random.Random) -> list[T]:
        length = rng.randint(low, high)
        return [element.draw(rng) for _ in range(length)]

    def shrinker(value: list[T]) -> Iterator[list[T]]:
        return strategies.shrink_list(list(value), low, element.shrink)

    return Arbitrary(draw, shrinker, f"arrays({element.description}, {low}, {high})")


def tuples(*elements: Arbitrary[Any]) -> Arbitrary[tuple[Any, ...]]:
    def draw(rng: random.Random) -> tuple[Any, ...]:
        return tuple(element.draw(rng) for element in elements)

    shrinkers = tuple(element.shrink for element in elements)

    def shrinker(value: tuple[Any, ...]) -> Iterator[tuple[Any, ...]]:
        return strategies.shrink_tuple(value, shrinkers)

    names = ", ".join(element.description for element in elements)
    return Arbitrary(draw, shrinker, f"tuples({names})")


def records(fields: Mapping[str, Arbitrary[Any]], record_type: type | None = None) -> Arbitrary[Any]:
    """Records drawn field by field, each with its own arbitrary.

    Fields are drawn in declaration order (the record type's order when one
    is given) and shrunk one at a time.

    Raises:
        ShapeMismatch: If the field set does not match record_type
    """
    names = check_shape("records", fields, record_type)
    ordered = tuple((name, fields[name]) for name in names)

    def draw(rng: random.Random) -> Any:
        return build_record(record_type, {name: arb.draw(rng) for name, arb in ordered})

    shrinkers = {name: arb.shrink for name, arb in ordered}

    def shrinker(value: Any) -> Iterator[Any]:
        return strategies.shrink_record(value, shrinkers, record_type)

    label = record_type.__name__ if record_type is not None else "dict"
    return Arbitrary(draw, shrinker, f"records({label}: {', '.join(names)})")
