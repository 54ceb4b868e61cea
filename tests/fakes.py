from __future__ import annotations

from dataclasses import dataclass
from typing import NamedTuple, TypedDict

from pydantic import BaseModel

from lawkit.kernel.option import Option
from lawkit.runtime.arbitrary import integers, options, records, strings


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Vector:
    start: Point
    end: Point


class User(BaseModel):
    user_id: int
    name: str


class Settings(NamedTuple):
    font_family: Option[str]
    font_size: Option[int]
    max_column: Option[int]


class PointDict(TypedDict):
    x: int
    y: int


small_ints = integers(-50, 50)
points = records({"x": small_ints, "y": small_ints}, Point)
point_dicts = records({"x": small_ints, "y": small_ints})
vectors = records({"start": points, "end": points}, Vector)
users = records({"user_id": integers(0, 5), "name": strings(max_length=3)}, User)
settings = records(
    {
        "font_family": options(strings(1, 8)),
        "font_size": options(integers(8, 32)),
        "max_column": options(integers(40, 120)),
    },
    Settings,
)
