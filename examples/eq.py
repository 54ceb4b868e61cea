from __future__ import annotations

from dataclasses import dataclass

from lawkit.combinators import array_eq, contramap_eq, eq_number, struct_eq
from lawkit.logger import configure, log


@dataclass(frozen=True)
class Point:
    x: int
    y: int


@dataclass(frozen=True)
class Vector:
    start: Point
    end: Point


@dataclass(frozen=True)
class User:
    user_id: int
    name: str


eq_point = struct_eq({"x": eq_number, "y": eq_number}, Point)
eq_vector = struct_eq({"start": eq_point, "end": eq_point}, Vector)
eq_points = array_eq(eq_point)

# Two users are equal if their user_id is equal.
eq_user = contramap_eq(lambda user: user.user_id, eq_number)


def main() -> None:
    configure()

    log("info", "eq_number.equals(2, 3):", eq_number.equals(2, 3))
    log("info", "eq_point.equals(Point(1, 2), Point(1, 2)):", eq_point.equals(Point(1, 2), Point(1, 2)))

    v1 = Vector(Point(1, 2), Point(1, 2))
    v2 = Vector(Point(2, 3), Point(3, 4))
    log("info", "eq_vector.equals(v1, v2):", eq_vector.equals(v1, v2))
    log("info", "eq_vector.equals(v1, v1):", eq_vector.equals(v1, v1))

    log(
        "info",
        "eq_points.equals([Point(10, 4)], [Point(10, 4), Point(10, 4)]):",
        eq_points.equals([Point(10, 4)], [Point(10, 4), Point(10, 4)]),
    )

    user1 = User(1, "Serj")
    user2 = User(2, "Morello")
    user3 = User(1, "Geezer")
    log("info", "eq_user.equals(user1, user2):", eq_user.equals(user1, user2))
    log("info", "eq_user.equals(user1, user3):", eq_user.equals(user1, user3))


if __name__ == "__main__":
    main()
