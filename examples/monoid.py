from __future__ import annotations

from typing import NamedTuple

from lawkit import NOTHING, Option, Some
from lawkit.combinators import fold, last, monoid_all, monoid_any, monoid_product, monoid_sum, struct_monoid
from lawkit.logger import configure, log


class Settings(NamedTuple):
    font_family: Option[str]
    font_size: Option[int]
    max_column: Option[int]


monoid_point = struct_monoid({"x": monoid_sum, "y": monoid_sum})

# Later settings win field by field, as long as they set the field at all.
monoid_settings = struct_monoid(
    {"font_family": last(), "font_size": last(), "max_column": last()},
    Settings,
)


def main() -> None:
    configure()

    p1 = {"x": 10, "y": 15}
    p2 = {"x": 3, "y": 5}
    log("info", "monoid_point.combine(p1, p2):", monoid_point.combine(p1, p2))
    log("info", "monoid_point.identity:", monoid_point.identity)

    numbers = [1, 2, 3, 4]
    log("info", "fold(monoid_sum, numbers):", fold(monoid_sum, numbers))
    log("info", "fold(monoid_product, numbers):", fold(monoid_product, numbers))
    log("info", "fold(monoid_all, [True, False, True]):", fold(monoid_all, [True, False, True]))
    log("info", "fold(monoid_any, [True, False, True]):", fold(monoid_any, [True, False, True]))

    work = Settings(font_family=Some("Courier"), font_size=NOTHING, max_column=Some(80))
    home = Settings(font_family=Some("Fira Code"), font_size=Some(12), max_column=NOTHING)
    log("info", "monoid_settings.combine(work, home):", monoid_settings.combine(work, home))


if __name__ == "__main__":
    main()
