from __future__ import annotations

from lawkit.combinators import fold, join, meet, ord_number, semigroup_sum, struct_semigroup
from lawkit.logger import configure, log

# Bounding interval of a set of ranges: lowest low, highest high.
semigroup_range = struct_semigroup({"low": meet(ord_number), "high": join(ord_number)})


def main() -> None:
    configure()

    log("info", "meet(ord_number).combine(3, 7):", meet(ord_number).combine(3, 7))
    log("info", "join(ord_number).combine(3, 7):", join(ord_number).combine(3, 7))
    log("info", "fold(semigroup_sum, [1, 2, 3], 10):", fold(semigroup_sum, [1, 2, 3], 10))

    ranges = [{"low": 3, "high": 5}, {"low": 1, "high": 4}, {"low": 2, "high": 9}]
    log("info", "fold(semigroup_range, ranges[1:], ranges[0]):", fold(semigroup_range, ranges[1:], ranges[0]))


if __name__ == "__main__":
    main()
