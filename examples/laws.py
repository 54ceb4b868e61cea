#!/usr/bin/env python3
"""
Check the laws of a few instances and print a report.

Usage:
    python examples/laws.py --seed 42 --num-runs 200
"""

from __future__ import annotations

import argparse

from lawkit import Monoid, RunConfig, Trace, check_laws, monoid_laws, semigroup_laws
from lawkit.combinators import meet, monoid_sum, ord_number, struct_monoid
from lawkit.kernel import Semigroup
from lawkit.logger import configure, log
from lawkit.runtime import integers, records, strings


def separate(x: str, y: str) -> str:
    return x + " " + y


def subtract(x: int, y: int) -> int:
    return x - y


def main() -> None:
    parser = argparse.ArgumentParser(description="Check algebraic laws")
    parser.add_argument("--seed", type=int, default=None, help="Run seed (random by default)")
    parser.add_argument("--num-runs", type=int, default=None, help="Iterations per law")
    parser.add_argument("--log-level", default=None, help="debug, info, warn or error")
    args = parser.parse_args()

    configure(args.log_level)
    config = RunConfig.from_env().merged(seed=args.seed, num_runs=args.num_runs)

    ints = integers(-1000, 1000)
    points = records({"x": ints, "y": ints})
    suites = {
        "monoid_sum": monoid_laws(monoid_sum, ints),
        "meet": semigroup_laws(meet(ord_number), ints),
        "struct_monoid(point)": monoid_laws(struct_monoid({"x": monoid_sum, "y": monoid_sum}), points),
        "separator": monoid_laws(Monoid(combine=separate, identity=""), strings()),
        "subtraction": semigroup_laws(Semigroup(subtract), integers(-100, 100)),
    }

    trace = Trace()
    for suite, laws in suites.items():
        for result in check_laws(laws, config, trace=trace).values():
            level = "info" if result.passed else "warn"
            log(level, f"[{suite}] {result.describe()}")

    log("debug", f"Recorded {len(trace)} trace events", trace.as_tree())


if __name__ == "__main__":
    main()
