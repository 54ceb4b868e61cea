from __future__ import annotations

import asyncio

from lawkit import EFFECTS, NOTHING, Deferred, Some, lift_a2
from lawkit.effects import array, deferred, option
from lawkit.logger import configure, log


def add(b: int, c: int) -> int:
    return b + c


def delayed(value: int, seconds: float) -> Deferred[int]:
    async def run() -> int:
        await asyncio.sleep(seconds)
        return value

    return Deferred(run)


def main() -> None:
    configure()

    add_arrays = lift_a2(EFFECTS.get_instance(array.URI))(add)
    add_options = lift_a2(EFFECTS.get_instance(option.URI))(add)
    add_deferred = lift_a2(EFFECTS.get_instance(deferred.URI))(add)

    log("info", "add_arrays([1, 2, 3], [10, 20]):", add_arrays([1, 2, 3], [10, 20]))
    log("info", "add_options(Some(1), Some(2)):", add_options(Some(1), Some(2)))
    log("info", "add_options(Some(1), NOTHING):", add_options(Some(1), NOTHING))
    log("info", "add_deferred(delayed(1), delayed(2)).run_sync():", add_deferred(delayed(1, 0.1), delayed(2, 0.1)).run_sync())


if __name__ == "__main__":
    main()
