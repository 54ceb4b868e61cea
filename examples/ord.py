from __future__ import annotations

from lawkit.combinators import clamp, contramap_ord, dual_ord, max_, min_, ord_number
from lawkit.logger import configure, log

by_age = contramap_ord(lambda person: person["age"], ord_number)

younger = min_(by_age)
older = max_(by_age)


def main() -> None:
    configure()

    guido = {"name": "Guido", "age": 47}
    giulio = {"name": "Giulio", "age": 45}

    log("info", "ord_number.compare(1, 2):", ord_number.compare(1, 2))
    log("info", "younger(guido, giulio):", younger(guido, giulio))
    log("info", "older(guido, giulio):", older(guido, giulio))
    log("info", "dual_ord(ord_number).compare(1, 2):", dual_ord(ord_number).compare(1, 2))
    log("info", "clamp(ord_number)(0, 10, 42):", clamp(ord_number)(0, 10, 42))


if __name__ == "__main__":
    main()
