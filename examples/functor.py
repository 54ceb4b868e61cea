"""Defining a new effect: a Response functor with its own witness."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from lawkit import Functor, Witness, lift
from lawkit.logger import configure, log

URI = Witness("Response")


@dataclass(frozen=True)
class Response:
    url: str
    status: int
    headers: dict[str, str]
    body: Any


def map_(fa: Response, f: Any) -> Response:
    return Response(url=fa.url, status=fa.status, headers=fa.headers, body=f(fa.body))


functor_response = Functor(witness=URI, map=map_)


def main() -> None:
    configure()

    response = Response(url="https://example.com", status=200, headers={}, body="Hello")
    shout = lift(functor_response)(str.upper)
    log("info", "lift(functor_response)(str.upper)(response):", shout(response))


if __name__ == "__main__":
    main()
