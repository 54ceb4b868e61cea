"""Deferred effect: an asynchronous computation that runs when awaited."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

from lawkit.kernel.hkt import Applicative, Witness

A = TypeVar("A")
B = TypeVar("B")

URI = Witness("Deferred")


@dataclass(frozen=True)
class Deferred(Generic[A]):
    """A computation producing A, started anew on every run.

    Nothing happens until run() is awaited, so a Deferred can be built,
    combined and shared freely.
    """

    _run: Callable[[], Awaitable[A]]

    async def run(self) -> A:
        return await self._run()

    def run_sync(self) -> A:
        """Run on a fresh event loop. Not for use inside a running loop."""
        return asyncio.run(self.run())


def map_(fa: Deferred[A], f: Callable[[A], B]) -> Deferred[B]:
    async def run() -> B:
        return f(await fa.run())

    return Deferred(run)


def apply(fab: Deferred[Callable[[A], B]], fa: Deferred[A]) -> Deferred[B]:
    """Run both sides concurrently, then apply.

    The first exception raised by either side is raised to the caller, after
    the other side has been cancelled.
    """

    async def run() -> B:
        tasks = [asyncio.create_task(fab.run()), asyncio.create_task(fa.run())]
        try:
            f, a = await asyncio.gather(*tasks)
        except Exception:
            pending = [task for task in tasks if not task.done()]
            for task in pending:
                task.cancel()
            await asyncio.gather(*pending, return_exceptions=True)
            raise
        return f(a)

    return Deferred(run)


def of(a: A) -> Deferred[A]:
    async def run() -> A:
        return a

    return Deferred(run)


applicative: Applicative = Applicative(witness=URI, map=map_, apply=apply, lift=of)
