"""Property engine - draws inputs, looks for a counterexample, shrinks it."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from lawkit.kernel.result import RunResult
from lawkit.runtime.arbitrary import Arbitrary
from lawkit.runtime.config import RunConfig
from lawkit.runtime.seed import fresh_seed, splitmix64
from lawkit.runtime.trace import Trace

logger = logging.getLogger(__name__)


class RunState(Enum):
    READY = "ready"
    RUNNING = "running"
    PASSED = "passed"
    FAILED = "failed"


@dataclass(frozen=True)
class Property:
    """A predicate expected to hold for every draw of its arbitraries.

    Attributes:
        predicate: Function of one argument per arbitrary, returning a bool
        arbitraries: One arbitrary per predicate argument
        name: Label used in reports
    """

    predicate: Callable[..., bool]
    arbitraries: tuple[Arbitrary[Any], ...]
    name: str = ""

    def __post_init__(self) -> None:
        if not self.arbitraries:
            raise ValueError("A property needs at least one arbitrary")

    @property
    def arity(self) -> int:
        return len(self.arbitraries)

    def draw(self, seed: int) -> tuple[Any, ...]:
        """Draw one input tuple; the same seed always gives the same tuple."""
        rng = random.Random(seed)
        return tuple(arbitrary.generate(rng) for arbitrary in self.arbitraries)

    def evaluate(self, values: tuple[Any, ...]) -> tuple[bool, str | None]:
        """Check the predicate on values.

        A predicate that raises counts as falsified; the error text is returned.
        """
        try:
            return bool(self.predicate(*values)), None
        except Exception as exc:
            return False, f"{type(exc).__name__}: {exc}"


def prop(predicate: Callable[..., bool], *arbitraries: Arbitrary[Any], name: str | None = None) -> Property:
    """Build a Property, naming it after the predicate by default."""
    label = name if name is not None else getattr(predicate, "__name__", "property")
    return Property(predicate, tuple(arbitraries), label)


class PropertyRunner:
    """Runs one property: READY -> RUNNING -> PASSED | FAILED.

    Iteration i draws from random.Random(s_i), where s_0 is the run seed and
    s_{i+1} = splitmix64(s_i). A failure reports s_i, so running again with
    seed=s_i reproduces the failing draw on the first iteration.
    """

    def __init__(self, property: Property, config: RunConfig | None = None, trace: Trace | None = None) -> None:
        self.property = property
        self.config = (config or RunConfig()).checked()
        self.trace = trace
        self.state = RunState.READY
        self._result: RunResult | None = None

    @property
    def result(self) -> RunResult | None:
        return self._result

    def run(self) -> RunResult:
        """Run the property. A finished runner returns its earlier result."""
        if self._result is not None:
            return self._result

        self.state = RunState.RUNNING
        run_seed = self.config.seed if self.config.seed is not None else fresh_seed()
        name = self.property.name
        trace = self.trace
        run_id: int | None = None
        if trace is not None:
            run_id = trace.record(
                "run_begin",
                info={"property": name, "run_seed": run_seed, "num_runs": self.config.num_runs},
            )
            if run_id is not None:
                trace.push(run_id)

        logger.debug("Running %s: %d runs, seed=%d", name, self.config.num_runs, run_seed)
        start_time = time.perf_counter()
        try:
            result = self._search(run_seed)
        finally:
            if trace is not None and run_id is not None:
                trace.pop()

        duration_ms = (time.perf_counter() - start_time) * 1000
        if trace is not None:
            trace.record("run_end", info={"kind": result.kind}, parent_id=run_id, duration_ms=duration_ms)

        self.state = RunState.PASSED if result.passed else RunState.FAILED
        self._result = result
        return result

    def _search(self, run_seed: int) -> RunResult:
        name = self.property.name
        seed = run_seed
        for iteration in range(self.config.num_runs):
            values = self.property.draw(seed)
            held, error = self.property.evaluate(values)
            if not held:
                logger.info("%s falsified on run %d (seed=%d): %r", name, iteration + 1, seed, values)
                if self.trace is not None:
                    self.trace.record(
                        "falsified",
                        info={"iteration": iteration, "seed": seed, "values": repr(values), "error": error},
                    )
                counterexample, steps, error = self._shrink(values, error)
                logger.info("%s shrunk %d time(s) to %r", name, steps, counterexample)
                return RunResult.Failed(
                    counterexample,
                    seed,
                    steps,
                    name=name,
                    num_runs=iteration + 1,
                    original=values,
                    run_seed=run_seed,
                    iteration=iteration,
                    error=error,
                )
            seed = splitmix64(seed)
        return RunResult.Passed(name=name, num_runs=self.config.num_runs, run_seed=run_seed)

    def _shrink(self, values: tuple[Any, ...], error: str | None) -> tuple[tuple[Any, ...], int, str | None]:
        """Greedy shrink: accept the first falsifying candidate, then start over.

        Stops at a fixpoint (no candidate of the current tuple falsifies the
        property) or after max_shrinks accepted steps.
        """
        current = values
        steps = 0
        arbitraries = self.property.arbitraries
        while steps < self.config.max_shrinks:
            accepted = self._first_falsifying(current, arbitraries)
            if accepted is None:
                break
            current, error = accepted
            steps += 1
            if self.trace is not None:
                self.trace.record("shrink_step", info={"step": steps, "values": repr(current)})
        return current, steps, error

    def _first_falsifying(
        self, current: tuple[Any, ...], arbitraries: tuple[Arbitrary[Any], ...]
    ) -> tuple[tuple[Any, ...], str | None] | None:
        for index, arbitrary in enumerate(arbitraries):
            for candidate in arbitrary.shrink(current[index]):
                trial = current[:index] + (candidate,) + current[index + 1 :]
                held, error = self.property.evaluate(trial)
                if not held:
                    return trial, error
        return None


def assert_lawful(
    property: Property,
    config: RunConfig | None = None,
    *,
    seed: int | None = None,
    num_runs: int | None = None,
    max_shrinks: int | None = None,
    trace: Trace | None = None,
) -> RunResult:
    """Run a property and return Passed or Failed.

    A falsified property is a normal outcome, not an exception; call
    raise_on_failure() on the result to turn it into an AssertionError.

    Args:
        property: The property to check
        config: Base run configuration (defaults to RunConfig())
        seed: Overrides config.seed
        num_runs: Overrides config.num_runs
        max_shrinks: Overrides config.max_shrinks
        trace: Optional trace receiving run events

    Returns:
        RunResult of the run
    """
    effective = (config or RunConfig()).merged(seed=seed, num_runs=num_runs, max_shrinks=max_shrinks)
    return PropertyRunner(property, effective, trace).run()
