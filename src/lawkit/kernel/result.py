"""Outcome of a property run."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal


class PropertyFailed(AssertionError):
    """Raised by RunResult.raise_on_failure() for a falsified property.

    The full result is kept so test code can inspect the seed and
    counterexample.
    """

    def __init__(self, result: RunResult) -> None:
        self.result = result
        super().__init__(result.describe())


@dataclass(frozen=True)
class RunResult:
    """
    Result of running one property.

    Kinds:
    - passed: every iteration held
    - failed: a draw falsified the property; counterexample is the shrunk draw,
      original the draw as generated, seed the iteration seed that reproduces
      original on the first iteration of a new run
    """

    kind: Literal["passed", "failed"]
    name: str = ""
    num_runs: int = 0
    counterexample: tuple[Any, ...] | None = None
    original: tuple[Any, ...] | None = None
    seed: int | None = None
    run_seed: int | None = None
    iteration: int | None = None
    shrink_steps: int = 0
    error: str | None = None

    @staticmethod
    def Passed(name: str = "", num_runs: int = 0, run_seed: int | None = None) -> RunResult:
        return RunResult(kind="passed", name=name, num_runs=num_runs, run_seed=run_seed)

    @staticmethod
    def Failed(
        counterexample: tuple[Any, ...],
        seed: int,
        shrink_steps: int,
        *,
        name: str = "",
        num_runs: int = 0,
        original: tuple[Any, ...] | None = None,
        run_seed: int | None = None,
        iteration: int | None = None,
        error: str | None = None,
    ) -> RunResult:
        return RunResult(
            kind="failed",
            name=name,
            num_runs=num_runs,
            counterexample=counterexample,
            original=original if original is not None else counterexample,
            seed=seed,
            run_seed=run_seed,
            iteration=iteration,
            shrink_steps=shrink_steps,
            error=error,
        )

    @property
    def passed(self) -> bool:
        return self.kind == "passed"

    @property
    def failed(self) -> bool:
        return self.kind == "failed"

    def describe(self) -> str:
        label = self.name or "property"
        if self.passed:
            return f"{label}: passed after {self.num_runs} runs"
        lines = [
            f"{label}: falsified after {self.num_runs} runs",
            f"  counterexample: {self.counterexample!r}",
            f"  shrunk {self.shrink_steps} time(s) from: {self.original!r}",
            f"  seed: {self.seed} (replay with seed={self.seed})",
        ]
        if self.error is not None:
            lines.append(f"  error: {self.error}")
        return "\n".join(lines)

    def raise_on_failure(self) -> RunResult:
        """Return self when passed, raise PropertyFailed otherwise."""
        if self.failed:
            raise PropertyFailed(self)
        return self
