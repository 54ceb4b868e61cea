"""Run and generator options.

Option models are pydantic models: types are validated on construction, and
checked() enforces the relations between fields, raising InvalidBound.
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict

from lawkit.kernel.errors import InvalidBound

DEFAULT_MIN_INT = -(2**31)
DEFAULT_MAX_INT = 2**31 - 1
DEFAULT_MAX_LENGTH = 10

ENV_PREFIX = "LAWKIT_"


class IntegerBounds(BaseModel):
    """Inclusive integer range."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_value: int = DEFAULT_MIN_INT
    max_value: int = DEFAULT_MAX_INT

    def checked(self) -> Self:
        if self.min_value > self.max_value:
            raise InvalidBound(
                f"min_value ({self.min_value}) must not exceed max_value ({self.max_value})",
                "min_value",
                self.min_value,
            )
        return self

    @property
    def shrink_target(self) -> int:
        """Zero when in range, otherwise the bound nearest to zero."""
        if self.min_value > 0:
            return self.min_value
        if self.max_value < 0:
            return self.max_value
        return 0


class LengthBounds(BaseModel):
    """Inclusive length range for sequences and strings."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    min_length: int = 0
    max_length: int = DEFAULT_MAX_LENGTH

    def checked(self) -> Self:
        if self.min_length < 0:
            raise InvalidBound(f"min_length must be >= 0, got {self.min_length}", "min_length", self.min_length)
        if self.max_length < 0:
            raise InvalidBound(f"max_length must be >= 0, got {self.max_length}", "max_length", self.max_length)
        if self.min_length > self.max_length:
            raise InvalidBound(
                f"min_length ({self.min_length}) must not exceed max_length ({self.max_length})",
                "min_length",
                self.min_length,
            )
        return self


class RunConfig(BaseModel):
    """Budgets and seed for one property run.

    Attributes:
        num_runs: Iterations to draw before declaring a pass
        max_shrinks: Accepted shrink steps before the shrink loop stops
        seed: Run seed; a fresh one is picked per run when None
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    num_runs: int = 100
    max_shrinks: int = 1000
    seed: int | None = None

    def checked(self) -> Self:
        if self.num_runs < 1:
            raise InvalidBound(f"num_runs must be positive, got {self.num_runs}", "num_runs", self.num_runs)
        if self.max_shrinks < 0:
            raise InvalidBound(
                f"max_shrinks must be >= 0, got {self.max_shrinks}", "max_shrinks", self.max_shrinks
            )
        return self

    def merged(self, **overrides: Any) -> RunConfig:
        """Copy with every non-None override applied."""
        update = {key: value for key, value in overrides.items() if value is not None}
        if not update:
            return self
        return RunConfig.model_validate({**self.model_dump(), **update})

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> RunConfig:
        """Build a config from LAWKIT_NUM_RUNS, LAWKIT_MAX_SHRINKS and LAWKIT_SEED.

        Unset variables keep their defaults. Values are parsed by pydantic.
        """
        env = os.environ if environ is None else environ
        data: dict[str, str] = {}
        for name in ("num_runs", "max_shrinks", "seed"):
            raw = env.get(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None and raw.strip():
                data[name] = raw.strip()
        return cls.model_validate(data).checked()
