"""Run trace - records what a property run did, separate from its result.

Trace is runtime infrastructure for debugging: the engine writes events into
it when one is supplied and never reads them back.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from typing import Any


@dataclass(frozen=True)
class Evidence:
    """One recorded event of a property run.

    Attributes:
        action: What happened ("run_begin", "falsified", "shrink_step", "run_end")
        id: Position of the event in its trace
        parent_id: Enclosing event, if any
        info: Event details (seeds, iteration, values)
        duration_ms: Elapsed time, for events closing a span
    """

    action: str
    id: int = 0
    parent_id: int | None = None
    timestamp: datetime = field(default_factory=lambda: datetime.now(UTC))
    info: dict[str, Any] = field(default_factory=dict)
    duration_ms: float | None = None


class Trace:
    """Event log of one or more property runs.

    Each run opens a run_begin event and pushes it, so its falsified and
    shrink_step events hang under it; run_end closes the run with its
    duration. One trace can be shared by every law of a check_laws call.
    A disabled trace records nothing.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled
        self._events: list[Evidence] = []
        self._next_id: int = 0
        self._stack: list[int] = []

    def push(self, event_id: int) -> None:
        """Open a run span: later events default to event_id as their parent."""
        self._stack.append(event_id)

    def pop(self) -> int | None:
        """Close the innermost run span."""
        if self._stack:
            return self._stack.pop()
        return None

    def record(
        self,
        action: str,
        info: dict[str, Any] | None = None,
        parent_id: int | None = None,
        duration_ms: float | None = None,
    ) -> int | None:
        """Record a run event.

        Args:
            action: run_begin, falsified, shrink_step or run_end
            info: Seeds, iteration, drawn values or outcome kind
            parent_id: Enclosing run; defaults to the innermost open span
            duration_ms: Run time, set on run_end

        Returns:
            Event ID (the run id for run_begin), or None if tracing is disabled
        """
        if not self.enabled:
            return None

        if parent_id is None and self._stack:
            parent_id = self._stack[-1]

        event_id = self._next_id
        self._next_id += 1
        self._events.append(
            Evidence(
                action=action,
                id=event_id,
                parent_id=parent_id,
                info=info or {},
                duration_ms=duration_ms,
            )
        )
        return event_id

    def get_events(self) -> list[Evidence]:
        return list(self._events)

    def find_all(self, action: str) -> list[Evidence]:
        """Events of one kind, e.g. every shrink_step across runs."""
        return [event for event in self._events if event.action == action]

    def run_events(self, run_id: int) -> list[Evidence]:
        """Events recorded under one run, ending with its run_end."""
        return [event for event in self._events if event.parent_id == run_id]

    def as_tree(self) -> dict[int | None, list[int]]:
        """Map each run id to the ids of its events; top-level runs sit under None."""
        tree: dict[int | None, list[int]] = {}
        for event in self._events:
            tree.setdefault(event.parent_id, []).append(event.id)
        return tree

    def __len__(self) -> int:
        return len(self._events)

    def clear(self) -> None:
        self._events.clear()
        self._next_id = 0
        self._stack.clear()
