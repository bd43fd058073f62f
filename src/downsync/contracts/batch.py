"""Parallel execution result contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class TaskOutcome(Generic[T]):
    """Outcome of one action invocation for one identifier."""

    identifier: T
    value: Any = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        if self.error is not None:
            return False
        if isinstance(self.value, list):
            return all(status == 0 for status in self.value)
        return True


@dataclass
class BatchResult(Generic[T]):
    outcomes: dict[T, TaskOutcome[T]] = field(default_factory=dict)

    @property
    def identifiers(self) -> list[T]:
        return list(self.outcomes)

    @property
    def succeeded(self) -> list[T]:
        return [identifier for identifier, outcome in self.outcomes.items() if outcome.ok]

    @property
    def failed(self) -> list[T]:
        return [identifier for identifier, outcome in self.outcomes.items() if not outcome.ok]

    @property
    def ok(self) -> bool:
        return not self.failed
