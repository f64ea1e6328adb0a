from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator

from openinject.profiles.base import InjectionStep, require, require_users
from openinject.profiles.chain import sequence_schedules


@dataclass(frozen=True, slots=True)
class Split(InjectionStep):
    """Repeat ``step`` with ``separator`` in between, up to ``possible_users``.

    The run is ``step``, then as many ``(separator, step)`` pairs as fit, and
    injects the largest number of users not above ``possible_users`` that
    whole repetitions can reach. If a single ``step`` does not fit, nothing is
    injected.
    """

    possible_users: int
    step: InjectionStep
    separator: InjectionStep

    def __post_init__(self) -> None:
        require_users(self.possible_users)
        require(
            isinstance(self.step, InjectionStep) and isinstance(self.separator, InjectionStep),
            "split step and separator must be injection steps",
        )
        step_users = self.step.total_users
        require(step_users > 0, f"step users ({step_users}) must be > 0")
        separator_users = self.separator.total_users
        require(separator_users >= 0, f"separator users ({separator_users}) must be >= 0")

    @property
    def repetitions(self) -> int:
        """Number of ``(separator, step)`` pairs after the first ``step``."""
        step_users = self.step.total_users
        return (self.possible_users - step_users) // (step_users + self.separator.total_users)

    @property
    def total_users(self) -> int:
        step_users = self.step.total_users
        if self.possible_users < step_users:
            return 0
        period = step_users + self.separator.total_users
        return self.possible_users - (self.possible_users - step_users) % period

    @property
    def duration_ms(self) -> int:
        if self.possible_users < self.step.total_users:
            return 0
        return self.step.duration_ms + self.repetitions * (self.separator.duration_ms + self.step.duration_ms)

    def offsets(self) -> Iterator[int]:
        return self.schedule()

    def schedule(self, continuation: Iterable[int] = ()) -> Iterator[int]:
        if self.possible_users < self.step.total_users:
            return iter(continuation)
        return sequence_schedules(self._stages(self.repetitions), continuation)

    def _stages(self, repetitions: int) -> Iterator[InjectionStep]:
        yield self.step
        for _ in range(repetitions):
            yield self.separator
            yield self.step
