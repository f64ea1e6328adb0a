"""Sequential composition of injection steps into one run timeline."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

from openinject.profiles.base import InjectionStep, require


def sequence_schedules(stages: Iterable[InjectionStep], continuation: Iterable[int] = ()) -> Iterator[int]:
    """Run ``stages`` back to back, then ``continuation``.

    Each stage's offsets are advanced by the summed duration of every stage
    before it. Equivalent to ``s1.schedule(s2.schedule(... sn.schedule(c)))``
    but built in a loop, so the number of stages is not bounded by the
    recursion limit and ``stages`` may itself be a lazy iterator.
    """
    elapsed_ms = 0
    for stage in stages:
        for offset in stage.offsets():
            yield offset + elapsed_ms
        elapsed_ms += stage.duration_ms
    for offset in continuation:
        yield offset + elapsed_ms


@dataclass(frozen=True, slots=True)
class Chain(InjectionStep):
    """Several steps injected one after the other, as a single step."""

    steps: tuple[InjectionStep, ...]

    def __post_init__(self) -> None:
        require(
            all(isinstance(step, InjectionStep) for step in self.steps),
            f"chain steps must be injection steps, got {self.steps!r}",
        )

    @property
    def total_users(self) -> int:
        return sum(step.total_users for step in self.steps)

    @property
    def duration_ms(self) -> int:
        return sum(step.duration_ms for step in self.steps)

    def offsets(self) -> Iterator[int]:
        return sequence_schedules(self.steps)

    def schedule(self, continuation: Iterable[int] = ()) -> Iterator[int]:
        return sequence_schedules(self.steps, continuation)


def injection_schedule(steps: Sequence[InjectionStep], continuation: Iterable[int] = ()) -> Iterator[int]:
    """Arrival offsets (ms) of a whole run made of ``steps``."""
    return sequence_schedules(steps, continuation)
