from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from openinject.profiles.base import InjectionStep, duration_to_ms, require_duration


@dataclass(frozen=True, slots=True)
class NothingFor(InjectionStep):
    """Inject nobody for ``duration_sec``; only delays what follows."""

    duration_sec: float

    def __post_init__(self) -> None:
        require_duration(self.duration_sec)

    @property
    def total_users(self) -> int:
        return 0

    @property
    def duration_ms(self) -> int:
        return duration_to_ms(self.duration_sec)

    def offsets(self) -> Iterator[int]:
        return iter(())
