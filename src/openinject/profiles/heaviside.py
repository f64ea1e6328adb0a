from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from openinject.numerics import erfinv, round_half_up
from openinject.profiles.at_once import AtOnce
from openinject.profiles.base import (
    InjectionStep,
    duration_to_ms,
    require_duration,
    require_users,
)
from openinject.profiles.nothing_for import NothingFor


@dataclass(frozen=True, slots=True)
class Heaviside(InjectionStep):
    """Inject ``users`` along a smoothed step over ``duration_sec``.

    The number of users injected by time t follows ``1/2 + 1/2*erf(k*t)``:
    arrivals are dense around the middle of the duration and sparse at both
    ends. Offsets are obtained by inverting that curve at evenly spaced
    quantiles ``i/(users+2)``.
    """

    users: int
    duration_sec: float

    def __post_init__(self) -> None:
        require_users(self.users)
        require_duration(self.duration_sec)

    @property
    def total_users(self) -> int:
        return self.users

    @property
    def duration_ms(self) -> int:
        return duration_to_ms(self.duration_sec)

    def offsets(self) -> Iterator[int]:
        if self.users == 0:
            return NothingFor(self.duration_sec).offsets()
        if self.duration_ms == 0:
            return AtOnce(self.users).offsets()
        return self._smoothed_offsets()

    def _inverse(self, user: int) -> float:
        x = user / (self.users + 2)
        return erfinv(2 * x - 1)

    def _smoothed_offsets(self) -> Iterator[int]:
        t0 = abs(self._inverse(1))
        k = self.duration_ms / (2 * t0)
        for user in range(1, self.users + 1):
            yield round_half_up(k * (self._inverse(user) + t0))
