"""Deterministic rate-driven profiles: Ramp, ConstantRate and RampRate.

All three are expressed as a count of users per whole second of their
duration, fed through the millisecond bucket generator.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from openinject.numerics import partition_at, round_half_up
from openinject.profiles.at_once import AtOnce
from openinject.profiles.base import (
    InjectionStep,
    duration_to_ms,
    require_duration,
    require_rates,
    require_users,
)
from openinject.profiles.buckets import bucket_offsets
from openinject.profiles.nothing_for import NothingFor
from openinject.profiles.poisson import Poisson


@dataclass(frozen=True, slots=True)
class Ramp(InjectionStep):
    """Inject ``users`` spread evenly over ``duration_sec``."""

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
        seconds = int(self.duration_sec)
        if seconds == 0:
            return AtOnce(self.users).offsets()
        return bucket_offsets(partition_at(self.users, second, seconds) for second in range(seconds))


@dataclass(frozen=True, slots=True)
class ConstantRate(InjectionStep):
    """Inject ``rate`` users per second for ``duration_sec``."""

    rate: float
    duration_sec: float

    def __post_init__(self) -> None:
        require_rates(self.duration_sec, self.rate)

    @property
    def total_users(self) -> int:
        return round_half_up(self.rate * int(self.duration_sec))

    @property
    def duration_ms(self) -> int:
        return duration_to_ms(self.duration_sec)

    def offsets(self) -> Iterator[int]:
        if self.rate == 0:
            return NothingFor(self.duration_sec).offsets()
        return Ramp(self.total_users, self.duration_sec).offsets()

    def randomized(self, seed: int) -> Poisson:
        return Poisson(self.duration_sec, self.rate, self.rate, seed=seed)


@dataclass(frozen=True, slots=True)
class RampRate(InjectionStep):
    """Ramp the injection rate linearly from ``start_rate`` to ``end_rate``.

    The users of each second are the integral of the rate over that second.
    Fractional users are carried over to the next second instead of being
    dropped, and the last second takes whatever is left so the emitted count
    is exactly ``total_users``.
    """

    start_rate: float
    end_rate: float
    duration_sec: float

    def __post_init__(self) -> None:
        require_rates(self.duration_sec, self.start_rate, self.end_rate)

    @property
    def total_users(self) -> int:
        average = self.start_rate + (self.end_rate - self.start_rate) / 2
        return int(average * int(self.duration_sec))

    @property
    def duration_ms(self) -> int:
        return duration_to_ms(self.duration_sec)

    def offsets(self) -> Iterator[int]:
        if self.start_rate == 0 and self.end_rate == 0:
            return NothingFor(self.duration_sec).offsets()
        return bucket_offsets(self._users_per_second())

    def randomized(self, seed: int) -> Poisson:
        return Poisson(self.duration_sec, self.start_rate, self.end_rate, seed=seed)

    def _users_per_second(self) -> Iterator[int]:
        seconds = int(self.duration_sec)
        if seconds == 0:
            return
        slope = (self.end_rate - self.start_rate) / (2 * seconds)
        total = self.total_users
        emitted = 0
        pending_fraction = 0.0
        for second in range(seconds - 1):
            raw = slope * (2 * second + 1) + self.start_rate + pending_fraction
            users = int(raw)
            pending_fraction = raw - users
            emitted += users
            yield users
        yield max(0, total - emitted)
