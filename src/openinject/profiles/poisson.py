from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from random import Random
from typing import Iterator

from openinject.numerics import round_half_up
from openinject.profiles.base import (
    MILLIS_PER_SECOND,
    InjectionStep,
    duration_to_ms,
    require,
    require_rates,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Poisson(InjectionStep):
    """Inject users following a Poisson process whose rate ramps linearly.

    Arrivals are sampled with Lewis and Shedler's thinning algorithm: a
    homogeneous candidate process runs at ``max(start_rate, end_rate)`` and
    each candidate at time t is kept with probability ``rate(t) / max_rate``.
    Candidate gaps are ``-ln(U) / max_rate`` for a uniform draw U; a draw of
    exactly 0 is skipped.

    The number of users is random, but a given ``seed`` always reproduces the
    same arrivals: every call to ``offsets``/``schedule``/``total_users``
    replays the process from a fresh ``Random(seed)``.
    """

    duration_sec: float
    start_rate: float
    end_rate: float
    seed: int

    def __post_init__(self) -> None:
        require_rates(self.duration_sec, self.start_rate, self.end_rate)
        require(isinstance(self.seed, int), f"seed ({self.seed!r}) must be an int")

    @property
    def total_users(self) -> int:
        users = sum(1 for _ in self.offsets())
        logger.debug("Poisson seed=%d realized %d users", self.seed, users)
        return users

    @property
    def duration_ms(self) -> int:
        return duration_to_ms(self.duration_sec)

    def offsets(self) -> Iterator[int]:
        if self.start_rate == 0 and self.end_rate == 0:
            return iter(())
        return (round_half_up(t * MILLIS_PER_SECOND) for t in self.arrival_times())

    def rate_at(self, t_sec: float) -> float:
        return self.start_rate + (self.end_rate - self.start_rate) * t_sec / self.duration_sec

    def arrival_times(self) -> Iterator[float]:
        """Accepted arrival times, in seconds, before rounding."""
        rng = Random(self.seed)
        max_rate = max(self.start_rate, self.end_rate)
        if max_rate == 0:
            return
        clock = 0.0
        while True:
            u = rng.random()
            if u == 0.0:
                continue
            clock += -math.log(u) / max_rate
            if clock >= self.duration_sec:
                return
            if rng.random() < self.rate_at(clock) / max_rate:
                yield clock
