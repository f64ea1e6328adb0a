from __future__ import annotations

import math
from abc import ABC, abstractmethod
from itertools import chain
from typing import Iterable, Iterator

from openinject.errors import ConfigurationError
from openinject.numerics import round_half_up

MILLIS_PER_SECOND = 1000


class InjectionStep(ABC):
    """One open-model injection profile.

    ``schedule`` yields, lazily and in non-decreasing order, the offset in
    milliseconds from the start of the run at which each user is launched,
    followed by ``continuation`` advanced by this step's own duration.
    """

    __slots__ = ()

    @property
    @abstractmethod
    def total_users(self) -> int:
        ...

    @property
    @abstractmethod
    def duration_ms(self) -> int:
        ...

    @abstractmethod
    def offsets(self) -> Iterator[int]:
        """The step's own offsets, without any continuation."""

    def schedule(self, continuation: Iterable[int] = ()) -> Iterator[int]:
        return chain(self.offsets(), shifted(continuation, self.duration_ms))


def shifted(offsets: Iterable[int], by_ms: int) -> Iterator[int]:
    if by_ms == 0:
        return iter(offsets)
    return (offset + by_ms for offset in offsets)


def duration_to_ms(duration_sec: float) -> int:
    return round_half_up(duration_sec * MILLIS_PER_SECOND)


def require(condition: bool, message: str) -> None:
    if not condition:
        raise ConfigurationError(message)


def require_users(users: int) -> None:
    require(
        isinstance(users, int) and not isinstance(users, bool),
        f"users ({users!r}) must be a whole number",
    )
    require(users >= 0, f"users ({users}) must be >= 0")


def require_duration(duration_sec: float) -> None:
    require(_is_finite(duration_sec), f"duration_sec ({duration_sec!r}) must be a finite number")
    require(duration_sec >= 0, f"duration_sec ({duration_sec}) must be >= 0")


def require_rates(duration_sec: float, *rates: float) -> None:
    require(all(_is_finite(rate) for rate in rates), f"injection rates {rates!r} must be finite numbers")
    require(all(rate >= 0 for rate in rates), f"injection rates {rates} must be >= 0")
    require_duration(duration_sec)
    require(
        not (any(rate > 0 for rate in rates) and duration_sec == 0),
        f"can't inject non 0 rates {rates} for a 0 duration",
    )


def _is_finite(value: float) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)
