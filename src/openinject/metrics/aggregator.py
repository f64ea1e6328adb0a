from __future__ import annotations

from typing import Iterable

import numpy as np

from openinject.metrics.models import PerSecondArrivals, ScheduleSummary
from openinject.profiles.base import MILLIS_PER_SECOND


def aggregate_per_second(
    offsets_ms: Iterable[int],
    duration_sec: int | None = None,
) -> list[PerSecondArrivals]:
    """Count the users launched in each second of a schedule.

    The schedule is consumed entirely. With ``duration_sec`` the result covers
    exactly that many seconds (trailing idle seconds included, later arrivals
    dropped); otherwise it stops at the last arrival.
    """
    seconds = _to_array(offsets_ms) // MILLIS_PER_SECOND
    length = int(seconds[-1]) + 1 if seconds.size else 0
    if duration_sec is not None:
        seconds = seconds[seconds < duration_sec]
        length = duration_sec
    counts = np.bincount(seconds, minlength=length)
    return [PerSecondArrivals(second=second, users=int(users)) for second, users in enumerate(counts)]


def summarize(offsets_ms: Iterable[int]) -> ScheduleSummary:
    offsets = _to_array(offsets_ms)
    if offsets.size == 0:
        return ScheduleSummary(
            total_users=0,
            first_offset_ms=None,
            last_offset_ms=None,
            p50_ms=0.0,
            p95_ms=0.0,
            p99_ms=0.0,
            peak_users_per_sec=0,
        )
    per_second = np.bincount(offsets // MILLIS_PER_SECOND)
    return ScheduleSummary(
        total_users=int(offsets.size),
        first_offset_ms=int(offsets.min()),
        last_offset_ms=int(offsets.max()),
        p50_ms=float(np.percentile(offsets, 50)),
        p95_ms=float(np.percentile(offsets, 95)),
        p99_ms=float(np.percentile(offsets, 99)),
        peak_users_per_sec=int(per_second.max()),
    )


def _to_array(offsets_ms: Iterable[int]) -> np.ndarray:
    return np.fromiter(offsets_ms, dtype=np.int64)
