from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class PerSecondArrivals:
    second: int
    users: int


@dataclass(frozen=True, slots=True)
class ScheduleSummary:
    total_users: int
    first_offset_ms: int | None
    last_offset_ms: int | None
    p50_ms: float
    p95_ms: float
    p99_ms: float
    peak_users_per_sec: int
