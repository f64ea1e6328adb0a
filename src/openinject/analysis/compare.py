from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

import pandas as pd

from openinject.metrics import PerSecondArrivals


@dataclass(frozen=True, slots=True)
class Deviation:
    metric: str
    delta_pct: float
    message: str


def arrivals_frame(per_second: Iterable[PerSecondArrivals]) -> pd.DataFrame:
    rows = [{"second": p.second, "users": p.users} for p in per_second]
    return pd.DataFrame(rows, columns=["second", "users"])


def compare_schedules(
    base: pd.DataFrame,
    candidate: pd.DataFrame,
    tolerance: float = 0.2,
) -> list[Deviation]:
    """Report where ``candidate`` strays from ``base`` by more than ``tolerance``.

    Both frames hold per-second arrivals (see ``arrivals_frame``); seconds
    missing from one side count as idle.
    """
    deviations: list[Deviation] = []
    if base.empty:
        return deviations
    merged = base.merge(candidate, on="second", how="outer", suffixes=("_base", "_cand"))
    merged = merged.fillna(0).sort_values("second", ignore_index=True)
    base_total = merged["users_base"].sum()
    cand_total = merged["users_cand"].sum()
    if base_total > 0:
        delta = (cand_total - base_total) / base_total
        if abs(delta) > tolerance:
            deviations.append(
                Deviation(
                    metric="total_users",
                    delta_pct=delta * 100,
                    message="total injected users differ",
                )
            )
    base_peak = merged["users_base"].max()
    cand_peak = merged["users_cand"].max()
    if base_peak > 0:
        delta = (cand_peak - base_peak) / base_peak
        if abs(delta) > tolerance:
            deviations.append(
                Deviation(
                    metric="peak_users_per_sec",
                    delta_pct=delta * 100,
                    message="peak arrival rate differs",
                )
            )
    if base_total > 0 and cand_total > 0:
        base_cdf = merged["users_base"].cumsum() / base_total
        cand_cdf = merged["users_cand"].cumsum() / cand_total
        drift = (cand_cdf - base_cdf).abs().max()
        if drift > tolerance:
            deviations.append(
                Deviation(
                    metric="shape",
                    delta_pct=drift * 100,
                    message="arrivals are distributed differently over time",
                )
            )
    return deviations
