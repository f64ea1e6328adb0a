from __future__ import annotations

from openinject.metrics.aggregator import aggregate_per_second, summarize
from openinject.metrics.models import PerSecondArrivals, ScheduleSummary

__all__ = ["PerSecondArrivals", "ScheduleSummary", "aggregate_per_second", "summarize"]
