from __future__ import annotations

from openinject.analysis.compare import Deviation, arrivals_frame, compare_schedules

__all__ = ["Deviation", "arrivals_frame", "compare_schedules"]
