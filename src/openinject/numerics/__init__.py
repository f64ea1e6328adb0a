"""Numeric helpers used by the injection profiles."""

from __future__ import annotations

from openinject.numerics.erf import erfinv
from openinject.numerics.rounding import round_half_up
from openinject.numerics.shard import partition, partition_at

__all__ = ["erfinv", "partition", "partition_at", "round_half_up"]
