from __future__ import annotations

import math


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties going up (``round(2.5) == 3``)."""
    return math.floor(value + 0.5)
