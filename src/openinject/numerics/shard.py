"""Even partitioning of a count into ordered buckets.

Bucket ``i`` of ``parts`` receives ``floor(total*(i+1)/parts) -
floor(total*i/parts)`` units. Sizes differ by at most one and the remainder is
spread across the whole range (Bresenham style) instead of being piled onto
the first buckets, so 3 users over 1000 ms land at 333, 666 and 999 ms.
"""

from __future__ import annotations

from typing import Iterator


def partition_at(total: int, index: int, parts: int) -> int:
    _check(total, parts)
    if index < 0 or index >= parts:
        msg = f"index ({index}) must be in [0, {parts})"
        raise ValueError(msg)
    return (total * (index + 1)) // parts - (total * index) // parts


def partition(total: int, parts: int) -> Iterator[int]:
    _check(total, parts)
    return _cumulative_steps(total, parts)


def _cumulative_steps(total: int, parts: int) -> Iterator[int]:
    previous = 0
    for index in range(1, parts + 1):
        cumulative = (total * index) // parts
        yield cumulative - previous
        previous = cumulative


def _check(total: int, parts: int) -> None:
    if parts <= 0:
        msg = f"parts ({parts}) must be > 0"
        raise ValueError(msg)
    if total < 0:
        msg = f"total ({total}) must be >= 0"
        raise ValueError(msg)
