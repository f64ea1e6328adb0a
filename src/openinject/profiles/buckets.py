"""Second/millisecond bucket generator behind the rate-based profiles.

Each second's user count is spread over its 1000 millisecond buckets with the
even partition, so users sharing a second are not launched on the same tick.
"""

from __future__ import annotations

from itertools import repeat
from typing import Iterable, Iterator

from openinject.numerics import partition
from openinject.profiles.base import MILLIS_PER_SECOND


def bucket_offsets(users_per_second: Iterable[int]) -> Iterator[int]:
    """Yield one offset (ms) per user, seconds and buckets in ascending order.

    ``users_per_second`` is consumed lazily, one second at a time, so a
    stateful count source only advances as far as the consumer pulls.
    """
    for second, users in enumerate(users_per_second):
        if users <= 0:
            continue
        second_ms = second * MILLIS_PER_SECOND
        for millis, bucket in enumerate(partition(users, MILLIS_PER_SECOND)):
            if bucket:
                yield from repeat(second_ms + millis, bucket)
