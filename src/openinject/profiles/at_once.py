from __future__ import annotations

from dataclasses import dataclass
from itertools import repeat
from typing import Iterator

from openinject.profiles.base import InjectionStep, require_users


@dataclass(frozen=True, slots=True)
class AtOnce(InjectionStep):
    """Inject all the users at offset 0."""

    users: int

    def __post_init__(self) -> None:
        require_users(self.users)

    @property
    def total_users(self) -> int:
        return self.users

    @property
    def duration_ms(self) -> int:
        return 0

    def offsets(self) -> Iterator[int]:
        return repeat(0, self.users)
