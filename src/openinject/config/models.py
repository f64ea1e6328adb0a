from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Mapping


class ProfileType(str, Enum):
    AT_ONCE = "at_once"
    NOTHING_FOR = "nothing_for"
    RAMP = "ramp"
    CONSTANT_RATE = "constant_rate"
    RAMP_RATE = "ramp_rate"
    HEAVISIDE = "heaviside"
    POISSON = "poisson"
    SPLIT = "split"


@dataclass(frozen=True, slots=True)
class ProfileConfig:
    profile_type: ProfileType
    params: Mapping[str, Any]

    def to_metadata(self) -> Mapping[str, Any]:
        params: dict[str, Any] = {}
        for key, value in self.params.items():
            params[key] = value.to_metadata() if isinstance(value, ProfileConfig) else value
        return {"type": self.profile_type.value, "params": params}


@dataclass(frozen=True, slots=True)
class InjectionConfig:
    steps: tuple[ProfileConfig, ...]
    seed: int = 7
    randomize: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    notes: str = ""

    def to_metadata(self) -> Mapping[str, Any]:
        return {
            "created_at": self.created_at.isoformat(),
            "seed": self.seed,
            "randomize": self.randomize,
            "notes": self.notes,
            "steps": [step.to_metadata() for step in self.steps],
        }
