from __future__ import annotations

from openinject.config.models import InjectionConfig, ProfileConfig, ProfileType

__all__ = [
    "InjectionConfig",
    "ProfileConfig",
    "ProfileType",
]
