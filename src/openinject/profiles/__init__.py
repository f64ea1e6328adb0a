from __future__ import annotations

from typing import Union

from openinject.profiles.at_once import AtOnce
from openinject.profiles.base import MILLIS_PER_SECOND, InjectionStep, shifted
from openinject.profiles.chain import Chain, injection_schedule, sequence_schedules
from openinject.profiles.factory import injection_for, profile_for
from openinject.profiles.heaviside import Heaviside
from openinject.profiles.nothing_for import NothingFor
from openinject.profiles.poisson import Poisson
from openinject.profiles.ramp import ConstantRate, Ramp, RampRate
from openinject.profiles.split import Split

InjectionProfile = Union[
    AtOnce,
    NothingFor,
    Ramp,
    ConstantRate,
    RampRate,
    Heaviside,
    Poisson,
    Split,
    Chain,
]

__all__ = [
    "MILLIS_PER_SECOND",
    "AtOnce",
    "Chain",
    "ConstantRate",
    "Heaviside",
    "InjectionProfile",
    "InjectionStep",
    "NothingFor",
    "Poisson",
    "Ramp",
    "RampRate",
    "Split",
    "injection_for",
    "injection_schedule",
    "profile_for",
    "sequence_schedules",
    "shifted",
]
