from __future__ import annotations

import logging
from typing import Any, Mapping

from openinject.config import InjectionConfig, ProfileConfig, ProfileType
from openinject.errors import ConfigurationError
from openinject.profiles.at_once import AtOnce
from openinject.profiles.base import InjectionStep
from openinject.profiles.chain import Chain
from openinject.profiles.heaviside import Heaviside
from openinject.profiles.nothing_for import NothingFor
from openinject.profiles.poisson import Poisson
from openinject.profiles.ramp import ConstantRate, Ramp, RampRate
from openinject.profiles.split import Split

logger = logging.getLogger(__name__)

_SIMPLE_PROFILES: Mapping[ProfileType, type[InjectionStep]] = {
    ProfileType.AT_ONCE: AtOnce,
    ProfileType.NOTHING_FOR: NothingFor,
    ProfileType.RAMP: Ramp,
    ProfileType.CONSTANT_RATE: ConstantRate,
    ProfileType.RAMP_RATE: RampRate,
    ProfileType.HEAVISIDE: Heaviside,
}


def profile_for(config: ProfileConfig | Mapping[str, Any], seed: int) -> InjectionStep:
    config = _as_profile_config(config)
    params = dict(config.params)
    if config.profile_type is ProfileType.POISSON:
        params.setdefault("seed", seed)
        profile = _coerce(Poisson, params)
    elif config.profile_type is ProfileType.SPLIT:
        for key in ("step", "separator"):
            if key not in params:
                msg = f"split requires a '{key}' profile"
                raise ConfigurationError(msg)
            params[key] = profile_for(params[key], seed)
        profile = _coerce(Split, params)
    elif config.profile_type in _SIMPLE_PROFILES:
        profile = _coerce(_SIMPLE_PROFILES[config.profile_type], params)
    else:
        msg = f"Unsupported profile type: {config.profile_type}"
        raise ConfigurationError(msg)
    logger.debug("Built %r", profile)
    return profile


def injection_for(config: InjectionConfig) -> Chain:
    steps = []
    for step_config in config.steps:
        step = profile_for(step_config, config.seed)
        if config.randomize and isinstance(step, (ConstantRate, RampRate)):
            step = step.randomized(config.seed)
        steps.append(step)
    return Chain(tuple(steps))


def _as_profile_config(config: ProfileConfig | Mapping[str, Any]) -> ProfileConfig:
    if isinstance(config, ProfileConfig):
        return config
    try:
        profile_type = ProfileType(config["type"])
    except (KeyError, ValueError) as exc:
        msg = f"Invalid profile definition: {dict(config)!r}"
        raise ConfigurationError(msg) from exc
    return ProfileConfig(profile_type, config.get("params", {}))


def _coerce(cls: type[InjectionStep], params: Mapping[str, Any]) -> InjectionStep:
    try:
        return cls(**params)
    except TypeError as exc:
        msg = f"Invalid parameters for {cls.__name__}: {exc}"
        raise ConfigurationError(msg) from exc
