from __future__ import annotations

import argparse
import json
import logging
from dataclasses import asdict, replace
from itertools import islice
from typing import Any, Sequence

from openinject.analysis import arrivals_frame, compare_schedules
from openinject.config import InjectionConfig, ProfileConfig, ProfileType
from openinject.errors import ConfigurationError
from openinject.metrics import aggregate_per_second, summarize
from openinject.profiles import Chain, injection_for

logger = logging.getLogger(__name__)


def _parse_value(raw: str) -> Any:
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def _parse_step(text: str) -> ProfileConfig:
    """Parse ``type:key=value,key=value`` into a profile config."""
    name, _, raw_params = text.partition(":")
    try:
        profile_type = ProfileType(name.strip())
    except ValueError as exc:
        choices = ", ".join(t.value for t in ProfileType)
        msg = f"unknown profile type {name!r} (expected one of: {choices})"
        raise ConfigurationError(msg) from exc
    params: dict[str, Any] = {}
    for item in filter(None, raw_params.split(",")):
        key, sep, value = item.partition("=")
        if not sep or not key.strip():
            msg = f"malformed parameter {item!r} in step {text!r}"
            raise ConfigurationError(msg)
        params[key.strip()] = _parse_value(value.strip())
    return ProfileConfig(profile_type, params)


def _print_summary(config: InjectionConfig, chain: Chain) -> None:
    print(f"config: {json.dumps(config.to_metadata())}")
    summary = summarize(chain.schedule())
    for key, value in asdict(summary).items():
        print(f"{key}: {value}")
    duration_sec = -(-chain.duration_ms // 1000)
    if summary.last_offset_ms is not None:
        duration_sec = max(duration_sec, summary.last_offset_ms // 1000 + 1)
    frame = arrivals_frame(aggregate_per_second(chain.schedule(), duration_sec=duration_sec))
    if not frame.empty:
        print(frame.to_string(index=False))


def _print_comparison(config: InjectionConfig) -> None:
    base = injection_for(replace(config, randomize=False))
    candidate = injection_for(replace(config, randomize=True))
    deviations = compare_schedules(
        arrivals_frame(aggregate_per_second(base.schedule())),
        arrivals_frame(aggregate_per_second(candidate.schedule())),
    )
    if not deviations:
        print("Randomized schedule matches the deterministic one")
    for deviation in deviations:
        print(f"{deviation.metric}: {deviation.delta_pct:+.1f}% ({deviation.message})")


def main(argv: Sequence[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Open-workload injection schedule generator")
    parser.add_argument(
        "--step",
        action="append",
        required=True,
        metavar="TYPE:KEY=VALUE,...",
        help="Injection step, e.g. ramp:users=100,duration_sec=10 (repeat to chain)",
    )
    parser.add_argument("--seed", type=int, default=7)
    parser.add_argument("--randomize", action="store_true", help="Use Poisson arrivals for rate steps")
    parser.add_argument("--limit", type=int, default=None, help="Print at most this many offsets")
    parser.add_argument("--summary", action="store_true", help="Print per-second arrivals instead of offsets")
    parser.add_argument("--compare-randomized", action="store_true")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
    )

    args = parser.parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = InjectionConfig(
            steps=tuple(_parse_step(text) for text in args.step),
            seed=args.seed,
            randomize=args.randomize,
        )
        chain = injection_for(config)
    except ConfigurationError as exc:
        parser.error(str(exc))
    logger.info("Injecting %d steps, seed=%d", len(chain.steps), config.seed)

    if args.compare_randomized:
        _print_comparison(config)
    elif args.summary:
        _print_summary(config, chain)
    else:
        for offset in islice(chain.schedule(), args.limit):
            print(offset)


if __name__ == "__main__":
    main()
