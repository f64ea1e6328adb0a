from __future__ import annotations

import json

import pytest

from openinject.cli import main


def test_cli_prints_offsets(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--step", "nothing_for:duration_sec=1", "--step", "at_once:users=2"])
    assert capsys.readouterr().out.split() == ["1000", "1000"]


def test_cli_limit(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--step", "ramp:users=1000000,duration_sec=60", "--limit", "3"])
    assert len(capsys.readouterr().out.split()) == 3


def test_cli_summary(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--step", "ramp:users=20,duration_sec=2", "--summary"])
    out = capsys.readouterr().out
    assert "total_users: 20" in out
    assert "peak_users_per_sec: 10" in out


def test_cli_randomize_is_seeded(capsys: pytest.CaptureFixture[str]) -> None:
    args = ["--step", "constant_rate:rate=5,duration_sec=10", "--randomize", "--seed", "3"]
    main(args)
    first = capsys.readouterr().out
    main(args)
    assert capsys.readouterr().out == first


def test_cli_compare_randomized(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--step", "ramp_rate:start_rate=10,end_rate=10,duration_sec=30", "--compare-randomized"])
    out = capsys.readouterr().out
    assert out.strip()


@pytest.mark.parametrize(
    "step",
    ["sawtooth:users=1", "ramp:users", "ramp:users=-1,duration_sec=1", "at_once:userz=3"],
)
def test_cli_rejects_bad_steps(step: str) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--step", step])
    assert exc.value.code == 2


def test_cli_rejects_fractional_users() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--step", "at_once:users=2.0"])
    assert exc.value.code == 2


def test_cli_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit) as exc:
        main(["--step", "at_once:users=1", "--log-level", "loud"])
    assert exc.value.code == 2


@pytest.mark.parametrize(
    "steps, expected_users",
    [
        (["nothing_for:duration_sec=2", "at_once:users=2"], 2),
        (["at_once:users=3"], 3),
        (["ramp:users=4,duration_sec=2", "at_once:users=5"], 9),
    ],
)
def test_cli_summary_table_keeps_every_arrival(
    capsys: pytest.CaptureFixture[str], steps: list[str], expected_users: int
) -> None:
    argv = [arg for step in steps for arg in ("--step", step)]
    main([*argv, "--summary"])
    lines = capsys.readouterr().out.splitlines()
    header = lines.index(next(line for line in lines if line.split() == ["second", "users"]))
    rows = [line.split() for line in lines[header + 1 :]]
    assert sum(int(users) for _, users in rows) == expected_users


def test_cli_summary_prints_config_metadata(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--step", "at_once:users=1", "--seed", "13", "--summary"])
    config_line = next(line for line in capsys.readouterr().out.splitlines() if line.startswith("config: "))
    meta = json.loads(config_line.removeprefix("config: "))
    assert meta["seed"] == 13
    assert meta["steps"] == [{"type": "at_once", "params": {"users": 1}}]
