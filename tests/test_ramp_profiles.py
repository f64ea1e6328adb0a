from __future__ import annotations

from collections import Counter
from itertools import islice

from hypothesis import given, strategies as st

from openinject.profiles import AtOnce, ConstantRate, Poisson, Ramp, RampRate


def _per_second(offsets: list[int], duration_sec: int) -> list[int]:
    counts = Counter(offset // 1000 for offset in offsets)
    return [counts.get(second, 0) for second in range(duration_sec)]


def test_ramp_spreads_users_over_duration() -> None:
    offsets = list(Ramp(100, 10).schedule())
    assert len(offsets) == 100
    assert offsets == sorted(offsets)
    assert all(0 <= offset < 10_000 for offset in offsets)
    per_second = _per_second(offsets, 10)
    assert sum(per_second) == 100
    assert max(per_second) - min(per_second) <= 1


def test_ramp_spreads_users_inside_each_second() -> None:
    assert list(Ramp(7, 3).schedule()) == [499, 999, 1499, 1999, 2333, 2666, 2999]


@given(users=st.integers(min_value=0, max_value=3_000), duration=st.integers(min_value=1, max_value=30))
def test_ramp_invariants(users: int, duration: int) -> None:
    offsets = list(Ramp(users, duration).schedule())
    assert len(offsets) == users
    assert offsets == sorted(offsets)
    assert all(0 <= offset < duration * 1000 for offset in offsets)
    per_second = _per_second(offsets, duration)
    assert max(per_second) - min(per_second) <= 1


def test_ramp_degenerate_cases() -> None:
    assert list(Ramp(0, 3).schedule([0])) == [3000]
    assert list(Ramp(5, 0).schedule([1])) == list(AtOnce(5).schedule([1]))


def test_ramp_sub_second_duration_injects_at_once() -> None:
    assert list(Ramp(4, 0.5).schedule([0])) == [0, 0, 0, 0, 500]


def test_ramp_is_lazy() -> None:
    schedule = Ramp(10_000_000, 3_600).schedule()
    head = list(islice(schedule, 5))
    assert len(head) == 5
    assert head == sorted(head)


def test_ramp_continuation_is_shifted_by_duration() -> None:
    offsets = list(Ramp(10, 2).schedule([0, 10]))
    assert offsets[-2:] == [2000, 2010]


def test_constant_rate_users_and_schedule() -> None:
    profile = ConstantRate(10, 10)
    assert profile.total_users == 100
    assert list(profile.schedule()) == list(Ramp(100, 10).schedule())


def test_constant_rate_rounds_half_up() -> None:
    assert ConstantRate(2.5, 3).total_users == 8
    assert len(list(ConstantRate(2.5, 3).schedule())) == 8


def test_constant_rate_zero_is_a_pause() -> None:
    profile = ConstantRate(0, 5)
    assert profile.total_users == 0
    assert list(profile.schedule([1])) == [5001]


def test_constant_rate_randomized() -> None:
    assert ConstantRate(4, 30).randomized(11) == Poisson(30, 4, 4, seed=11)


def test_ramp_rate_users_per_second() -> None:
    profile = RampRate(0, 10, 10)
    offsets = list(profile.schedule())
    assert profile.total_users == 50
    assert len(offsets) == 50
    assert offsets == sorted(offsets)
    per_second = _per_second(offsets, 10)
    assert per_second == [0, 2, 2, 4, 4, 6, 6, 8, 8, 10]
    assert per_second[0] < per_second[-1]


def test_ramp_rate_decreasing() -> None:
    offsets = list(RampRate(10, 0, 10).schedule())
    per_second = _per_second(offsets, 10)
    assert len(offsets) == 50
    assert per_second == sorted(per_second, reverse=True)


@given(
    start=st.integers(min_value=0, max_value=50),
    end=st.integers(min_value=0, max_value=50),
    duration=st.integers(min_value=1, max_value=60),
)
def test_ramp_rate_emits_exactly_total_users(start: int, end: int, duration: int) -> None:
    profile = RampRate(start, end, duration)
    offsets = list(profile.schedule())
    assert len(offsets) == profile.total_users
    assert offsets == sorted(offsets)
    assert all(0 <= offset < duration * 1000 for offset in offsets)


def test_ramp_rate_zero_rates_is_a_pause() -> None:
    assert list(RampRate(0, 0, 4).schedule([0])) == [4000]


def test_ramp_rate_randomized() -> None:
    assert RampRate(1, 5, 20).randomized(3) == Poisson(20, 1, 5, seed=3)
