import random

import pytest

from bigoh.complexity import INVALID
from bigoh.timing import NUM_TRIALS, TimingHarness


def recording_registry(calls: list):
    def alg(n: int, rng: random.Random) -> int:
        calls.append(n)
        return rng.randint(0, 10) + n

    return {1: alg}


def test_run_algorithm_dispatches_and_returns_int():
    harness = TimingHarness(rng=random.Random(0))
    for alg in range(1, 7):
        assert isinstance(harness.run_algorithm(alg, 3), int)


@pytest.mark.parametrize("alg", [0, 7, -3, 100])
def test_run_algorithm_unknown_id_returns_sentinel_without_rng(alg: int):
    rng = random.Random(5)
    state = rng.getstate()
    harness = TimingHarness(rng=rng)
    assert harness.run_algorithm(alg, 10) == INVALID
    assert rng.getstate() == state


def test_time_once_collects_before_clock(fake_clock):
    events = []
    clock = fake_clock([0.25])

    def collect():
        events.append("collect")

    def ticking():
        events.append("clock")
        return clock()

    harness = TimingHarness(rng=random.Random(0), clock=ticking, collect=collect)
    assert harness.time_once(1, 5) == pytest.approx(0.25)
    assert events == ["collect", "clock", "clock"]


def test_time_best_returns_minimum_of_samples(fake_clock):
    laps = [0.5, 0.2, 0.9, 0.3, 0.4]
    calls: list = []
    harness = TimingHarness(
        rng=random.Random(0),
        registry=recording_registry(calls),
        clock=fake_clock(laps),
        collect=lambda: None,
    )
    best = harness.time_best(1, 8)
    assert best == pytest.approx(0.2)
    assert all(best <= lap + 1e-9 for lap in laps)
    assert calls == [8] * NUM_TRIALS


def test_time_best_custom_trials_and_warmup(fake_clock):
    # first lap belongs to the discarded warm-up run
    laps = [0.01, 0.7, 0.6]
    calls: list = []
    collected = []
    harness = TimingHarness(
        rng=random.Random(0),
        registry=recording_registry(calls),
        clock=fake_clock(laps),
        collect=lambda: collected.append(1),
        warmup=1,
    )
    assert harness.time_best(1, 4, trials=2) == pytest.approx(0.6)
    assert len(calls) == 3
    assert len(collected) == 3


def test_time_best_invalid_id_still_times(fake_clock):
    harness = TimingHarness(
        rng=random.Random(0),
        clock=fake_clock([0.0] * NUM_TRIALS),
        collect=lambda: None,
    )
    assert harness.time_best(99, 10) == 0.0


def test_real_clock_durations_non_negative():
    harness = TimingHarness(rng=random.Random(1))
    assert harness.time_once(3, 20) >= 0.0
    assert harness.time_best(1, 50, trials=2) >= 0.0


@pytest.mark.parametrize("kwargs", [{"trials": 0}, {"warmup": -1}])
def test_bad_harness_settings_raise(kwargs):
    with pytest.raises(ValueError):
        TimingHarness(**kwargs)


def test_time_best_zero_trials_raises():
    with pytest.raises(ValueError):
        TimingHarness(rng=random.Random(0)).time_best(1, 5, trials=0)
