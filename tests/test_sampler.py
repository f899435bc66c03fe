import random
from unittest.mock import patch

import pytest

from levelwriters.level import Level
from levelwriters.sampler import (
    BasicSampler,
    BurstSampler,
    LevelSampler,
    RandomSampler,
)

SAMPLERS = [
    ("BasicSampler_1", lambda: BasicSampler(n=1), 100, 100, 100),
    ("BasicSampler_5", lambda: BasicSampler(n=5), 100, 20, 20),
    ("RandomSampler", lambda: RandomSampler(5), 100, 10, 30),
    ("BurstSampler", lambda: BurstSampler(burst=20, period=1.0), 100, 20, 20),
    (
        "BurstSamplerNext",
        lambda: BurstSampler(burst=20, period=1.0, next_sampler=BasicSampler(n=5)),
        120,
        40,
        40,
    ),
]


@pytest.mark.parametrize(
    "name, factory, total, want_min, want_max",
    SAMPLERS,
    ids=[case[0] for case in SAMPLERS],
)
def test_samplers(name, factory, total, want_min, want_max):
    random.seed(20240601)
    sampler = factory()
    got = sum(1 for _ in range(total) if sampler.sample(Level(0)))
    assert want_min <= got <= want_max


def test_basic_sampler_keeps_first_and_third():
    sampler = BasicSampler(n=2)
    assert [sampler.sample(Level.NO_LEVEL) for _ in range(4)] == [
        True,
        False,
        True,
        False,
    ]


def test_random_sampler_zero_drops_everything():
    sampler = RandomSampler(0)
    assert not any(sampler.sample(Level.INFO) for _ in range(50))


def test_random_sampler_one_keeps_everything():
    sampler = RandomSampler(1)
    assert all(sampler.sample(Level.INFO) for _ in range(50))


def test_burst_sampler_without_period_uses_next():
    sampler = BurstSampler(burst=5, period=0, next_sampler=BasicSampler(n=2))
    assert [sampler.sample(Level.INFO) for _ in range(4)] == [True, False, True, False]


def test_burst_sampler_without_period_or_next_drops():
    sampler = BurstSampler(burst=5)
    assert not any(sampler.sample(Level.INFO) for _ in range(5))


def test_burst_sampler_resets_after_period():
    sampler = BurstSampler(burst=2, period=1.0)
    ticks = [1_000_000_000, 1_500_000_000, 1_700_000_000, 2_500_000_000]
    with patch("levelwriters.sampler.time.monotonic_ns", side_effect=ticks):
        results = [sampler.sample(Level.INFO) for _ in ticks]
    assert results == [True, True, False, True]


def test_level_sampler_per_level():
    sampler = LevelSampler(info_sampler=BasicSampler(n=2), debug_sampler=RandomSampler(0))
    assert [sampler.sample(Level.INFO) for _ in range(3)] == [True, False, True]
    assert not sampler.sample(Level.DEBUG)
    assert sampler.sample(Level.WARN)
    assert sampler.sample(Level.FATAL)
    assert sampler.sample(Level.NO_LEVEL)


def test_level_sampler_trace_and_error():
    sampler = LevelSampler(trace_sampler=RandomSampler(0), error_sampler=RandomSampler(0))
    assert not sampler.sample(Level.TRACE)
    assert not sampler.sample(Level.ERROR)
    assert sampler.sample(Level.PANIC)