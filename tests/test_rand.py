"""Facade behaviour: reference values from a seed-10 Mersenne Twister and distribution laws."""

import logging
import math

import pytest

import rnglib
from rnglib import (
    AmountExceedsPopulationError,
    Closed,
    MersenneTwister,
    Random,
    SampleError,
    XORShift32,
    XORShift64,
    XORShift128,
    XORShift128Plus,
)
from rnglib.clock import fixed_clock

WORDS = ["This", "is", "a", "test"]

GENERATORS = [
    (MersenneTwister, 10),
    (XORShift32, 10),
    (XORShift64, 10),
    (XORShift128, 10),
    (XORShift128Plus, (10, 20)),
]


@pytest.fixture
def rng():
    return Random.from_seed(MersenneTwister, 10)


def test_randrange(rng):
    assert rng.randrange(range(0, 10)) == 6


def test_random(rng):
    assert rng.random() == 0.6555146273820462


def test_uniform(rng):
    assert rng.uniform(1, 2) == 1.6555146273820462


def test_triangular(rng):
    assert rng.triangular(1, 7, 4) == 4.5098721504462524


def test_randbytes(rng):
    assert rng.randbytes(4) == bytes([126, 210, 236, 124])


def test_choose(rng):
    assert rng.choose(WORDS) == "a"


def test_shuffle(rng):
    words = list(WORDS)
    rng.shuffle(words)
    assert words == ["is", "This", "test", "a"]


def test_sample_returns_elements_in_population_order(rng):
    assert rng.sample(WORDS, 2) == ["This", "a"]


def test_randrange_accepts_int_and_shapes(rng):
    assert rng.randrange(10) == 6
    assert Random.from_seed(MersenneTwister, 10).randrange(Closed(0, 255)) == 126


@pytest.mark.parametrize("case", GENERATORS, ids=lambda case: case[0].__name__)
def test_random_stays_in_unit_interval(case):
    cls, seed = case
    rng = Random.from_seed(cls, seed)
    for _ in range(10_000):
        value = rng.random()
        assert 0.0 <= value < 1.0


@pytest.mark.parametrize("case", GENERATORS, ids=lambda case: case[0].__name__)
def test_shuffle_is_a_permutation(case):
    cls, seed = case
    rng = Random.from_seed(cls, seed)
    for length in (0, 1, 2, 5, 31, 100):
        items = list(range(length))
        for _ in range(5):
            rng.shuffle(items)
            assert sorted(items) == list(range(length))


def test_shuffle_moves_elements():
    rng = Random.from_seed(XORShift64, 99)
    items = list(range(50))
    rng.shuffle(items)
    assert items != list(range(50))


# XORShift128Plus cycles within 16 draws, too few distinct positions for rejection sampling.
@pytest.mark.parametrize("case", GENERATORS[:4], ids=lambda case: case[0].__name__)
def test_sample_picks_distinct_positions(case):
    cls, seed = case
    rng = Random.from_seed(cls, seed)
    population = list(range(20))
    for amount in (0, 1, 7, 20):
        picked = rng.sample(population, amount)
        assert len(picked) == amount
        assert len(set(picked)) == amount
        assert picked == sorted(picked)


def test_sample_whole_population():
    rng = Random.from_seed(XORShift32, 3)
    assert rng.sample("abcde", 5) == list("abcde")


def test_sample_larger_than_population_fails(rng):
    with pytest.raises(AmountExceedsPopulationError) as excinfo:
        rng.sample(WORDS, 5)
    assert excinfo.value.amount == 5
    assert excinfo.value.population == 4
    assert isinstance(excinfo.value, SampleError)
    assert isinstance(excinfo.value, ValueError)


def test_sample_from_empty_population():
    rng = Random.from_seed(XORShift32, 3)
    assert rng.sample([], 0) == []
    with pytest.raises(ValueError):
        rng.sample(WORDS, -1)


def test_choose_from_empty_sequence_fails(rng):
    with pytest.raises(IndexError):
        rng.choose([])


def test_choose_covers_every_element():
    rng = Random.from_seed(MersenneTwister, 7)
    seen = {rng.choose(WORDS) for _ in range(200)}
    assert seen == set(WORDS)


def test_randbytes_edge_counts(rng):
    assert rng.randbytes(0) == b""
    with pytest.raises(ValueError):
        rng.randbytes(-1)


def test_randbytes_cover_byte_range():
    rng = Random.from_seed(XORShift64, 5)
    data = rng.randbytes(4096)
    assert len(data) == 4096
    assert min(data) < 16
    assert max(data) > 239


def test_uniform_bounds_and_floats():
    rng = Random.from_seed(XORShift32, 17)
    for _ in range(1000):
        value = rng.uniform(-2.5, 3.5)
        assert -2.5 <= value <= 3.5
    with pytest.raises(ValueError):
        rng.uniform(2, 1)


def test_triangular_bounds():
    rng = Random.from_seed(MersenneTwister, 42)
    values = [rng.triangular(1, 7, 2) for _ in range(2000)]
    assert all(1.0 <= value <= 7.0 for value in values)
    mean = sum(values) / len(values)
    assert mean == pytest.approx((1 + 7 + 2) / 3, abs=0.2)


def test_triangular_degenerate_and_invalid():
    rng = Random.from_seed(XORShift32, 17)
    assert rng.triangular(3, 3, 3) == 3.0
    with pytest.raises(ValueError):
        rng.triangular(1, 7, 9)


def test_random_mean_is_near_half():
    rng = Random.from_seed(XORShift64, 2024)
    values = [rng.random() for _ in range(10_000)]
    assert math.fsum(values) / len(values) == pytest.approx(0.5, abs=0.02)


def test_from_clock_matches_explicit_seed():
    clock = fixed_clock(1_700_000_000_123_456_789)
    from_clock = Random.from_clock(MersenneTwister, clock)
    seeded = Random.from_seed(MersenneTwister, 123456)
    assert from_clock.randbytes(16) == seeded.randbytes(16)
    assert from_clock.domain is MersenneTwister.domain


def test_random_factory_with_seed():
    rng = rnglib.random(10)
    assert isinstance(rng.algorithm, MersenneTwister)
    assert rng.randrange(range(0, 10)) == 6


def test_random_factory_falls_back_on_rejected_seed(caplog):
    clock = fixed_clock(1_700_000_000_000_000_042)
    with caplog.at_level(logging.WARNING, logger="rnglib.rand"):
        rng = rnglib.random(-1, clock=clock)
    assert "Falling back" in caplog.text
    expected = Random.from_seed(MersenneTwister, 0)
    assert rng.randbytes(8) == expected.randbytes(8)


def test_random_factory_without_seed():
    rng = rnglib.random()
    assert 0.0 <= rng.random() < 1.0
