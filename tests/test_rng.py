import pytest

from mazecarve.rng import M, PMRandom, fresh_seed, pm_next, seed_state

def test_seed_state_normalizes():
    assert seed_state(0) == 1
    assert seed_state(M) == 1
    assert seed_state(M + 5) == 5
    assert seed_state(-1) == M - 1
    assert seed_state(42) == 42

def test_minimal_standard_sequence():
    # Park & Miller's published check: seed 1, 10000 steps -> 1043618065
    s = 1
    for _ in range(10000):
        s = pm_next(s)
    assert s == 1043618065
    assert PMRandom(1).next32() == 16807

def test_zero_seed_does_not_stick():
    r = PMRandom(0)
    assert r.next32() != 0

def test_below_range_and_repeatability():
    a, b = PMRandom(1234), PMRandom(1234)
    draws = [a.below(4) for _ in range(500)]
    assert draws == [b.below(4) for _ in range(500)]
    assert set(draws) == {0, 1, 2, 3}
    assert all(PMRandom(9).below(1) == 0 for _ in range(10))

def test_below_rejects_non_positive():
    with pytest.raises(ValueError):
        PMRandom(1).below(0)

def test_fresh_seed_is_valid_state():
    for _ in range(20):
        assert 1 <= fresh_seed() < M
