from mazecarve.errors import InvalidDimension
from mazecarve.mapgen.generator import generate_maze
from mazecarve.rng import M

import pytest

def test_seed_is_reported_and_reproducible():
    g1, s1 = generate_maze(10, 7, seed=123)
    g2, s2 = generate_maze(10, 7, seed=s1)
    assert s1 == s2 == 123
    assert g1 == g2

def test_seed_is_normalized():
    _, s = generate_maze(3, 3, seed=0)
    assert s == 1
    _, s = generate_maze(3, 3, seed=M + 9)
    assert s == 9

def test_fresh_seed_roundtrip():
    g, seed = generate_maze(9, 4)
    again, _ = generate_maze(9, 4, seed=seed)
    assert set(g.open_edges()) == set(again.open_edges())

def test_square_default():
    g, _ = generate_maze(6, seed=5)
    assert (g.width, g.height) == (6, 6)
    assert len(list(g.open_edges())) == 35

def test_bad_dimensions():
    with pytest.raises(InvalidDimension):
        generate_maze(0, 4, seed=1)
