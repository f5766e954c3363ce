# src/mazecarve/mapgen/generator.py
# Canonical entry point: build a grid, seed the RNG, carve.

import logging
from typing import Optional, Tuple

from ..grid import Grid
from ..rng import PMRandom, fresh_seed, seed_state
from .carve import carve_maze

log = logging.getLogger(__name__)


def generate_maze(width: int, height: Optional[int] = None, seed: Optional[int] = None) -> Tuple[Grid, int]:
    """
    Return (grid, seed). The seed is the normalized value actually fed to the
    RNG, so generate_maze(w, h, seed) reproduces the same maze.
    """
    grid = Grid.create(width, height)
    seed = fresh_seed() if seed is None else seed_state(seed)
    carved = carve_maze(grid, PMRandom(seed))
    log.debug("generated %dx%d maze, seed=%d, carved=%d", grid.width, grid.height, seed, carved)
    return grid, seed
