# src/mazecarve/mapgen/carve.py
# Iterative randomized depth-first carving over a fully walled Grid.

import logging
from typing import List, Tuple

from ..grid import Grid
from ..rng import PMRandom

log = logging.getLogger(__name__)

# Direction codes: 0=Left, 1=Right, 2=Up, 3=Down
LEFT, RIGHT, UP, DOWN = 0, 1, 2, 3
STEPS = {
    LEFT:  (-1, 0),
    RIGHT: ( 1, 0),
    UP:    ( 0,-1),
    DOWN:  ( 0, 1),
}

def _open_wall(grid: Grid, x: int, y: int, d: int) -> None:
    if d == LEFT:
        grid.set_wall_left(x, y, False)
    elif d == RIGHT:
        grid.set_wall_right(x, y, False)
    elif d == UP:
        grid.set_wall_up(x, y, False)
    else:
        grid.set_wall_down(x, y, False)

def carve_maze(grid: Grid, rng: PMRandom) -> int:
    """
    Turn `grid` into a perfect maze in place and return the number of walls
    carved (always width*height - 1).

    Each iteration pops a cell, draws a fresh starting direction d and scans
    d, d+1, d+2, d+3 (mod 4), taking the first in-bounds unvisited neighbour.
    On success the cell goes back on the trail under the neighbour; otherwise
    it is exhausted and dropped. Taking the first hit rather than a uniform
    pick favours long corridors.
    """
    w, h = grid.width, grid.height
    grid.set_all_walls(True)
    visited = [False] * (w * h)
    trail: List[Tuple[int, int]] = []

    sx = rng.below(w)
    sy = rng.below(h)
    visited[sy * w + sx] = True
    trail.append((sx, sy))
    log.debug("carve start %dx%d at (%d, %d)", w, h, sx, sy)

    carved = 0
    while trail:
        x, y = trail.pop()
        d0 = rng.below(4)
        for i in range(4):
            d = (d0 + i) & 3
            dx, dy = STEPS[d]
            nx, ny = x + dx, y + dy
            if not (0 <= nx < w and 0 <= ny < h):
                continue
            if visited[ny * w + nx]:
                continue
            _open_wall(grid, x, y, d)
            visited[ny * w + nx] = True
            trail.append((x, y))
            trail.append((nx, ny))
            carved += 1
            break
        # No neighbour found: (x, y) is exhausted (backtrack)

    log.debug("carve done: %d walls opened", carved)
    return carved
