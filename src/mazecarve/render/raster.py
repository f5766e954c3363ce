# src/mazecarve/render/raster.py
# Rasterize a finished Grid into a single-channel black/white pixel buffer.

import logging
from dataclasses import dataclass, field
from typing import List

from ..errors import InvalidGeometry
from ..grid import Grid

log = logging.getLogger(__name__)

BLACK = 0
WHITE = 255

@dataclass
class PixelBuffer:
    width: int
    height: int
    rows: List[bytearray] = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not self.rows:
            self.rows = [bytearray([WHITE]) * self.width for _ in range(self.height)]

    def paint_box(self, x: int, y: int, w: int, h: int, value: int = BLACK) -> None:
        assert 0 <= x and x + w <= self.width and 0 <= y and y + h <= self.height, \
            f"box ({x},{y},{w},{h}) outside {self.width}x{self.height}"
        run = bytes([value]) * w
        for row in self.rows[y:y + h]:
            row[x:x + w] = run

    def get(self, x: int, y: int) -> int:
        return self.rows[y][x]

    def count(self, value: int = BLACK) -> int:
        return sum(row.count(value) for row in self.rows)

    def tobytes(self) -> bytes:
        return b"".join(bytes(row) for row in self.rows)


def render_pixels(grid: Grid, wall_thickness: int, open_space: int) -> PixelBuffer:
    """
    Paint walls so every segment and corner post is drawn once:
      - each cell owns the post at its top-left and the walls above / left of it
      - the last column adds its right wall, the last row its bottom wall
      - one final post closes the bottom-right corner
    """
    if wall_thickness < 1 or open_space < 1:
        raise InvalidGeometry(
            f"wall_thickness and open_space must be >= 1, got {wall_thickness} and {open_space}"
        )
    t, s = wall_thickness, open_space
    cell = t + s
    buf = PixelBuffer(grid.width * cell + t, grid.height * cell + t)
    last_x, last_y = grid.width - 1, grid.height - 1
    edge_x, edge_y = grid.width * cell, grid.height * cell

    for y in range(grid.height):
        py = y * cell
        for x in range(grid.width):
            px = x * cell
            buf.paint_box(px, py, t, t)
            if not grid.can_go_up(x, y):
                buf.paint_box(px + t, py, s, t)
            if not grid.can_go_left(x, y):
                buf.paint_box(px, py + t, t, s)
        if not grid.can_go_right(last_x, y):
            buf.paint_box(edge_x, py, t, cell)

    for x in range(grid.width):
        if not grid.can_go_down(x, last_y):
            buf.paint_box(x * cell, edge_y, cell, t)

    buf.paint_box(edge_x, edge_y, t, t)
    log.debug("rendered %dx%d grid to %dx%d pixels", grid.width, grid.height, buf.width, buf.height)
    return buf
