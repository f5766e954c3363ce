from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple

from .errors import InvalidDimension, OutOfRange

Cell = Tuple[int, int]

@dataclass
class Grid:
    """
    Wall store for a width×height cell grid.

    Each edge is held exactly once, so the two sides of an interior wall can
    never disagree:
      - right[i]    wall on the right of cell i (last column = outer rim)
      - down[i]     wall below cell i (last row = outer rim)
      - left_rim[y] outer wall left of column 0
      - top_rim[x]  outer wall above row 0
    Left/up queries on interior cells read the neighbour's right/down entry.
    True means the wall is present.
    """
    width: int
    height: int
    right: List[bool] = field(default_factory=list, repr=False)
    down: List[bool] = field(default_factory=list, repr=False)
    left_rim: List[bool] = field(default_factory=list, repr=False)
    top_rim: List[bool] = field(default_factory=list, repr=False)

    def __post_init__(self):
        for name in ("width", "height"):
            v = getattr(self, name)
            if not isinstance(v, int) or isinstance(v, bool) or v <= 0:
                raise InvalidDimension(f"{name} must be a positive integer, got {v!r}")
        n = self.width * self.height
        if not self.right:
            self.right = [True] * n
        if not self.down:
            self.down = [True] * n
        if not self.left_rim:
            self.left_rim = [True] * self.height
        if not self.top_rim:
            self.top_rim = [True] * self.width

    @classmethod
    def create(cls, width: int, height: Optional[int] = None) -> "Grid":
        """Fully walled grid; `height` defaults to `width` (square)."""
        return cls(width=width, height=width if height is None else height)

    # --- coordinates ---

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def idx(self, x: int, y: int) -> int:
        if not self.in_bounds(x, y):
            raise OutOfRange(f"cell ({x}, {y}) outside {self.width}x{self.height} grid")
        return y * self.width + x

    def cells(self) -> Iterator[Cell]:
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y)

    # --- bulk ---

    def set_all_walls(self, present: bool = True) -> None:
        n = self.width * self.height
        self.right = [present] * n
        self.down = [present] * n
        self.left_rim = [present] * self.height
        self.top_rim = [present] * self.width

    def copy(self) -> "Grid":
        return Grid(
            self.width, self.height,
            self.right[:], self.down[:], self.left_rim[:], self.top_rim[:],
        )

    # --- queries ---

    def can_go_left(self, x: int, y: int) -> bool:
        i = self.idx(x, y)
        if x == 0:
            return not self.left_rim[y]
        return not self.right[i - 1]

    def can_go_right(self, x: int, y: int) -> bool:
        return not self.right[self.idx(x, y)]

    def can_go_up(self, x: int, y: int) -> bool:
        i = self.idx(x, y)
        if y == 0:
            return not self.top_rim[x]
        return not self.down[i - self.width]

    def can_go_down(self, x: int, y: int) -> bool:
        return not self.down[self.idx(x, y)]

    # --- mutators (mirrored side shares the same slot) ---

    def set_wall_left(self, x: int, y: int, present: bool) -> None:
        i = self.idx(x, y)
        if x == 0:
            self.left_rim[y] = present
        else:
            self.right[i - 1] = present

    def set_wall_right(self, x: int, y: int, present: bool) -> None:
        self.right[self.idx(x, y)] = present

    def set_wall_up(self, x: int, y: int, present: bool) -> None:
        i = self.idx(x, y)
        if y == 0:
            self.top_rim[x] = present
        else:
            self.down[i - self.width] = present

    def set_wall_down(self, x: int, y: int, present: bool) -> None:
        self.down[self.idx(x, y)] = present

    # --- graph view ---

    def open_edges(self) -> Iterator[Tuple[Cell, Cell]]:
        """Every open interior edge once, as (cell, right-or-lower neighbour)."""
        last_x, last_y = self.width - 1, self.height - 1
        for x, y in self.cells():
            if x < last_x and self.can_go_right(x, y):
                yield (x, y), (x + 1, y)
            if y < last_y and self.can_go_down(x, y):
                yield (x, y), (x, y + 1)

    def neighbours(self, x: int, y: int) -> List[Cell]:
        """In-grid cells reachable from (x, y) through one open edge."""
        out = []
        if x > 0 and self.can_go_left(x, y):
            out.append((x - 1, y))
        if x < self.width - 1 and self.can_go_right(x, y):
            out.append((x + 1, y))
        if y > 0 and self.can_go_up(x, y):
            out.append((x, y - 1))
        if y < self.height - 1 and self.can_go_down(x, y):
            out.append((x, y + 1))
        return out
