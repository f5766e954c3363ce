# src/mazecarve/render/text.py
from typing import List

from ..grid import Grid

def render_text(grid: Grid) -> str:
    """
    Character-grid view: '+' posts, '--' horizontal walls, '|' vertical walls,
    two columns per cell.
    """
    lines: List[str] = []
    lines.append("".join("+--" if not grid.can_go_up(x, 0) else "+  "
                         for x in range(grid.width)) + "+")
    for y in range(grid.height):
        row = []
        for x in range(grid.width):
            row.append(" " if grid.can_go_left(x, y) else "|")
            row.append("  ")
        row.append(" " if grid.can_go_right(grid.width - 1, y) else "|")
        lines.append("".join(row))

        row = []
        for x in range(grid.width):
            row.append("+")
            row.append("  " if grid.can_go_down(x, y) else "--")
        row.append("+")
        lines.append("".join(row))
    return "\n".join(lines) + "\n"
