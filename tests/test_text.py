from mazecarve.grid import Grid
from mazecarve.mapgen.generator import generate_maze
from mazecarve.render.text import render_text

def test_single_cell():
    assert render_text(Grid.create(1, 1)) == "+--+\n|  |\n+--+\n"

def test_open_edges_show_as_spaces():
    g = Grid.create(2, 2)
    g.set_wall_right(0, 0, False)
    g.set_wall_down(1, 0, False)
    assert render_text(g) == (
        "+--+--+\n"
        "|     |\n"
        "+--+  +\n"
        "|  |  |\n"
        "+--+--+\n"
    )

def test_open_rim():
    g = Grid.create(2, 1)
    g.set_wall_up(1, 0, False)
    g.set_wall_left(0, 0, False)
    assert render_text(g) == "+--+  +\n   |  |\n+--+--+\n"

def test_shape_of_generated_maze():
    g, _ = generate_maze(7, 4, seed=3)
    lines = render_text(g).splitlines()
    assert len(lines) == 2 * 4 + 1
    assert all(len(line) == 3 * 7 + 1 for line in lines)
