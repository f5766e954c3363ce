import os

from PIL import Image

from mazecarve.grid import Grid
from mazecarve.mapgen.carve import carve_maze
from mazecarve.render.image import save_png, to_image
from mazecarve.render.raster import render_pixels
from mazecarve.rng import PMRandom

def make_buf(w=4, h=3, t=2, s=3, seed=17):
    g = Grid.create(w, h)
    carve_maze(g, PMRandom(seed))
    return render_pixels(g, t, s)

def test_to_image_is_bilevel_copy():
    buf = make_buf()
    img = to_image(buf)
    assert img.mode == "1"
    assert img.size == (buf.width, buf.height)
    for y in range(buf.height):
        for x in range(buf.width):
            assert img.getpixel((x, y)) == buf.get(x, y)

def test_save_png_roundtrip(tmp_path):
    buf = make_buf()
    path = save_png(buf, os.path.join(str(tmp_path), "nested", "maze.png"))
    assert os.path.exists(path)
    with Image.open(path) as img:
        assert img.size == (buf.width, buf.height)
        assert img.convert("L").tobytes() == buf.tobytes()
