#!/usr/bin/env python3
import argparse, logging, sys, time
from dataclasses import replace

from mazecarve.config import MazeConfig
from mazecarve.errors import MazeError
from mazecarve.mapgen.generator import generate_maze
from mazecarve.render.raster import render_pixels
from mazecarve.render.image import save_png
from mazecarve.render.text import render_text

log = logging.getLogger("mazetool")

def build_config(args) -> MazeConfig:
    cfg = MazeConfig.from_env()
    overrides = {
        k: v for k, v in (
            ("width", args.width), ("height", args.height),
            ("wall_thickness", getattr(args, "wall", None)),
            ("open_space", getattr(args, "space", None)),
            ("seed", args.seed),
        ) if v is not None
    }
    return replace(cfg, **overrides).validate()

def generate(cfg: MazeConfig):
    t0 = time.perf_counter()
    grid, seed = generate_maze(cfg.width, cfg.height, cfg.seed)
    log.info("Generated %dx%d maze (seed=%d) in %.3fs", grid.width, grid.height, seed, time.perf_counter() - t0)
    return grid, seed

def cmd_png(args):
    cfg = build_config(args)
    grid, _ = generate(cfg)
    t0 = time.perf_counter()
    buf = render_pixels(grid, cfg.wall_thickness, cfg.open_space)
    save_png(buf, args.out)
    log.info("Wrote %s (%dx%d px) in %.3fs", args.out, buf.width, buf.height, time.perf_counter() - t0)

def cmd_text(args):
    cfg = build_config(args)
    grid, _ = generate(cfg)
    sys.stdout.write(render_text(grid))

def main(argv=None):
    p = argparse.ArgumentParser(description="Generate perfect mazes.")
    p.add_argument('-v', '--verbose', action='store_true', help="Debug logging")
    sub = p.add_subparsers(dest='cmd', required=True)

    def common(sp):
        sp.add_argument('--width', type=int, help="Columns (default 32)")
        sp.add_argument('--height', type=int, help="Rows (default 32)")
        sp.add_argument('--seed', type=int, help="Reproduce a previous maze")

    p1 = sub.add_parser('png')
    common(p1)
    p1.add_argument('--wall', type=int, help="Wall thickness in pixels (default 8)")
    p1.add_argument('--space', type=int, help="Corridor width in pixels (default 24)")
    p1.add_argument('--out', type=str, default="maze.png")
    p1.set_defaults(func=cmd_png)
    p2 = sub.add_parser('text')
    common(p2)
    p2.set_defaults(func=cmd_text)

    args = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    try:
        args.func(args)
    except (MazeError, ValueError) as e:
        raise SystemExit(f"mazetool: {e}")

if __name__ == '__main__':
    main()
