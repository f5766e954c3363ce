#!/usr/bin/env python3
# Minimal interactive maze viewer.
# - N: new seed
# - Arrows: widen/narrow (LEFT/RIGHT), taller/shorter (UP/DOWN)
# - T: print the text rendering to stdout
# - S: save the current maze as PNG
# - 60 Hz fixed loop

import argparse, logging, os
from dataclasses import replace

import pygame
from mazecarve.config import MazeConfig
from mazecarve.mapgen.generator import generate_maze
from mazecarve.render.raster import render_pixels
from mazecarve.render.image import save_png
from mazecarve.render.text import render_text
from mazecarve.render.surface import to_surface

log = logging.getLogger("viewer")

MAX_WINDOW = (1280, 960)

def fit_scale(buf) -> int:
    # Largest integer zoom that keeps the window on screen (at least 1)
    return max(1, min(MAX_WINDOW[0] // buf.width, MAX_WINDOW[1] // buf.height))

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--width", type=int, default=16, help="Columns")
    ap.add_argument("--height", type=int, default=12, help="Rows")
    ap.add_argument("--wall", type=int, default=2, help="Wall thickness in pixels")
    ap.add_argument("--space", type=int, default=6, help="Corridor width in pixels")
    ap.add_argument("--seed", type=int, default=None, help="Initial seed")
    ap.add_argument("--outdir", type=str, default="out/png", help="Where S writes PNGs")
    args = ap.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    cfg = replace(
        MazeConfig.from_env(), width=args.width, height=args.height,
        wall_thickness=args.wall, open_space=args.space, seed=args.seed,
    ).validate()

    pygame.init()
    clock = pygame.time.Clock()

    def rebuild(cfg):
        grid, seed = generate_maze(cfg.width, cfg.height, cfg.seed)
        buf = render_pixels(grid, cfg.wall_thickness, cfg.open_space)
        scale = fit_scale(buf)
        surf = to_surface(buf, scale)
        screen = pygame.display.set_mode(surf.get_size())
        pygame.display.set_caption(f"Maze {cfg.width}x{cfg.height}  seed {seed}")
        return grid, seed, buf, surf, screen

    grid, seed, buf, surf, screen = rebuild(cfg)
    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                resized = None
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_n:
                    cfg = replace(cfg, seed=None)
                    grid, seed, buf, surf, screen = rebuild(cfg)
                elif ev.key == pygame.K_RIGHT:
                    resized = replace(cfg, width=cfg.width + 1, seed=seed)
                elif ev.key == pygame.K_LEFT and cfg.width > 1:
                    resized = replace(cfg, width=cfg.width - 1, seed=seed)
                elif ev.key == pygame.K_DOWN:
                    resized = replace(cfg, height=cfg.height + 1, seed=seed)
                elif ev.key == pygame.K_UP and cfg.height > 1:
                    resized = replace(cfg, height=cfg.height - 1, seed=seed)
                elif ev.key == pygame.K_t:
                    print(render_text(grid), end="")
                elif ev.key == pygame.K_s:
                    path = os.path.join(args.outdir, f"maze_{cfg.width}x{cfg.height}_{seed}.png")
                    save_png(buf, path)
                    log.info("Saved %s", path)
                if resized is not None:
                    cfg = resized
                    grid, seed, buf, surf, screen = rebuild(cfg)

        screen.fill((255, 255, 255))
        screen.blit(surf, (0, 0))
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
