"""Pathfinder Visualiser: watch grid search algorithms explore, cell by cell.

Controls:
  1-4         Choose algorithm (Dijkstra / BFS / DFS / A*)
  Space       Start visualising
  R           Reset (new grid, new start/finish)
  W           Build random walls
  C           Clear walls
  Left-drag   Paint walls
  Right-drag  Erase walls
  Escape      Cancel a running replay, or quit
"""
from __future__ import annotations

import argparse
import logging
import sys

import pygame

from game.session import Session
from ui.constants import (
    COLOR_BG,
    COLOR_ERROR,
    COLOR_OK,
    COLOR_WARN,
    FPS,
    compute_layout,
)
from ui.renderer import cell_at, draw_grid
from ui.status import StatusBar
from wayfind_grid import Viewport
from wayfind_search import Strategy

STRATEGY_KEYS: dict[int, Strategy] = {
    pygame.K_1: Strategy.DIJKSTRA,
    pygame.K_2: Strategy.BREADTH_FIRST,
    pygame.K_3: Strategy.DEPTH_FIRST,
    pygame.K_4: Strategy.A_STAR,
}


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Pathfinder Visualiser, a wayfind demo")
    p.add_argument("--viewport", choices=[v.value for v in Viewport], default="desktop",
                   help="Grid size preset (default: desktop)")
    p.add_argument("--seed", type=int, default=None, help="Random seed (default: random)")
    p.add_argument("--algorithm", choices=[s.value for s in Strategy], default="dijkstra",
                   help="Initial algorithm (default: dijkstra)")
    p.add_argument("--density", type=float, default=None,
                   help="Wall density for W, in (0, 1) (default: 0.1)")
    p.add_argument("--log-level", default="WARNING",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args()


def main() -> None:
    args = parse_args()
    logging.basicConfig(
        level=args.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    session = Session(
        Viewport(args.viewport),
        seed=args.seed,
        strategy=Strategy(args.algorithm),
    )
    layout = compute_layout(session.grid.rows, session.grid.cols)
    tile_size = layout["tile_size"]

    pygame.init()
    screen = pygame.display.set_mode((layout["screen_w"], layout["screen_h"]))
    pygame.display.set_caption("Pathfinder Visualiser")
    clock = pygame.time.Clock()
    status = StatusBar()
    status.set("Press Space to start")

    painting: bool | None = None  # wall value being dragged, None when idle

    running = True
    while running:
        dt_ms = clock.tick(FPS)

        # --- Events ---
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                running = False

            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    if session.is_running:
                        session.cancel()
                        status.set("Cancelled", COLOR_WARN)
                    else:
                        running = False
                elif event.key in STRATEGY_KEYS:
                    session.choose(STRATEGY_KEYS[event.key])
                elif event.key == pygame.K_SPACE:
                    if session.start():
                        status.set("Visualising...")
                elif event.key == pygame.K_r:
                    if session.reset():
                        status.set("New grid")
                elif event.key == pygame.K_w:
                    try:
                        added = session.build_walls(args.density)
                    except ValueError as exc:
                        status.set(str(exc), COLOR_ERROR)
                    else:
                        status.set(f"Added {added} walls")
                elif event.key == pygame.K_c:
                    status.set(f"Cleared {session.clear_walls()} walls")

            elif event.type == pygame.MOUSEBUTTONDOWN and event.button in (1, 3):
                painting = event.button == 1
                coord = cell_at(event.pos, session.grid, tile_size)
                if coord is not None:
                    session.paint(coord, painting)

            elif event.type == pygame.MOUSEBUTTONUP:
                painting = None

            elif event.type == pygame.MOUSEMOTION and painting is not None:
                coord = cell_at(event.pos, session.grid, tile_size)
                if coord is not None:
                    session.paint(coord, painting)

        # --- Replay ---
        was_running = session.is_running
        session.update(dt_ms)
        finished = (
            was_running
            and not session.is_running
            and session.run is not None
            and session.replay is not None
            and not session.replay.cancelled
        )
        if finished:
            if session.run.found:
                status.set(f"Path length {len(session.run.path)}", COLOR_OK)
            else:
                status.set("No path: finish is blocked", COLOR_ERROR)

        # --- Render ---
        screen.fill(COLOR_BG)
        draw_grid(screen, session.grid, session.visited, session.path, tile_size)
        status.draw(screen, layout["grid_h"], session.strategy.label)
        pygame.display.flip()

    pygame.quit()
    sys.exit()


if __name__ == "__main__":
    main()
