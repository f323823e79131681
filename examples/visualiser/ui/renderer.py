"""Grid rendering."""
from __future__ import annotations

import pygame

from wayfind_grid import Coord, Grid

from ui.constants import (
    COLOR_EMPTY,
    COLOR_FINISH,
    COLOR_GRID_LINE,
    COLOR_PATH,
    COLOR_START,
    COLOR_VISITED,
    COLOR_WALL,
)


def draw_grid(
    surface: pygame.Surface,
    grid: Grid,
    visited: set[Coord],
    path: set[Coord],
    tile_size: int,
) -> None:
    """Draw every cell, layering path over visited over the base layout."""
    for cell in grid:
        coord = cell.coord
        if cell.is_start:
            color = COLOR_START
        elif cell.is_finish:
            color = COLOR_FINISH
        elif cell.is_wall:
            color = COLOR_WALL
        elif coord in path:
            color = COLOR_PATH
        elif coord in visited:
            color = COLOR_VISITED
        else:
            color = COLOR_EMPTY
        rect = pygame.Rect(cell.col * tile_size, cell.row * tile_size, tile_size, tile_size)
        pygame.draw.rect(surface, color, rect)
        pygame.draw.rect(surface, COLOR_GRID_LINE, rect, 1)


def cell_at(pos: tuple[int, int], grid: Grid, tile_size: int) -> Coord | None:
    """Map a mouse position to a grid coordinate, or None outside the grid."""
    coord = (pos[1] // tile_size, pos[0] // tile_size)
    if grid.in_bounds(coord):
        return coord
    return None
