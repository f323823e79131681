"""Grid - fixed-size 2D cell array with walls and one start/finish pair."""
from __future__ import annotations

import logging
import random
from typing import Iterator

from wayfind_grid.types import Cell, Coord, InvalidLayoutError

logger = logging.getLogger(__name__)

# up, down, left, right
_DIRECTIONS: tuple[Coord, ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))


def _validate_layout(rows: int, cols: int, start: Coord, finish: Coord) -> None:
    def fail(message: str) -> InvalidLayoutError:
        return InvalidLayoutError(
            message, rows=rows, cols=cols, start=start, finish=finish
        )

    if rows <= 0 or cols <= 0:
        raise fail(f"Grid dimensions must be positive, got {rows}x{cols}")
    for name, (r, c) in (("start", start), ("finish", finish)):
        if not (0 <= r < rows and 0 <= c < cols):
            raise fail(f"{name} {(r, c)} out of bounds for {rows}x{cols} grid")
    if tuple(start) == tuple(finish):
        raise fail(f"start and finish must differ, both are {tuple(start)}")


class Grid:
    """R x C grid of Cells.

    The layout is validated before any cell exists, so a Grid instance always
    holds exactly one start and one finish, neither of them a wall.
    """

    def __init__(self, rows: int, cols: int, start: Coord, finish: Coord) -> None:
        _validate_layout(rows, cols, start, finish)
        self._rows = rows
        self._cols = cols
        self._start: Coord = (start[0], start[1])
        self._finish: Coord = (finish[0], finish[1])
        self._cells: list[list[Cell]] = [
            [Cell(r, c) for c in range(cols)] for r in range(rows)
        ]
        self.at(self._start).is_start = True
        self.at(self._finish).is_finish = True

    # --- Properties ---

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def start(self) -> Coord:
        return self._start

    @property
    def finish(self) -> Coord:
        return self._finish

    # --- Queries ---

    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self._rows and 0 <= c < self._cols

    def _check_bounds(self, coord: Coord) -> None:
        if not self.in_bounds(coord):
            raise ValueError(
                f"{tuple(coord)} out of bounds for {self._rows}x{self._cols} grid"
            )

    def at(self, coord: Coord) -> Cell:
        self._check_bounds(coord)
        return self._cells[coord[0]][coord[1]]

    def passable(self, coord: Coord) -> bool:
        """True if the cell at coord is not a wall."""
        return not self.at(coord).is_wall

    def neighbors(self, coord: Coord) -> list[Cell]:
        """Orthogonal in-bounds neighbors, ordered up, down, left, right."""
        self._check_bounds(coord)
        r, c = coord
        result: list[Cell] = []
        for dr, dc in _DIRECTIONS:
            nr, nc = r + dr, c + dc
            if 0 <= nr < self._rows and 0 <= nc < self._cols:
                result.append(self._cells[nr][nc])
        return result

    def walls(self) -> list[Coord]:
        return [cell.coord for cell in self if cell.is_wall]

    def __iter__(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def __len__(self) -> int:
        return self._rows * self._cols

    # --- Wall editing ---

    def toggle_wall(self, coord: Coord) -> bool:
        """Flip the wall flag at coord. Start and finish are left untouched.

        Returns the wall state after the call.
        """
        cell = self.at(coord)
        if not cell.is_endpoint:
            cell.is_wall = not cell.is_wall
        return cell.is_wall

    def set_wall(self, coord: Coord, value: bool = True) -> bool:
        """Set the wall flag at coord. Start and finish are left untouched."""
        cell = self.at(coord)
        if not cell.is_endpoint:
            cell.is_wall = value
        return cell.is_wall

    def randomize_walls(
        self, density: float, rng: random.Random | None = None
    ) -> list[Coord]:
        """Wall each open, non-endpoint cell with probability ``density``.

        Existing walls are kept. Returns the coordinates that became walls.
        """
        if not 0.0 < density < 1.0:
            raise ValueError(f"density must be in (0, 1), got {density}")
        if rng is None:
            rng = random.Random()
        added: list[Coord] = []
        for cell in self:
            # one roll per cell, walled or not
            roll = rng.random()
            if cell.is_endpoint or cell.is_wall:
                continue
            if roll < density:
                cell.is_wall = True
                added.append(cell.coord)
        logger.debug(
            "randomize_walls density=%.2f added=%d total=%d",
            density, len(added), len(self.walls()),
        )
        return added

    def clear_walls(self) -> int:
        """Remove every wall. Returns the number of walls removed."""
        cleared = 0
        for cell in self:
            if cell.is_wall:
                cell.is_wall = False
                cleared += 1
        logger.debug("clear_walls cleared=%d", cleared)
        return cleared

    # --- Search bookkeeping ---

    def reset_search_fields(self) -> None:
        """Clear visited/distance/predecessor on every cell."""
        for cell in self:
            cell.reset_search()


def build(rows: int, cols: int, start: Coord, finish: Coord) -> Grid:
    """Create a wall-free grid.

    Raises InvalidLayoutError for non-positive dimensions, identical
    endpoints, or endpoints outside the grid.
    """
    return Grid(rows, cols, start, finish)
