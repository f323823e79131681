"""Path reconstruction from predecessor links left by a search."""
from __future__ import annotations

from wayfind_grid import Coord, Grid


def reconstruct(grid: Grid, finish: Coord | None = None) -> list[Coord]:
    """Walk predecessors back from finish and return start -> finish.

    Returns an empty list when finish was never visited (no path exists).
    Predecessor distances strictly decrease along the chain, so the walk
    always ends at the start cell.
    """
    finish = grid.finish if finish is None else finish
    cell = grid.at(finish)
    if not cell.visited:
        return []

    path: list[Coord] = [cell.coord]
    while cell.predecessor is not None:
        cell = grid.at(cell.predecessor)
        path.append(cell.coord)
    path.reverse()
    return path
