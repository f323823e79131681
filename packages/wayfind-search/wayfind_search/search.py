"""Shared traversal loop over a Grid, parameterized by frontier ordering."""
from __future__ import annotations

import logging
from typing import NamedTuple

from wayfind_grid import Coord, Grid

from wayfind_search.frontier import Strategy, make_frontier

logger = logging.getLogger(__name__)


class SearchResult(NamedTuple):
    trace: list[Coord]
    found: bool


def search(
    grid: Grid,
    start: Coord | None = None,
    finish: Coord | None = None,
    strategy: Strategy = Strategy.DIJKSTRA,
) -> SearchResult:
    """Explore ``grid`` from start until finish is visited or nothing is left.

    Search fields are reset first, so repeated runs on an unchanged grid
    produce the same trace. On return every visited cell holds its distance
    and predecessor; ``trace`` lists cells in the order they were visited.
    """
    start = grid.start if start is None else start
    finish = grid.finish if finish is None else finish
    # bounds check both ends before touching any cell
    grid.at(start)
    grid.at(finish)

    grid.reset_search_fields()
    frontier = make_frontier(strategy, finish)
    trace: list[Coord] = []
    found = False

    origin = grid.at(start)
    origin.distance = 0
    frontier.push(start, 0)

    while frontier:
        current = grid.at(frontier.pop())
        if current.visited:
            continue
        current.visited = True
        trace.append(current.coord)
        if current.coord == finish:
            found = True
            break

        candidate = current.distance + 1
        for neighbor in grid.neighbors(current.coord):
            if neighbor.visited or neighbor.is_wall:
                continue
            if candidate < neighbor.distance:
                neighbor.distance = candidate
                neighbor.predecessor = current.coord
                frontier.push(neighbor.coord, candidate)

    logger.debug(
        "search strategy=%s visited=%d found=%s",
        strategy.value, len(trace), found,
    )
    return SearchResult(trace, found)
