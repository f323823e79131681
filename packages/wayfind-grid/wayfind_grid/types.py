"""Shared types for wayfind-grid."""
from __future__ import annotations

import math
from dataclasses import dataclass

Coord = tuple[int, int]


@dataclass
class Cell:
    """A single grid square.

    Wall/start/finish flags describe the layout. ``visited``, ``distance``
    and ``predecessor`` are scratch fields owned by the search engine and are
    cleared before every run. ``predecessor`` is a coordinate into the same
    grid, never another Cell.
    """

    row: int
    col: int
    is_wall: bool = False
    is_start: bool = False
    is_finish: bool = False
    visited: bool = False
    distance: float = math.inf
    predecessor: Coord | None = None

    @property
    def coord(self) -> Coord:
        return (self.row, self.col)

    @property
    def is_endpoint(self) -> bool:
        return self.is_start or self.is_finish

    def reset_search(self) -> None:
        self.visited = False
        self.distance = math.inf
        self.predecessor = None


class InvalidLayoutError(ValueError):
    """Raised when grid dimensions or start/finish placement are invalid."""

    def __init__(
        self,
        message: str,
        rows: int | None = None,
        cols: int | None = None,
        start: Coord | None = None,
        finish: Coord | None = None,
    ) -> None:
        self.rows = rows
        self.cols = cols
        self.start = start
        self.finish = finish
        super().__init__(message)
