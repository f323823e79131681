"""wayfind-grid - Grid model and layout for the wayfind search engine."""
from __future__ import annotations

from wayfind_grid.types import Cell, Coord, InvalidLayoutError
from wayfind_grid.grid import Grid, build
from wayfind_grid.layout import (
    DEFAULT_CONFIG,
    GRID_SIZES,
    LayoutConfig,
    Viewport,
    build_for_viewport,
    classify_viewport,
    grid_size,
    place_endpoints,
)

__all__ = [
    "Cell",
    "Coord",
    "InvalidLayoutError",
    "Grid",
    "build",
    "DEFAULT_CONFIG",
    "GRID_SIZES",
    "LayoutConfig",
    "Viewport",
    "build_for_viewport",
    "classify_viewport",
    "grid_size",
    "place_endpoints",
]
