"""Viewport-driven grid sizing and randomized start/finish placement."""
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum

from wayfind_grid.grid import Grid
from wayfind_grid.types import Coord, InvalidLayoutError

logger = logging.getLogger(__name__)


class Viewport(Enum):
    """Screen category the grid is laid out for."""

    DESKTOP = "desktop"
    TABLET = "tablet"
    MOBILE = "mobile"


# (rows, cols) per viewport
GRID_SIZES: dict[Viewport, tuple[int, int]] = {
    Viewport.DESKTOP: (20, 50),
    Viewport.TABLET: (15, 15),
    Viewport.MOBILE: (18, 10),
}


@dataclass(frozen=True)
class LayoutConfig:
    """Immutable layout settings.

    Attributes:
        mobile_limit: Widest viewport (px) still treated as mobile.
        tablet_limit: Widest viewport (px) still treated as tablet.
        row_band: Rows at the top/bottom edge used for mobile endpoints.
        col_band: Columns at the left/right edge used for desktop/tablet endpoints.
        wall_density: Default probability for random wall generation.
    """

    mobile_limit: int = 480
    tablet_limit: int = 800
    row_band: int = 3
    col_band: int = 5
    wall_density: float = 0.1


DEFAULT_CONFIG = LayoutConfig()


def classify_viewport(width: int, config: LayoutConfig = DEFAULT_CONFIG) -> Viewport:
    """Map a viewport width in pixels to its category."""
    if width <= config.mobile_limit:
        return Viewport.MOBILE
    if width <= config.tablet_limit:
        return Viewport.TABLET
    return Viewport.DESKTOP


def grid_size(viewport: Viewport) -> tuple[int, int]:
    return GRID_SIZES[viewport]


def _random_in(
    rng: random.Random, rows: range, cols: range
) -> Coord:
    return (rng.choice(rows), rng.choice(cols))


def place_endpoints(
    rows: int,
    cols: int,
    viewport: Viewport,
    rng: random.Random,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> tuple[Coord, Coord]:
    """Pick start and finish in opposite edge bands of the grid.

    Mobile grids are tall, so the bands are the top and bottom rows; desktop
    and tablet grids use the leftmost and rightmost columns. A coin flip on
    ``rng`` decides which endpoint takes which band. Bands are clamped to half
    the axis so they never overlap, which keeps start and finish distinct.
    """
    if rows <= 0 or cols <= 0:
        raise InvalidLayoutError(
            f"Grid dimensions must be positive, got {rows}x{cols}",
            rows=rows, cols=cols,
        )

    if viewport is Viewport.MOBILE:
        band = min(config.row_band, rows // 2)
        if band < 1:
            raise InvalidLayoutError(
                f"{rows}x{cols} grid has too few rows for opposite endpoint bands",
                rows=rows, cols=cols,
            )
        near = (range(0, band), range(0, cols))
        far = (range(rows - band, rows), range(0, cols))
    else:
        band = min(config.col_band, cols // 2)
        if band < 1:
            raise InvalidLayoutError(
                f"{rows}x{cols} grid has too few columns for opposite endpoint bands",
                rows=rows, cols=cols,
            )
        near = (range(0, rows), range(0, band))
        far = (range(0, rows), range(cols - band, cols))

    if rng.random() < 0.5:
        start_band, finish_band = near, far
    else:
        start_band, finish_band = far, near

    start = _random_in(rng, *start_band)
    finish = _random_in(rng, *finish_band)
    logger.debug("placed start=%s finish=%s (%s)", start, finish, viewport.value)
    return start, finish


def build_for_viewport(
    viewport: Viewport,
    rng: random.Random | None = None,
    config: LayoutConfig = DEFAULT_CONFIG,
) -> Grid:
    """Build an empty grid sized for the viewport with randomized endpoints."""
    if rng is None:
        rng = random.Random()
    rows, cols = grid_size(viewport)
    start, finish = place_endpoints(rows, cols, viewport, rng, config)
    return Grid(rows, cols, start, finish)
