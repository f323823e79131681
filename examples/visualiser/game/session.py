"""Session state: the grid being edited and the run being replayed."""
from __future__ import annotations

import logging
import random

from wayfind_grid import DEFAULT_CONFIG, Coord, Grid, LayoutConfig, Viewport, build_for_viewport
from wayfind_search import Strategy
from wayfind_timeline import DEFAULT_TIMELINE, EventKind, Replay, Run, TimelineConfig, visualise

logger = logging.getLogger(__name__)


class Session:
    """Holds everything the UI reads and mutates.

    Wall edits are refused while a replay is in flight, and reset is refused
    until the replay has finished, mirroring the original button states.
    """

    def __init__(
        self,
        viewport: Viewport,
        seed: int | None = None,
        strategy: Strategy = Strategy.DIJKSTRA,
        layout: LayoutConfig = DEFAULT_CONFIG,
        pacing: TimelineConfig = DEFAULT_TIMELINE,
    ) -> None:
        self.viewport = viewport
        self.rng = random.Random(seed)
        self.strategy = strategy
        self.layout = layout
        self.pacing = pacing
        self.grid: Grid = build_for_viewport(viewport, self.rng, layout)
        self.run: Run | None = None
        self.replay: Replay | None = None
        self.visited: set[Coord] = set()
        self.path: set[Coord] = set()

    # --- Button states ---

    @property
    def is_running(self) -> bool:
        return self.replay is not None and not self.replay.done

    @property
    def can_edit(self) -> bool:
        return not self.is_running

    @property
    def can_reset(self) -> bool:
        return not self.is_running

    # --- Actions ---

    def choose(self, strategy: Strategy) -> None:
        if self.is_running:
            return
        self.strategy = strategy

    def start(self) -> bool:
        """Run the chosen strategy and begin replaying it."""
        if self.is_running:
            return False
        self._clear_overlay()
        self.run = visualise(self.grid, self.strategy, self.pacing)
        self.replay = Replay(self.run.timeline)
        logger.info(
            "%s: visited %d cells, path %d",
            self.strategy.label, len(self.run.trace), len(self.run.path),
        )
        return True

    def reset(self) -> bool:
        """Discard the grid and lay out a fresh one."""
        if not self.can_reset:
            return False
        self._clear_overlay()
        self.run = None
        self.replay = None
        self.grid = build_for_viewport(self.viewport, self.rng, self.layout)
        return True

    def paint(self, coord: Coord, wall: bool) -> None:
        if not self.can_edit or not self.grid.in_bounds(coord):
            return
        self._clear_overlay()
        self.grid.set_wall(coord, wall)

    def build_walls(self, density: float | None = None) -> int:
        if not self.can_edit:
            return 0
        self._clear_overlay()
        if density is None:
            density = self.layout.wall_density
        return len(self.grid.randomize_walls(density, self.rng))

    def clear_walls(self) -> int:
        if not self.can_edit:
            return 0
        self._clear_overlay()
        return self.grid.clear_walls()

    def cancel(self) -> None:
        if self.replay is not None:
            self.replay.cancel()

    # --- Per-frame ---

    def update(self, dt_ms: int) -> None:
        """Advance the replay and apply due events to the overlay sets."""
        if self.replay is None:
            return
        for event in self.replay.advance(dt_ms):
            if event.kind is EventKind.VISITED:
                self.visited.add(event.coord)
            else:
                self.path.add(event.coord)

    def _clear_overlay(self) -> None:
        self.visited.clear()
        self.path.clear()
