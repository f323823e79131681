"""One-call run: search, reconstruct and sequence."""
from __future__ import annotations

from dataclasses import dataclass

from wayfind_grid import Coord, Grid
from wayfind_search import Strategy, reconstruct, search

from wayfind_timeline.sequencer import DEFAULT_TIMELINE, sequence
from wayfind_timeline.types import Timeline, TimelineConfig


@dataclass(frozen=True)
class Run:
    """Everything one visualisation needs. ``path`` is empty when blocked."""

    strategy: Strategy
    trace: list[Coord]
    found: bool
    path: list[Coord]
    timeline: Timeline


def visualise(
    grid: Grid,
    strategy: Strategy = Strategy.DIJKSTRA,
    config: TimelineConfig = DEFAULT_TIMELINE,
) -> Run:
    trace, found = search(grid, strategy=strategy)
    path = reconstruct(grid)
    return Run(
        strategy=strategy,
        trace=trace,
        found=found,
        path=path,
        timeline=sequence(trace, path, config),
    )
