"""Turn a visitation trace and a path into one replayable timeline."""
from __future__ import annotations

from typing import Sequence

from wayfind_grid import Coord

from wayfind_timeline.types import EventKind, TimedEvent, Timeline, TimelineConfig

DEFAULT_TIMELINE = TimelineConfig()


def sequence(
    trace: Sequence[Coord],
    path: Sequence[Coord],
    config: TimelineConfig = DEFAULT_TIMELINE,
) -> Timeline:
    """Build the animation timeline for one search run.

    Visited events come first at ``i * visit_spacing``. Path events start one
    visit step after the last visited event and are spaced by
    ``path_spacing``. ``end`` is one path step after the last path event, or
    the path start when there is no path.
    """
    events: list[TimedEvent] = [
        TimedEvent(EventKind.VISITED, coord, i * config.visit_spacing)
        for i, coord in enumerate(trace)
    ]

    path_start = len(trace) * config.visit_spacing
    events.extend(
        TimedEvent(EventKind.PATH_STEP, coord, path_start + j * config.path_spacing)
        for j, coord in enumerate(path)
    )

    end = path_start + len(path) * config.path_spacing
    return Timeline(events=events, end=end)
