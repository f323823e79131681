"""Core data types for animation timelines."""
from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator

from wayfind_grid import Coord


class EventKind(Enum):
    """What a renderer should show for a cell."""

    VISITED = "visited"
    PATH_STEP = "path_step"


@dataclass(frozen=True)
class TimedEvent:
    """One cell state change, due ``offset`` milliseconds after replay starts."""

    kind: EventKind
    coord: Coord
    offset: int


@dataclass(frozen=True)
class TimelineConfig:
    """Immutable animation pacing.

    Attributes:
        visit_spacing: Milliseconds between consecutive visited events.
        path_spacing: Milliseconds between consecutive path events.
    """

    visit_spacing: int = 10
    path_spacing: int = 50

    def __post_init__(self) -> None:
        if self.visit_spacing <= 0:
            raise ValueError(f"visit_spacing must be > 0, got {self.visit_spacing}")
        if self.path_spacing <= 0:
            raise ValueError(f"path_spacing must be > 0, got {self.path_spacing}")


@dataclass(frozen=True)
class Timeline:
    """Ordered events plus the offset at which the run is over."""

    events: list[TimedEvent] = field(default_factory=list)
    end: int = 0

    def visited(self) -> list[TimedEvent]:
        return [e for e in self.events if e.kind is EventKind.VISITED]

    def path_steps(self) -> list[TimedEvent]:
        return [e for e in self.events if e.kind is EventKind.PATH_STEP]

    def __iter__(self) -> Iterator[TimedEvent]:
        return iter(self.events)

    def __len__(self) -> int:
        return len(self.events)
