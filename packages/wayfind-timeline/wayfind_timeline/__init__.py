"""wayfind-timeline - Animation timelines for grid search runs."""
from __future__ import annotations

from wayfind_timeline.types import EventKind, TimedEvent, Timeline, TimelineConfig
from wayfind_timeline.sequencer import DEFAULT_TIMELINE, sequence
from wayfind_timeline.replay import Replay
from wayfind_timeline.runner import Run, visualise

__all__ = [
    "EventKind",
    "TimedEvent",
    "Timeline",
    "TimelineConfig",
    "DEFAULT_TIMELINE",
    "sequence",
    "Replay",
    "Run",
    "visualise",
]
