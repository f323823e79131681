"""Replay - releases timeline events as the caller's clock advances."""
from __future__ import annotations

from wayfind_timeline.types import TimedEvent, Timeline


class Replay:
    """Cursor over a Timeline.

    The caller owns the clock and reports elapsed time through ``advance``.
    Each event is returned exactly once, in timeline order, on the first
    ``advance`` whose running total reaches its offset. Cancelling stops all
    further dispatch; there is nothing to release.
    """

    def __init__(self, timeline: Timeline) -> None:
        self._timeline = timeline
        self._elapsed = 0
        self._cursor = 0
        self._cancelled = False

    # --- Properties ---

    @property
    def timeline(self) -> Timeline:
        return self._timeline

    @property
    def elapsed(self) -> int:
        return self._elapsed

    @property
    def dispatched(self) -> int:
        """Number of events already returned by ``advance``."""
        return self._cursor

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    @property
    def done(self) -> bool:
        if self._cancelled:
            return True
        return (
            self._cursor >= len(self._timeline)
            and self._elapsed >= self._timeline.end
        )

    @property
    def progress(self) -> float:
        """Fraction of the timeline elapsed, in [0, 1]."""
        if self._timeline.end <= 0:
            return 1.0
        return min(self._elapsed / self._timeline.end, 1.0)

    # --- Control ---

    def advance(self, dt: int) -> list[TimedEvent]:
        """Move the clock forward ``dt`` ms and return events now due."""
        if dt < 0:
            raise ValueError(f"dt must be >= 0, got {dt}")
        if self._cancelled:
            return []
        self._elapsed += dt
        events = self._timeline.events
        due: list[TimedEvent] = []
        while self._cursor < len(events) and events[self._cursor].offset <= self._elapsed:
            due.append(events[self._cursor])
            self._cursor += 1
        return due

    def finish(self) -> list[TimedEvent]:
        """Jump to the end and return every event not yet dispatched."""
        remaining = max(self._timeline.end - self._elapsed, 0)
        return self.advance(remaining)

    def cancel(self) -> None:
        self._cancelled = True
