"""Tests for wayfind_timeline.replay - Replay cursor."""
from __future__ import annotations

import pytest
from wayfind_timeline import EventKind, Replay, Timeline, sequence

TRACE = [(0, 0), (0, 1), (0, 2)]
PATH = [(0, 0), (0, 1), (0, 2)]


def make_replay() -> Replay:
    # visits at 0, 10, 20; path at 30, 80, 130; end 180
    return Replay(sequence(TRACE, PATH))


class TestAdvance:
    def test_zero_step_releases_first_event(self) -> None:
        replay = make_replay()
        due = replay.advance(0)
        assert [e.coord for e in due] == [(0, 0)]

    def test_releases_events_up_to_elapsed(self) -> None:
        replay = make_replay()
        due = replay.advance(25)
        assert [e.offset for e in due] == [0, 10, 20]
        assert replay.elapsed == 25

    def test_each_event_dispatched_once(self) -> None:
        replay = make_replay()
        seen = []
        for _ in range(40):
            seen.extend(replay.advance(5))
        assert seen == replay.timeline.events

    def test_step_between_offsets_returns_nothing(self) -> None:
        replay = make_replay()
        replay.advance(0)
        assert replay.advance(5) == []

    def test_large_step_releases_everything(self) -> None:
        replay = make_replay()
        due = replay.advance(10_000)
        assert len(due) == 6
        assert due[-1].kind is EventKind.PATH_STEP

    def test_negative_step_rejected(self) -> None:
        replay = make_replay()
        with pytest.raises(ValueError):
            replay.advance(-1)

    def test_dispatched_count(self) -> None:
        replay = make_replay()
        replay.advance(35)
        assert replay.dispatched == 4


class TestCompletion:
    def test_not_done_until_end(self) -> None:
        replay = make_replay()
        replay.advance(130)
        assert replay.dispatched == 6
        assert not replay.done
        replay.advance(50)
        assert replay.done

    def test_progress(self) -> None:
        replay = make_replay()
        assert replay.progress == 0.0
        replay.advance(90)
        assert replay.progress == pytest.approx(0.5)
        replay.advance(1000)
        assert replay.progress == 1.0

    def test_empty_timeline_is_done(self) -> None:
        replay = Replay(Timeline())
        assert replay.advance(0) == []
        assert replay.done
        assert replay.progress == 1.0

    def test_finish_returns_remaining(self) -> None:
        replay = make_replay()
        replay.advance(15)
        rest = replay.finish()
        assert [e.offset for e in rest] == [20, 30, 80, 130]
        assert replay.done


class TestCancel:
    def test_cancel_stops_dispatch(self) -> None:
        replay = make_replay()
        replay.advance(10)
        replay.cancel()
        assert replay.cancelled
        assert replay.advance(1000) == []
        assert replay.dispatched == 2

    def test_cancelled_is_done(self) -> None:
        replay = make_replay()
        replay.cancel()
        assert replay.done
