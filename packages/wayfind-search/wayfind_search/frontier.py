"""Frontier orderings for the traversal strategies."""
from __future__ import annotations

import heapq
from collections import deque
from enum import Enum
from typing import Callable, Protocol

from wayfind_grid import Coord


class Strategy(Enum):
    """Traversal strategy. Each one differs only in frontier ordering."""

    DIJKSTRA = "dijkstra"
    BREADTH_FIRST = "breadth_first"
    DEPTH_FIRST = "depth_first"
    A_STAR = "a_star"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def shortest(self) -> bool:
        """True if the strategy guarantees a shortest path."""
        return self is not Strategy.DEPTH_FIRST


_LABELS: dict[Strategy, str] = {
    Strategy.DIJKSTRA: "Dijkstra's Algorithm",
    Strategy.BREADTH_FIRST: "Breadth-first Search",
    Strategy.DEPTH_FIRST: "Depth-first Search",
    Strategy.A_STAR: "A* Algorithm",
}


class Frontier(Protocol):
    def push(self, coord: Coord, distance: float) -> None: ...
    def pop(self) -> Coord: ...
    def __len__(self) -> int: ...


class FifoFrontier:
    """Queue: first discovered, first visited."""

    def __init__(self) -> None:
        self._items: deque[Coord] = deque()

    def push(self, coord: Coord, distance: float) -> None:
        self._items.append(coord)

    def pop(self) -> Coord:
        return self._items.popleft()

    def __len__(self) -> int:
        return len(self._items)


class LifoFrontier:
    """Stack: most recently discovered, first visited."""

    def __init__(self) -> None:
        self._items: list[Coord] = []

    def push(self, coord: Coord, distance: float) -> None:
        self._items.append(coord)

    def pop(self) -> Coord:
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)


class PriorityFrontier:
    """Min-heap keyed by ``priority(coord, distance)``.

    Equal priorities pop in insertion order. There is no decrease-key: a coord
    pushed again with a better distance leaves its stale entry in the heap,
    and the search skips it once the coord has been visited.
    """

    def __init__(self, priority: Callable[[Coord, float], tuple[float, ...]]) -> None:
        self._priority = priority
        self._heap: list[tuple[tuple[float, ...], int, Coord]] = []
        self._counter = 0

    def push(self, coord: Coord, distance: float) -> None:
        heapq.heappush(
            self._heap, (self._priority(coord, distance), self._counter, coord)
        )
        self._counter += 1

    def pop(self) -> Coord:
        _, _, coord = heapq.heappop(self._heap)
        return coord

    def __len__(self) -> int:
        return len(self._heap)


def manhattan(a: Coord, b: Coord) -> float:
    return float(abs(a[0] - b[0]) + abs(a[1] - b[1]))


def make_frontier(strategy: Strategy, finish: Coord) -> Frontier:
    """Return an empty frontier ordered for ``strategy``."""
    if strategy is Strategy.BREADTH_FIRST:
        return FifoFrontier()
    if strategy is Strategy.DEPTH_FIRST:
        return LifoFrontier()
    if strategy is Strategy.DIJKSTRA:
        return PriorityFrontier(lambda coord, distance: (distance,))
    if strategy is Strategy.A_STAR:
        return PriorityFrontier(
            lambda coord, distance: (distance + manhattan(coord, finish), distance)
        )
    raise ValueError(f"Unknown strategy: {strategy!r}")
