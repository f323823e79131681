"""Tests for wayfind_search.frontier - frontier orderings and strategies."""
from __future__ import annotations

import pytest
from wayfind_search import (
    FifoFrontier,
    LifoFrontier,
    PriorityFrontier,
    Strategy,
    make_frontier,
    manhattan,
)


class TestStrategy:
    def test_labels(self) -> None:
        assert Strategy.DIJKSTRA.label == "Dijkstra's Algorithm"
        assert Strategy.BREADTH_FIRST.label == "Breadth-first Search"
        assert Strategy.DEPTH_FIRST.label == "Depth-first Search"
        assert Strategy.A_STAR.label == "A* Algorithm"

    def test_lookup_by_value(self) -> None:
        assert Strategy("a_star") is Strategy.A_STAR

    def test_only_depth_first_is_not_shortest(self) -> None:
        assert [s for s in Strategy if not s.shortest] == [Strategy.DEPTH_FIRST]


class TestFifoFrontier:
    def test_first_in_first_out(self) -> None:
        f = FifoFrontier()
        f.push((0, 0), 5)
        f.push((0, 1), 1)
        f.push((0, 2), 3)
        assert [f.pop(), f.pop(), f.pop()] == [(0, 0), (0, 1), (0, 2)]

    def test_len(self) -> None:
        f = FifoFrontier()
        assert len(f) == 0
        f.push((1, 1), 0)
        assert len(f) == 1
        f.pop()
        assert not f


class TestLifoFrontier:
    def test_last_in_first_out(self) -> None:
        f = LifoFrontier()
        f.push((0, 0), 0)
        f.push((0, 1), 0)
        f.push((0, 2), 0)
        assert [f.pop(), f.pop(), f.pop()] == [(0, 2), (0, 1), (0, 0)]

    def test_pop_empty_raises(self) -> None:
        with pytest.raises(IndexError):
            LifoFrontier().pop()


class TestPriorityFrontier:
    def test_lowest_priority_first(self) -> None:
        f = PriorityFrontier(lambda coord, distance: (distance,))
        f.push((0, 0), 3)
        f.push((0, 1), 1)
        f.push((0, 2), 2)
        assert [f.pop(), f.pop(), f.pop()] == [(0, 1), (0, 2), (0, 0)]

    def test_ties_pop_in_insertion_order(self) -> None:
        f = PriorityFrontier(lambda coord, distance: (distance,))
        f.push((5, 5), 1)
        f.push((0, 0), 1)
        f.push((3, 3), 1)
        assert [f.pop(), f.pop(), f.pop()] == [(5, 5), (0, 0), (3, 3)]

    def test_duplicate_entries_are_kept(self) -> None:
        f = PriorityFrontier(lambda coord, distance: (distance,))
        f.push((1, 1), 4)
        f.push((1, 1), 2)
        assert len(f) == 2
        assert f.pop() == (1, 1)
        assert f.pop() == (1, 1)


class TestMakeFrontier:
    def test_types(self) -> None:
        assert isinstance(make_frontier(Strategy.BREADTH_FIRST, (0, 0)), FifoFrontier)
        assert isinstance(make_frontier(Strategy.DEPTH_FIRST, (0, 0)), LifoFrontier)
        assert isinstance(make_frontier(Strategy.DIJKSTRA, (0, 0)), PriorityFrontier)
        assert isinstance(make_frontier(Strategy.A_STAR, (0, 0)), PriorityFrontier)

    def test_a_star_orders_by_distance_plus_heuristic(self) -> None:
        f = make_frontier(Strategy.A_STAR, (0, 10))
        f.push((0, 2), 2)  # f = 2 + 8 = 10
        f.push((5, 5), 1)  # f = 1 + 10 = 11
        f.push((0, 4), 1)  # f = 1 + 6 = 7
        assert [f.pop(), f.pop(), f.pop()] == [(0, 4), (0, 2), (5, 5)]

    def test_a_star_ties_prefer_lower_distance(self) -> None:
        f = make_frontier(Strategy.A_STAR, (0, 4))
        f.push((1, 1), 3)  # f = 3 + 4 = 7
        f.push((0, 1), 4)  # f = 4 + 3 = 7
        f.push((2, 2), 1)  # f = 1 + 4 = 5
        f.push((0, 0), 3)  # f = 3 + 4 = 7
        assert f.pop() == (2, 2)
        assert f.pop() == (1, 1)
        assert f.pop() == (0, 0)
        assert f.pop() == (0, 1)

    def test_dijkstra_ignores_heuristic(self) -> None:
        f = make_frontier(Strategy.DIJKSTRA, (0, 0))
        f.push((9, 9), 1)
        f.push((0, 1), 1)
        assert f.pop() == (9, 9)


class TestManhattan:
    def test_same_cell(self) -> None:
        assert manhattan((3, 3), (3, 3)) == 0

    def test_symmetric(self) -> None:
        assert manhattan((0, 0), (2, 3)) == 5
        assert manhattan((2, 3), (0, 0)) == 5

    def test_negative_offsets(self) -> None:
        assert manhattan((4, 1), (1, 4)) == 6
