"""Unit tests for the frontier strategies."""

import pytest

from pathviz.core.frontiers import (
    BestFirstFrontier,
    BreadthFirstFrontier,
    DepthFirstFrontier,
    make_frontier,
)
from pathviz.core.node import SearchNode


def _fill(frontier, cells):
    for c in cells:
        frontier.push(SearchNode(c))
    return frontier


class TestSelectors:
    """make_frontier maps selectors to strategies."""

    @pytest.mark.parametrize("key,cls", [
        ("bfs", BreadthFirstFrontier),
        ("dfs", DepthFirstFrontier),
        ("astar", BestFirstFrontier),
        ("ASTAR", BestFirstFrontier),
        (" bfs ", BreadthFirstFrontier),
    ])
    def test_known(self, key, cls):
        assert isinstance(make_frontier(key), cls)

    @pytest.mark.parametrize("key", [None, "", "dijkstra", "greedy"])
    def test_unknown_defaults_to_astar(self, key):
        assert isinstance(make_frontier(key), BestFirstFrontier)

    def test_display_names(self):
        assert make_frontier("bfs").name == "BFS"
        assert make_frontier("dfs").name == "DFS"
        assert make_frontier("astar").name == "A*"

    def test_fresh_instance_each_call(self):
        assert make_frontier("bfs") is not make_frontier("bfs")


class TestOrdering:
    """Which node each strategy hands out next."""

    def test_fifo(self):
        f = _fill(BreadthFirstFrontier(), [(0, 0), (1, 0), (2, 0)])
        assert [f.pop().position for _ in range(3)] == [(0, 0), (1, 0), (2, 0)]
        assert f.is_empty()

    def test_lifo(self):
        f = _fill(DepthFirstFrontier(), [(0, 0), (1, 0), (2, 0)])
        assert [f.pop().position for _ in range(3)] == [(2, 0), (1, 0), (0, 0)]

    def test_best_first_lowest_f(self):
        f = BestFirstFrontier()
        f.push(SearchNode((0, 0), g=3, h=4))
        f.push(SearchNode((1, 0), g=1, h=2))
        f.push(SearchNode((2, 0), g=5, h=0))
        assert f.pop().position == (1, 0)
        assert f.pop().position == (2, 0)
        assert f.pop().position == (0, 0)

    def test_best_first_ties_go_to_earliest(self):
        """Equal f: the first one inserted wins."""
        f = BestFirstFrontier()
        f.push(SearchNode((5, 5), g=2, h=2))
        f.push(SearchNode((1, 1), g=0, h=4))
        f.push(SearchNode((3, 3), g=4, h=0))
        assert [f.pop().position for _ in range(3)] == [(5, 5), (1, 1), (3, 3)]

    def test_cells_in_frontier_order(self):
        f = _fill(DepthFirstFrontier(), [(0, 0), (1, 0)])
        assert f.cells() == [(0, 0), (1, 0)]
        assert len(f) == 2
        assert (1, 0) in f and (2, 0) not in f


class TestHooks:
    """Heuristics, discovery and improvement."""

    def test_uninformed_heuristic_is_zero(self):
        assert BreadthFirstFrontier().heuristic((0, 0), (4, 4)) == 0
        assert DepthFirstFrontier().heuristic((0, 0), (4, 4)) == 0

    def test_manhattan(self):
        assert BestFirstFrontier().heuristic((0, 0), (4, 4)) == 8
        assert BestFirstFrontier().heuristic((3, 1), (1, 2)) == 3

    def test_on_discover_builds_node(self):
        f = BestFirstFrontier()
        node = f.on_discover((1, 0), (0, 0), 1, (4, 0))
        assert node.g == 1 and node.h == 3 and node.f == 4
        assert node.parent == (0, 0)
        assert f.get((1, 0)) is node

    def test_uninformed_never_improves(self):
        f = BreadthFirstFrontier()
        node = f.on_discover((1, 0), (0, 0), 5, (4, 0))
        assert f.on_improve(node, (2, 0), 1) is False
        assert node.g == 5 and node.parent == (0, 0)

    def test_best_first_improves_only_when_strictly_cheaper(self):
        f = BestFirstFrontier()
        node = f.on_discover((1, 0), (0, 0), 5, (4, 0))
        assert f.on_improve(node, (2, 0), 5) is False
        assert node.parent == (0, 0)
        assert f.on_improve(node, (2, 0), 2) is True
        assert node.g == 2 and node.parent == (2, 0)
        assert node.f == 2 + 3
