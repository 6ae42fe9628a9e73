"""Assertions shared by the search tests."""

from typing import Sequence

from pathviz.core.types import Cell, Grid


def assert_valid_route(grid: Grid, path: Sequence[Cell]) -> None:
    """Every cell free and in bounds, each one cardinal step from the last, ending at the goal."""
    cells = [grid.start] + list(path)
    for c in cells:
        assert grid.in_bounds(c)
        assert not grid.is_block(c)
    for (ax, ay), (bx, by) in zip(cells, cells[1:]):
        assert abs(ax - bx) + abs(ay - by) == 1
    assert cells[-1] == grid.goal
