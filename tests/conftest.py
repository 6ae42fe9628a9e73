"""
Pytest configuration and shared fixtures.

Grids are written in the text form understood by parse_grid:
'.' free, '#' blocked, 'S' start, 'E' end.
"""

import pytest

from pathviz.core.grid import empty_grid, parse_grid
from pathviz.core.types import Grid

ALGOS = ["bfs", "dfs", "astar"]


@pytest.fixture(params=ALGOS)
def algo(request) -> str:
    """Each selector in turn."""
    return request.param


@pytest.fixture
def open_5x5() -> Grid:
    """5x5 grid with no walls, start (0,0), end (4,4)."""
    return empty_grid(5, start=(0, 0), goal=(4, 4))


@pytest.fixture
def single_opening() -> Grid:
    """3x3 grid whose middle row is blocked except for (1,1)."""
    return parse_grid("""
        S..
        #.#
        ..E
    """)


@pytest.fixture
def enclosed_end() -> Grid:
    """End cell walled in on all four sides."""
    return parse_grid("""
        S......
        .......
        ...#...
        ..#E#..
        ...#...
        .......
        .......
    """)


@pytest.fixture
def maze() -> Grid:
    """Solvable grid with a detour around a long wall."""
    return parse_grid("""
        S.......
        ######..
        ........
        .#######
        ........
        .######.
        .#....#.
        ...#..#E
    """)

