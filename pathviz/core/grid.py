# pathviz/core/grid.py
#!/usr/bin/env python3
"""
Grid editing helpers.

The grid is immutable: every helper takes a Grid and returns a new one, so the
painting UI keeps its state explicitly instead of mutating a shared array.

Editing rules:
- walls never overwrite the start or end marker
- start/end never move onto a wall or onto each other
- anything outside the grid is ignored
"""

from typing import Iterable, List, Optional

from pathviz import config
from pathviz.core.errors import GridError
from pathviz.core.types import Cell, CellState, Grid

_TEXT_TO_STATE = {
    ".": CellState.FREE,
    "#": CellState.BLOCKED,
    "S": CellState.START,
    "E": CellState.END,
}
_STATE_TO_TEXT = {v: k for k, v in _TEXT_TO_STATE.items()}


def _with(grid: Grid, updates: dict, start: Optional[Cell] = None, goal: Optional[Cell] = None) -> Grid:
    rows = [list(r) for r in grid.cells]
    for (x, y), state in updates.items():
        rows[y][x] = state
    return Grid(grid.size, tuple(tuple(r) for r in rows),
                start if start is not None else grid.start,
                goal if goal is not None else grid.goal)


def empty_grid(size: int = config.GRID_SIZE, start: Optional[Cell] = None,
               goal: Optional[Cell] = None) -> Grid:
    """Open grid with start at (1, 1) and goal at (N-2, N-2) unless given."""
    if size < 1:
        raise GridError(f"grid size must be positive, got {size}")
    if start is None:
        s = min(1, size - 1)
        start = (s, s)
    if goal is None:
        g = max(0, size - 2)
        goal = (g, g)
        if goal == tuple(start):
            goal = (size - 1, size - 1)
    rows = [[CellState.FREE] * size for _ in range(size)]
    for label, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < size and 0 <= y < size):
            raise GridError(f"{label} {(x, y)} outside a {size}x{size} grid")
    rows[start[1]][start[0]] = CellState.START
    if tuple(goal) != tuple(start):
        rows[goal[1]][goal[0]] = CellState.END
    return Grid(size, tuple(tuple(r) for r in rows), tuple(start), tuple(goal))


def paint_wall(grid: Grid, c: Cell) -> Grid:
    if not grid.in_bounds(c) or grid.state_at(c) != CellState.FREE:
        return grid
    return _with(grid, {c: CellState.BLOCKED})


def paint_walls(grid: Grid, cells: Iterable[Cell]) -> Grid:
    for c in cells:
        grid = paint_wall(grid, c)
    return grid


def erase(grid: Grid, c: Cell) -> Grid:
    if not grid.in_bounds(c) or grid.state_at(c) != CellState.BLOCKED:
        return grid
    return _with(grid, {c: CellState.FREE})


def move_start(grid: Grid, c: Cell) -> Grid:
    if not grid.in_bounds(c) or grid.state_at(c) != CellState.FREE:
        return grid
    # a collapsed start/goal cell keeps its goal role
    old = CellState.END if grid.start == grid.goal else CellState.FREE
    return _with(grid, {grid.start: old, c: CellState.START}, start=c)


def move_goal(grid: Grid, c: Cell) -> Grid:
    if not grid.in_bounds(c) or grid.state_at(c) != CellState.FREE:
        return grid
    old = CellState.START if grid.start == grid.goal else CellState.FREE
    return _with(grid, {grid.goal: old, c: CellState.END}, goal=c)


def clear_walls(grid: Grid) -> Grid:
    return _with(grid, {c: CellState.FREE for c in grid.walls()})


# -------------------- text form --------------------

def parse_grid(text: str) -> Grid:
    """
    Build a grid from rows of '.', '#', 'S', 'E'.

    Blank lines and surrounding whitespace are ignored; the rows must form a
    square with exactly one 'S' and one 'E'.
    """
    lines = [ln.strip() for ln in text.strip().splitlines() if ln.strip()]
    if not lines:
        raise GridError("empty grid text")
    size = len(lines)
    rows: List[List[CellState]] = []
    start = goal = None
    for y, line in enumerate(lines):
        if len(line) != size:
            raise GridError(f"row {y} has {len(line)} cells, expected {size}")
        row = []
        for x, ch in enumerate(line):
            if ch not in _TEXT_TO_STATE:
                raise GridError(f"unknown cell marker {ch!r} at {(x, y)}")
            state = _TEXT_TO_STATE[ch]
            if state == CellState.START:
                if start is not None:
                    raise GridError("more than one start marker")
                start = (x, y)
            elif state == CellState.END:
                if goal is not None:
                    raise GridError("more than one end marker")
                goal = (x, y)
            row.append(state)
        rows.append(row)
    if start is None or goal is None:
        raise GridError("grid text needs one 'S' and one 'E'")
    return Grid(size, tuple(tuple(r) for r in rows), start, goal)


def render_grid(grid: Grid, path: Iterable[Cell] = ()) -> str:
    """Text form of the grid; free cells on the path are drawn as '*'."""
    on_path = set(path)
    out = []
    for y, row in enumerate(grid.cells):
        chars = []
        for x, v in enumerate(row):
            if (x, y) in on_path and v == CellState.FREE:
                chars.append("*")
            else:
                chars.append(_STATE_TO_TEXT[v])
        out.append("".join(chars))
    return "\n".join(out)
