# pathviz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Tuple, Optional, Dict, Any

from pathviz.core.errors import GridError

Cell = Tuple[int, int]  # (col, row)


class CellState(IntEnum):
    FREE = 0
    BLOCKED = 1
    START = 2
    END = 3


@dataclass(frozen=True)
class Grid:
    size: int
    cells: Tuple[Tuple[CellState, ...], ...]   # [row][col]
    start: Cell
    goal: Cell

    def __post_init__(self):
        if self.size < 1:
            raise GridError(f"grid size must be positive, got {self.size}")
        try:
            rows = tuple(tuple(CellState(v) for v in row) for row in self.cells)
        except ValueError as ex:
            raise GridError(f"bad cell value: {ex}") from ex
        if len(rows) != self.size or any(len(r) != self.size for r in rows):
            raise GridError(f"cells must be {self.size}x{self.size}")
        object.__setattr__(self, "cells", rows)
        object.__setattr__(self, "start", tuple(self.start))
        object.__setattr__(self, "goal", tuple(self.goal))

        for label, c in (("start", self.start), ("goal", self.goal)):
            if not self.in_bounds(c):
                raise GridError(f"{label} {c} outside a {self.size}x{self.size} grid")

        starts = [(x, y) for y, r in enumerate(rows) for x, v in enumerate(r) if v == CellState.START]
        ends = [(x, y) for y, r in enumerate(rows) for x, v in enumerate(r) if v == CellState.END]
        if starts != [self.start]:
            raise GridError(f"expected one START cell at {self.start}, found {starts}")
        # start == goal collapses both markers onto one START cell
        expected_ends = [] if self.start == self.goal else [self.goal]
        if ends != expected_ends:
            raise GridError(f"expected END cell(s) {expected_ends}, found {ends}")

    @property
    def width(self) -> int:
        return self.size

    @property
    def height(self) -> int:
        return self.size

    def in_bounds(self, c: Cell) -> bool:
        x, y = c
        return 0 <= x < self.size and 0 <= y < self.size

    def state_at(self, c: Cell) -> CellState:
        x, y = c
        return self.cells[y][x]

    def is_block(self, c: Cell) -> bool:
        return self.state_at(c) == CellState.BLOCKED

    def is_traversable(self, x: int, y: int) -> bool:
        return self.in_bounds((x, y)) and not self.is_block((x, y))

    def walls(self) -> List[Cell]:
        return [(x, y) for y, row in enumerate(self.cells)
                for x, v in enumerate(row) if v == CellState.BLOCKED]


@dataclass(frozen=True)
class SearchResult:
    path: Tuple[Cell, ...]        # start excluded, goal included
    elapsed_ms: float
    processed_count: int
    algorithm: str                # display name: "BFS" | "DFS" | "A*"
    start: Optional[Cell] = None

    def __post_init__(self):
        object.__setattr__(self, "path", tuple(self.path))

    @property
    def path_len(self) -> int:
        """Edge count of the route."""
        return len(self.path)

    @property
    def full_path(self) -> Tuple[Cell, ...]:
        """Route with the start cell prepended."""
        if self.start is None:
            return self.path
        return (self.start,) + self.path

    def as_row(self) -> Tuple[str, int, int, int]:
        """(algorithm, time ms, visited, path length) for the results table."""
        return (self.algorithm, int(round(self.elapsed_ms)), self.processed_count, self.path_len)


@dataclass(frozen=True)
class StepResult:
    status: str                   # "idle" | "running" | "done" | "no_path" | "cancelled"
    processed: Tuple[Cell, ...] = ()
    frontier: Tuple[Cell, ...] = ()
    current: Optional[Cell] = None
    result: Optional[SearchResult] = None
    metrics: Dict[str, Any] = field(default_factory=dict)

    @property
    def finished(self) -> bool:
        return self.status != "running"
