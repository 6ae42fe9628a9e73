# pathviz/core/search.py
#!/usr/bin/env python3
"""
Search driver: one loop for every frontier strategy.

search() returns a lazy generator of StepResult items:
- one "running" snapshot per processed cell (taken after the cell enters the
  processed set, before its neighbours are expanded)
- then exactly one terminal item: "done" | "no_path" | "cancelled"

The generator never sleeps; pacing belongs to whoever pulls from it
(solve() below, or the viewer's tick loop). Stopping the pull is a valid way
to abandon a run.
"""

import logging
import time
from typing import Callable, Dict, Iterator, List, Optional, Tuple

from pathviz import config
from pathviz.core.errors import InvalidInputError
from pathviz.core.frontiers import Frontier, make_frontier
from pathviz.core.node import SearchNode
from pathviz.core.path import reconstruct_path
from pathviz.core.types import Cell, Grid, SearchResult, StepResult

logger = logging.getLogger(__name__)

# up, down, left, right
DIRECTIONS: List[Tuple[int, int]] = [(0, -1), (0, 1), (-1, 0), (1, 0)]

VisitCallback = Callable[[Tuple[Cell, ...], Tuple[Cell, ...]], None]


def neighbors4(grid: Grid, c: Cell) -> List[Cell]:
    """Traversable cardinal neighbours of c, in DIRECTIONS order."""
    x, y = c
    out: List[Cell] = []
    for dx, dy in DIRECTIONS:
        nx, ny = x + dx, y + dy
        if grid.is_traversable(nx, ny):
            out.append((nx, ny))
    return out


def validate_request(grid: Grid, start: Cell, goal: Cell) -> None:
    for label, c in (("start", start), ("goal", goal)):
        if not grid.in_bounds(c):
            raise InvalidInputError(f"{label} {c} is outside the {grid.size}x{grid.size} grid")
        if grid.is_block(c):
            raise InvalidInputError(f"{label} {c} is a blocked cell")


def search(grid: Grid, algorithm: Optional[str] = config.DEFAULT_ALGORITHM, *,
           start: Optional[Cell] = None, goal: Optional[Cell] = None,
           should_cancel: Optional[Callable[[], bool]] = None) -> Iterator[StepResult]:
    """
    Validate the request, then return the step generator for one run.

    start/goal default to the grid's markers. Raises InvalidInputError
    immediately (not on first next()) when either one is out of bounds or
    blocked.
    """
    start = tuple(start) if start is not None else grid.start
    goal = tuple(goal) if goal is not None else grid.goal
    validate_request(grid, start, goal)
    frontier = make_frontier(algorithm)
    logger.debug("Starting %s run on %dx%d grid: %s -> %s",
                 frontier.name, grid.size, grid.size, start, goal)
    return _run(grid, start, goal, frontier, should_cancel)


def _run(grid: Grid, start: Cell, goal: Cell, frontier: Frontier,
         should_cancel: Optional[Callable[[], bool]]) -> Iterator[StepResult]:
    t0 = time.perf_counter()
    processed: Dict[Cell, SearchNode] = {}

    frontier.push(SearchNode(start, 0, frontier.heuristic(start, goal)))

    while True:
        if should_cancel is not None and should_cancel():
            logger.info("%s run cancelled after %d cells", frontier.name, len(processed))
            yield StepResult(status="cancelled", processed=tuple(processed),
                             frontier=tuple(frontier.cells()),
                             metrics=_metrics(frontier, processed))
            return

        if frontier.is_empty():
            logger.info("%s: no path after %d cells", frontier.name, len(processed))
            yield StepResult(status="no_path", processed=tuple(processed),
                             metrics=_metrics(frontier, processed))
            return

        u = frontier.pop()

        if u.position == goal:
            result = SearchResult(
                path=reconstruct_path(processed, u),
                elapsed_ms=(time.perf_counter() - t0) * 1000.0,
                processed_count=len(processed),
                algorithm=frontier.name,
                start=start,
            )
            logger.info("%s: path of %d steps, %d cells processed, %.1f ms",
                        frontier.name, result.path_len, result.processed_count, result.elapsed_ms)
            yield StepResult(status="done", processed=tuple(processed),
                             frontier=tuple(frontier.cells()), current=u.position,
                             result=result,
                             metrics=_metrics(frontier, processed, path_len=result.path_len))
            return

        processed[u.position] = u

        yield StepResult(status="running", processed=tuple(processed),
                         frontier=tuple(frontier.cells()), current=u.position,
                         metrics=_metrics(frontier, processed))

        for v in neighbors4(grid, u.position):
            if v in processed:
                continue
            g = u.g + config.STEP_COST
            queued = frontier.get(v)
            if queued is not None:
                frontier.on_improve(queued, u.position, g)
            else:
                frontier.on_discover(v, u.position, g, goal)


def _metrics(frontier: Frontier, processed: Dict[Cell, SearchNode], path_len: int = 0) -> dict:
    return {
        "algo": frontier.name,
        "processed": len(processed),
        "frontier": len(frontier),
        "path_len": path_len,
    }


def solve(grid: Grid, algorithm: Optional[str] = config.DEFAULT_ALGORITHM, *,
          on_visit: Optional[VisitCallback] = None,
          delay_ms: int = config.STEP_DELAY_MS,
          start: Optional[Cell] = None, goal: Optional[Cell] = None,
          should_cancel: Optional[Callable[[], bool]] = None) -> Optional[SearchResult]:
    """
    Run a search to the end.

    on_visit(processed, frontier) is called once per processed cell; the loop
    then sleeps delay_ms to pace a live display. Returns None when there is no
    path or the run was cancelled.
    """
    for step in search(grid, algorithm, start=start, goal=goal, should_cancel=should_cancel):
        if step.status == "running":
            if on_visit is not None:
                on_visit(step.processed, step.frontier)
            if delay_ms > 0:
                time.sleep(delay_ms / 1000.0)
            continue
        return step.result
    return None


class SearchRun:
    """
    Step-at-a-time wrapper used by the viewer.

    Same lifecycle as a stepping algorithm object: init(grid), reset(),
    step() -> StepResult. Once the run has finished, step() keeps returning
    the terminal item.
    """

    def __init__(self, algorithm: Optional[str] = config.DEFAULT_ALGORITHM):
        self.algorithm = algorithm
        self.name = make_frontier(algorithm).name
        self.grid: Optional[Grid] = None
        self.last: Optional[StepResult] = None
        self._steps: Optional[Iterator[StepResult]] = None
        self._cancelled = False

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid) -> None:
        self.grid = grid
        self.reset()

    def reset(self) -> None:
        """Drop any run in progress and prepare a fresh one on the same grid."""
        if self.grid is None:
            return
        self._cancelled = False
        self.last = None
        self._steps = search(self.grid, self.algorithm, should_cancel=lambda: self._cancelled)

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def finished(self) -> bool:
        return self.last is not None and self.last.finished

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        if self._steps is None:
            return StepResult(status="idle", metrics={"algo": self.name})
        if self.finished:
            return self.last
        self.last = next(self._steps)
        return self.last
