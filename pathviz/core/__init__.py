# pathviz/core/__init__.py
# search() is imported from pathviz.core.search; re-exporting it here would
# shadow the submodule of the same name.
from pathviz.core.errors import PathVizError, GridError, InvalidInputError
from pathviz.core.types import Cell, CellState, Grid, SearchResult, StepResult
from pathviz.core.frontiers import make_frontier, ALGORITHMS
from pathviz.core.search import solve, SearchRun

__all__ = [
    "PathVizError", "GridError", "InvalidInputError",
    "Cell", "CellState", "Grid", "SearchResult", "StepResult",
    "make_frontier", "ALGORITHMS",
    "solve", "SearchRun",
]
