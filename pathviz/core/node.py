# pathviz/core/node.py
from dataclasses import dataclass
from typing import Optional

from pathviz.core.types import Cell


@dataclass
class SearchNode:
    """
    Per-cell bookkeeping for one search run.

    `parent` is the key of the predecessor in the run's node arena (the
    processed mapping), not a reference to another node.
    """
    position: Cell
    g: int = 0                    # cost from start
    h: int = 0                    # estimate to goal (0 when uninformed)
    parent: Optional[Cell] = None

    @property
    def f(self) -> int:
        return self.g + self.h
