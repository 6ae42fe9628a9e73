# pathviz/core/frontiers.py
#!/usr/bin/env python3
"""
Frontier strategies: the only part that differs between BFS, DFS and A*.

The driver in search.py owns the loop; a frontier decides:
- which node is taken next (pop)
- whether a cell found again while still queued may be improved (on_improve)
- the heuristic used when a node is created (on_discover)

Tie-breaking:
- BFS: FIFO, DFS: LIFO.
- A*: first node with minimal f in insertion order (linear scan, not a heap).
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from pathviz import config
from pathviz.core.node import SearchNode
from pathviz.core.types import Cell

logger = logging.getLogger(__name__)


class Frontier:
    """Base class: a keyed collection of discovered-but-unprocessed nodes."""

    key: str = ""
    name: str = ""

    def __init__(self):
        self._index: Dict[Cell, SearchNode] = {}

    # -------------------- collection --------------------

    def push(self, node: SearchNode) -> None:
        self._index[node.position] = node
        self._push(node)

    def pop(self) -> SearchNode:
        node = self._pop()
        del self._index[node.position]
        return node

    def is_empty(self) -> bool:
        return not self._index

    def __len__(self) -> int:
        return len(self._index)

    def __contains__(self, cell: Cell) -> bool:
        return cell in self._index

    def get(self, cell: Cell) -> Optional[SearchNode]:
        return self._index.get(cell)

    def cells(self) -> List[Cell]:
        """Queued cells in the frontier's own order."""
        return [n.position for n in self._nodes()]

    # -------------------- search hooks --------------------

    def heuristic(self, cell: Cell, goal: Cell) -> int:
        return 0

    def on_discover(self, cell: Cell, parent: Cell, g: int, goal: Cell) -> SearchNode:
        node = SearchNode(cell, g, self.heuristic(cell, goal), parent)
        self.push(node)
        return node

    def on_improve(self, node: SearchNode, parent: Cell, g: int) -> bool:
        """Uninformed frontiers mark cells visited on discovery: never improve."""
        return False

    # -------------------- storage (subclasses) --------------------

    def _push(self, node: SearchNode) -> None:
        raise NotImplementedError

    def _pop(self) -> SearchNode:
        raise NotImplementedError

    def _nodes(self) -> List[SearchNode]:
        raise NotImplementedError


class BreadthFirstFrontier(Frontier):
    key = "bfs"
    name = "BFS"

    def __init__(self):
        super().__init__()
        self._queue: Deque[SearchNode] = deque()

    def _push(self, node: SearchNode) -> None:
        self._queue.append(node)

    def _pop(self) -> SearchNode:
        return self._queue.popleft()

    def _nodes(self) -> List[SearchNode]:
        return list(self._queue)


class DepthFirstFrontier(Frontier):
    key = "dfs"
    name = "DFS"

    def __init__(self):
        super().__init__()
        self._stack: List[SearchNode] = []

    def _push(self, node: SearchNode) -> None:
        self._stack.append(node)

    def _pop(self) -> SearchNode:
        return self._stack.pop()

    def _nodes(self) -> List[SearchNode]:
        return list(self._stack)


class BestFirstFrontier(Frontier):
    key = "astar"
    name = "A*"

    def __init__(self):
        super().__init__()
        self._open: List[SearchNode] = []

    def heuristic(self, cell: Cell, goal: Cell) -> int:
        """Manhattan distance: admissible and consistent for 4-connected unit moves."""
        (x, y) = cell
        (gx, gy) = goal
        return (abs(gx - x) + abs(gy - y)) * config.STEP_COST

    def on_improve(self, node: SearchNode, parent: Cell, g: int) -> bool:
        if g >= node.g:
            return False
        node.g = g
        node.parent = parent
        return True

    def _push(self, node: SearchNode) -> None:
        self._open.append(node)

    def _pop(self) -> SearchNode:
        # min() keeps the first of equal keys -> earliest inserted wins ties
        best = min(range(len(self._open)), key=lambda i: self._open[i].f)
        return self._open.pop(best)

    def _nodes(self) -> List[SearchNode]:
        return list(self._open)


ALGORITHMS = {
    BreadthFirstFrontier.key: BreadthFirstFrontier,
    DepthFirstFrontier.key: DepthFirstFrontier,
    BestFirstFrontier.key: BestFirstFrontier,
}


def make_frontier(algorithm: Optional[str] = None) -> Frontier:
    """Fresh frontier for a selector; unknown or missing selectors fall back to A*."""
    key = (algorithm or "").strip().lower()
    cls = ALGORITHMS.get(key)
    if cls is None:
        logger.debug("Unknown algorithm %r, using %s", algorithm, BestFirstFrontier.key)
        cls = BestFirstFrontier
    return cls()
