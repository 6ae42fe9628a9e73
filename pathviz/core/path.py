# pathviz/core/path.py
from typing import List, Mapping, Tuple

from pathviz.core.node import SearchNode
from pathviz.core.types import Cell


def reconstruct_path(nodes: Mapping[Cell, SearchNode], end: SearchNode) -> Tuple[Cell, ...]:
    """
    Walk parent keys back from `end` and return the route start -> end.

    Collection stops at the node with no parent, which is left out: the start
    cell is not part of the returned route.
    """
    path: List[Cell] = []
    cur = end
    while cur.parent is not None:
        path.append(cur.position)
        cur = nodes[cur.parent]
    path.reverse()
    return tuple(path)
