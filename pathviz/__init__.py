"""Interactive grid pathfinding visualizer (BFS / DFS / A*)."""

__version__ = "0.1.0"
