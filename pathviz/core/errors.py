# pathviz/core/errors.py
"""Exceptions raised by the pathfinding core."""


class PathVizError(Exception):
    """Base class for all pathviz errors."""


class GridError(PathVizError, ValueError):
    """Malformed grid: bad dimensions, missing or duplicated markers, bad text."""


class InvalidInputError(PathVizError, ValueError):
    """Search request rejected before it starts (start/goal unusable)."""
