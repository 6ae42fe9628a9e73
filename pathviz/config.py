"""
Configuration constants for pathviz.

Every tunable lives here. Values can be overridden with PATHVIZ_* environment
variables; the viewer additionally reads --algo= and --size= from argv.
"""

import logging
import os

logger = logging.getLogger(__name__)


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        logger.warning("Ignoring bad %s=%r, using %d", name, raw, default)
        return default


# =============================================================================
# Grid
# =============================================================================

# Cells per side of the square grid
GRID_SIZE = max(2, _env_int("PATHVIZ_GRID_SIZE", 30))

# Uniform cost of one cardinal move
STEP_COST = 1

# =============================================================================
# Search
# =============================================================================

# Selector used when none (or an unknown one) is given
DEFAULT_ALGORITHM = os.getenv("PATHVIZ_ALGO", "astar").lower()

# Pause between exploration steps when pacing a run, in milliseconds
STEP_DELAY_MS = max(0, _env_int("PATHVIZ_STEP_DELAY_MS", 20))

# =============================================================================
# Viewer
# =============================================================================

# Side of the square canvas the grid is drawn on, in pixels
CANVAS_PX = 600

# Right-hand panel with metrics, buttons and the results table
PANEL_W = 360

# Rows kept in the results table
RESULTS_MAX_ROWS = 8

LOG_LEVEL = os.getenv("PATHVIZ_LOG_LEVEL", "INFO").upper()
