# pathviz/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Viewer: paint a maze, pick an algorithm, watch it search.

- Mouse:
    left click/drag   -> apply current tool (wall paints on drag)
    right click/drag  -> erase walls
- Keyboard:
    [W]/[S]/[E]  -> tool: wall / start / end
    [B]/[D]/[A]  -> algorithm: BFS / DFS / A*
    [SPACE]      -> solve
    [X]          -> cancel running search
    [C]          -> clear walls
    [+]/[-]      -> steps/sec
    [Q]/[ESC]    -> quit

Config:
- ENV: PATHVIZ_GRID_SIZE, PATHVIZ_ALGO, PATHVIZ_STEP_DELAY_MS, PATHVIZ_LOG_LEVEL
- CLI: --size=N --algo=bfs|dfs|astar
"""

import logging
import sys
import time
from typing import List, Tuple, Optional

import pygame

from pathviz import config
from pathviz.core import grid as grid_ops
from pathviz.core.errors import PathVizError
from pathviz.core.frontiers import ALGORITHMS, make_frontier
from pathviz.core.search import SearchRun
from pathviz.core.types import Cell, CellState, Grid, StepResult

logger = logging.getLogger(__name__)

GRID_MARGIN = 16
FONT_NAME = None  # default pygame font

# Colors
WHITE       = (255,255,255)
BLACK       = (  0,  0,  0)
GRID_LINE   = (238,238,238)
START_RED   = (220, 50, 47)
END_GREEN   = ( 46,139, 87)
PROCESSED   = (255,192,203)   # pink
FRONTIER    = (173,216,230)   # light blue
CURRENT     = (255,140,  0)
PATH_GOLD   = (255,215,  0)

BG_TOP      = (24, 26, 32)
BG_BOT      = (36, 40, 48)
CARD_BG     = (24,28,36,220)
CARD_HI     = (255,255,255,18)
TEXT_LIGHT  = (230,235,240)
TEXT_WARN   = (255,120,120)
ACCENT_GOLD = (255,210,0)

TOOLS = ("wall", "start", "end")


# ---------- CLI ----------
def resolve_args(argv: List[str]) -> Tuple[int, str]:
    size = config.GRID_SIZE
    algo = config.DEFAULT_ALGORITHM
    for arg in argv:
        if arg.startswith("--size="):
            try:
                size = max(2, int(arg.split("=", 1)[1]))
            except ValueError:
                logger.warning("Ignoring bad --size=%r, using %d", arg.split("=", 1)[1], size)
        elif arg.startswith("--algo="):
            algo = arg.split("=", 1)[1].lower()
    if algo not in ALGORITHMS:
        algo = make_frontier(algo).key
    return size, algo


def cell_at(pos: Tuple[int, int], origin: Tuple[int, int], cell_size: int, size: int) -> Optional[Cell]:
    """Grid cell under a pixel position, or None outside the grid."""
    px, py = pos
    ox, oy = origin
    if cell_size <= 0 or px < ox or py < oy:
        return None
    col = (px - ox) // cell_size
    row = (py - oy) // cell_size
    if 0 <= col < size and 0 <= row < size:
        return (int(col), int(row))
    return None


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False    # highlight state
        self.enabled = True

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle     = (36, 40, 48, 220)
        bg_hover    = (46, 50, 60, 230)
        bg_active   = (58, 86, 160, 235)
        bg_disabled = (30, 32, 38, 160)
        border_active = (120, 170, 255, 255)

        if not self.enabled:
            bg = bg_disabled
        elif self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle

        pygame.draw.rect(base, bg, base.get_rect(), border_radius=10)
        hi = pygame.Surface((self.rect.width, 18), pygame.SRCALPHA)
        pygame.draw.rect(hi, (255,255,255,20), hi.get_rect(), border_radius=10)
        base.blit(hi, (0,0))
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, border_active, self.rect, width=2, border_radius=10)

        color = (235,238,242) if self.enabled else (120,124,130)
        text = font.render(self.label, True, color)
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        """Returns True when the event was a click on this button."""
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                if self.enabled:
                    self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    def __init__(self, grid: Grid, algorithm: str = config.DEFAULT_ALGORITHM):
        pygame.init()

        self.grid = grid
        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 18)
        self.font_big = pygame.font.Font(FONT_NAME, 22)

        self.cell_size = max(4, config.CANVAS_PX // grid.size)
        grid_px = GRID_MARGIN*2 + grid.size * self.cell_size
        win_w = grid_px + config.PANEL_W
        win_h = max(grid_px, 640)

        self.screen = pygame.display.set_mode((win_w, win_h))
        pygame.display.set_caption("Pathfinding Visualizer")
        self._grid_origin = (GRID_MARGIN, GRID_MARGIN)
        self._right_band = pygame.Rect(grid_px, 0, config.PANEL_W, win_h)

        self.processed: Tuple[Cell, ...] = ()
        self.frontier: Tuple[Cell, ...] = ()
        self.current: Optional[Cell] = None
        self.path: Tuple[Cell, ...] = ()
        self.results: List[Tuple[str, int, int, int]] = []

        self.tool = "wall"
        self._painting = False
        self._erasing = False

        self.selected_algo = algorithm
        self.run_obj: Optional[SearchRun] = None
        self.running = False
        self.clock = pygame.time.Clock()
        self.steps_per_sec = max(1, min(120, 1000 // max(1, config.STEP_DELAY_MS)))
        self.state = "Idle"
        self._last_metrics = {}

        self._buttons: List[UIButton] = []
        self._build_buttons()

    def run(self):
        while True:
            self._handle_events()
            if self.running:
                self._tick_algorithm()
            self._draw()
            self.clock.tick(60)

    # ---------- search ----------
    def _tick_algorithm(self):
        t0 = time.time()
        step_interval = 1.0 / max(1, self.steps_per_sec)
        if not hasattr(self, "_last_step_t"):
            self._last_step_t = 0.0
        if t0 - self._last_step_t >= step_interval:
            self._last_step_t = t0
            self._do_step()

    def _do_step(self):
        if self.run_obj is None:
            return
        res = self.run_obj.step()
        self._apply_step(res)

    def _apply_step(self, res: StepResult):
        self.processed = res.processed
        self.frontier = res.frontier
        self.current = res.current
        if res.metrics:
            self._last_metrics = res.metrics
        if res.status == "done":
            self.path = res.result.full_path
            self.results.append(res.result.as_row())
            del self.results[:-config.RESULTS_MAX_ROWS]
            self.state = "Done"
            self._stop()
        elif res.status == "no_path":
            self.state = "No path found!"
            self._stop()
        elif res.status == "cancelled":
            self.state = "Cancelled"
            self._stop()
        elif res.status == "running":
            self.state = "Running"

    def _solve(self):
        if self.running:
            return
        self._reset_overlays()
        self.run_obj = SearchRun(self.selected_algo)
        try:
            self.run_obj.init(self.grid)
        except PathVizError as ex:
            logger.warning("Cannot start search: %s", ex)
            self.run_obj = None
            self.state = "Invalid grid"
            return
        self.running = True
        self.state = "Running"
        self._refresh_active_states()

    def _cancel(self):
        if self.running and self.run_obj is not None:
            self.run_obj.cancel()
            self._do_step()

    def _stop(self):
        self.running = False
        self._refresh_active_states()

    # ---------- editing ----------
    def _edit(self, cell: Cell, erase: bool = False):
        if self.running:
            return
        before = self.grid
        if erase:
            self.grid = grid_ops.erase(self.grid, cell)
        elif self.tool == "wall":
            self.grid = grid_ops.paint_wall(self.grid, cell)
        elif self.tool == "start":
            self.grid = grid_ops.move_start(self.grid, cell)
        elif self.tool == "end":
            self.grid = grid_ops.move_goal(self.grid, cell)
        if self.grid is not before:
            self._reset_overlays()

    def _clear(self):
        if self.running:
            return
        self.grid = grid_ops.clear_walls(self.grid)
        self._reset_overlays()
        self.state = "Idle"

    def _reset_overlays(self):
        self.processed = ()
        self.frontier = ()
        self.current = None
        self.path = ()
        self._last_metrics = {}

    # ---------- events ----------
    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                self._handle_key(e.key)
            elif e.type in (pygame.MOUSEMOTION, pygame.MOUSEBUTTONDOWN, pygame.MOUSEBUTTONUP):
                self._handle_mouse(e)

    def _handle_key(self, key: int):
        if key in (pygame.K_ESCAPE, pygame.K_q):
            pygame.quit(); sys.exit(0)
        elif key == pygame.K_SPACE:
            self._solve()
        elif key == pygame.K_x:
            self._cancel()
        elif key == pygame.K_c:
            self._clear()
        elif key in (pygame.K_PLUS, pygame.K_EQUALS):
            self._bump_speed(+5)
        elif key in (pygame.K_MINUS, pygame.K_UNDERSCORE):
            self._bump_speed(-5)
        elif key == pygame.K_w:
            self._set_tool("wall")
        elif key == pygame.K_s:
            self._set_tool("start")
        elif key == pygame.K_e:
            self._set_tool("end")
        elif key == pygame.K_b:
            self._switch_algo("bfs")
        elif key == pygame.K_d:
            self._switch_algo("dfs")
        elif key == pygame.K_a:
            self._switch_algo("astar")

    def _handle_mouse(self, e: pygame.event.Event):
        if any(b.handle_mouse(e) for b in self._buttons):
            return
        if e.type == pygame.MOUSEBUTTONUP:
            self._painting = False
            self._erasing = False
            return
        cell = cell_at(e.pos, self._grid_origin, self.cell_size, self.grid.size)
        if e.type == pygame.MOUSEBUTTONDOWN:
            if cell is None:
                return
            if e.button == 1:
                self._painting = True
                self._edit(cell)
            elif e.button == 3:
                self._erasing = True
                self._edit(cell, erase=True)
        elif e.type == pygame.MOUSEMOTION:
            if cell is None:
                # leaving the grid ends the stroke
                self._painting = False
                self._erasing = False
                return
            # start/end move on click only; walls follow the drag
            if self._painting and self.tool == "wall":
                self._edit(cell)
            elif self._erasing:
                self._edit(cell, erase=True)

    def _set_tool(self, tool: str):
        self.tool = tool
        self._refresh_active_states()

    def _switch_algo(self, key: str):
        if self.running:
            return
        self.selected_algo = key
        self._refresh_active_states()

    def _bump_speed(self, dv: int):
        self.steps_per_sec = int(max(1, min(120, self.steps_per_sec + dv)))

    # ---------- drawing ----------
    def _draw(self):
        self._draw_backdrop()
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_backdrop(self):
        w, h = self.screen.get_size()
        for y in range(h):
            t = y / max(1, h-1)
            c = (
                int(BG_TOP[0] + (BG_BOT[0]-BG_TOP[0]) * t),
                int(BG_TOP[1] + (BG_BOT[1]-BG_TOP[1]) * t),
                int(BG_TOP[2] + (BG_BOT[2]-BG_TOP[2]) * t),
            )
            pygame.draw.line(self.screen, c, (0, y), (w, y))

    def _cell_rect(self, cell: Cell, inset: int = 0) -> pygame.Rect:
        cs = self.cell_size
        ox, oy = self._grid_origin
        col, row = cell
        return pygame.Rect(ox + col*cs + inset, oy + row*cs + inset, cs - 2*inset, cs - 2*inset)

    def _draw_grid(self):
        colors = {
            CellState.FREE: WHITE,
            CellState.BLOCKED: BLACK,
            CellState.START: START_RED,
            CellState.END: END_GREEN,
        }
        for row in range(self.grid.size):
            for col in range(self.grid.size):
                rect = self._cell_rect((col, row))
                pygame.draw.rect(self.screen, colors[self.grid.cells[row][col]], rect)
                pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

        # overlays leave the start/end markers visible
        markers = (self.grid.start, self.grid.goal)
        for c in self.processed:
            if c not in markers:
                pygame.draw.rect(self.screen, PROCESSED, self._cell_rect(c, inset=1))
        for c in self.frontier:
            if c not in markers:
                pygame.draw.rect(self.screen, FRONTIER, self._cell_rect(c, inset=1))
        if self.running and self.current is not None and self.current not in markers:
            pygame.draw.rect(self.screen, CURRENT, self._cell_rect(self.current, inset=1))

        if len(self.path) >= 2:
            pts = [self._cell_rect(c).center for c in self.path]
            pygame.draw.lines(self.screen, PATH_GOLD, False, pts, 3)

    # ---------- buttons + metrics ----------
    def _build_buttons(self):
        self._buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 200  # leaves space for metrics card above
        w = max(160, rb.width - 32)
        h = 34
        gap = 8
        half = (w - 8) // 2
        third = (w - 16) // 3

        def add(label, cb, rect, *, togglable=False, store_as: Optional[str] = None):
            btn = UIButton(label, rect, cb, togglable=togglable)
            self._buttons.append(btn)
            if store_as:
                setattr(self, store_as, btn)

        add("Solve", self._solve, pygame.Rect(x, y, half, h), store_as="btn_solve")
        add("Cancel", self._cancel, pygame.Rect(x + half + 8, y, half, h), store_as="btn_cancel")
        y += h + gap
        add("Clear Walls", self._clear, pygame.Rect(x, y, w, h), store_as="btn_clear")
        y += h + gap

        for i, (key, label) in enumerate((("bfs", "BFS"), ("dfs", "DFS"), ("astar", "A*"))):
            add(label, lambda k=key: self._switch_algo(k),
                pygame.Rect(x + i*(third + 8), y, third, h), togglable=True, store_as=f"btn_algo_{key}")
        y += h + gap

        for i, tool in enumerate(TOOLS):
            add(tool.capitalize(), lambda t=tool: self._set_tool(t),
                pygame.Rect(x + i*(third + 8), y, third, h), togglable=True, store_as=f"btn_tool_{tool}")
        y += h + gap

        add("Speed -", lambda: self._bump_speed(-5), pygame.Rect(x, y, half, h))
        add("Speed +", lambda: self._bump_speed(+5), pygame.Rect(x + half + 8, y, half, h))
        y += h + gap

        self._table_top = y + 8
        self._refresh_active_states()

    def _refresh_active_states(self):
        for key in ALGORITHMS:
            btn = getattr(self, f"btn_algo_{key}", None)
            if btn is not None:
                btn.set_active(self.selected_algo == key)
                btn.enabled = not self.running
        for tool in TOOLS:
            btn = getattr(self, f"btn_tool_{tool}", None)
            if btn is not None:
                btn.set_active(self.tool == tool)
        if hasattr(self, "btn_solve"):
            self.btn_solve.enabled = not self.running
        if hasattr(self, "btn_clear"):
            self.btn_clear.enabled = not self.running
        if hasattr(self, "btn_cancel"):
            self.btn_cancel.enabled = self.running

    def _draw_panel(self):
        rb = self._right_band

        # ---- METRICS CARD (top) ----
        card_h = 180
        card = pygame.Surface((rb.width - 20, card_h), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0,0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        x0 = rb.x + 24
        y0 = rb.y + 18

        def line(text, big=False, color=TEXT_LIGHT):
            nonlocal y0
            f = self.font_big if big else self.font
            surf = f.render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 6

        line("Metrics", big=True, color=ACCENT_GOLD)
        m = self._last_metrics
        line(f"Processed: {m.get('processed', 0)}")
        line(f"Frontier: {m.get('frontier', 0)}")
        line(f"Path Len: {m.get('path_len', 0)}")
        line(f"Algo: {make_frontier(self.selected_algo).name}   Tool: {self.tool}")
        line(f"Speed: {self.steps_per_sec} steps/s")
        line(self.state, color=TEXT_WARN if self.state == "No path found!" else ACCENT_GOLD)

        for b in self._buttons:
            b.draw(self.screen, self.font)

        # ---- RESULTS TABLE ----
        y = self._table_top
        cols = (0, 70, 160, 250)
        header = ("Algo", "Time ms", "Visited", "Length")
        for cx, text in zip(cols, header):
            surf = self.font_small.render(text, True, ACCENT_GOLD)
            self.screen.blit(surf, (x0 + cx, y))
        y += 22
        for row in self.results:
            for cx, value in zip(cols, row):
                surf = self.font_small.render(str(value), True, TEXT_LIGHT)
                self.screen.blit(surf, (x0 + cx, y))
            y += 20


# ---------- main ----------
def main():
    logging.basicConfig(level=getattr(logging, config.LOG_LEVEL, logging.INFO),
                        format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    size, algo = resolve_args(sys.argv[1:])
    try:
        grid = grid_ops.empty_grid(size)
    except PathVizError as ex:
        logger.error("Failed to build a %dx%d grid: %s", size, size, ex)
        sys.exit(1)
    Viewer(grid, algo).run()


if __name__ == "__main__":
    main()
