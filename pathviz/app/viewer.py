# pathviz/app/viewer.py
#!/usr/bin/env python3
"""
Pathfinding Visualizer — pygame front end

- Mouse:
    click / drag on the grid -> draw or erase walls
- Keyboard:
    [D]/[A]/[B]  -> run Dijkstra / A* / BFS
    [M]/[W]      -> recursive division maze / random walls
    [1]/[2]/[3]  -> speed slow / medium / fast
    [C]          -> reset path
    [X]          -> clear all
    [Q]/[ESC]    -> quit

Speed & seed:
- ENV: PATHVIZ_SPEED=slow|medium|fast, PATHVIZ_SEED=<int>
- CLI: --speed=slow|medium|fast, --seed=<int>
"""

import logging
import sys
from typing import Dict, List, Optional, Set, Tuple

import pygame

from pathviz.core.config import SPEED_PRESETS, resolve_log_level, resolve_seed, resolve_speed
from pathviz.core.session import PathfindingSession
from pathviz.core.types import Cell, RunReport

log = logging.getLogger(__name__)

# ---------- Config ----------
PANEL_W = 320            # right band: results + buttons
GRID_MARGIN = 16
CELL_SIZE_DEFAULT = 22
FONT_NAME = None  # default pygame font

ALGORITHMS = [("dijkstra", "Dijkstra"), ("astar", "A* Search"), ("bfs", "BFS")]
MAZES = [("recursive", "Recursive Division"), ("random", "Random Walls")]

# Colors
WHITE        = (255, 255, 255)
BLACK        = (  0,   0,   0)
GRID_LINE    = ( 52,  58,  70)
CELL_EMPTY   = ( 30,  34,  42)
WALL         = (200, 205, 215)
START        = ( 46, 204, 113)
END          = (231,  76,  60)
VISITED_A    = (  0, 190, 218, 190)
PATH_COLOR   = (240, 230, 140)

CARD_BG      = ( 24,  28,  36, 220)
CARD_HI      = (255, 255, 255,  18)
TEXT_LIGHT   = (230, 235, 240)
TEXT_DIM     = (150, 158, 170)
ACCENT_GOLD  = (255, 210,   0)
FAIL_RED     = (255, 110, 110)


# ---------- Simple UI Button ----------
class UIButton:
    def __init__(self, label: str, rect: pygame.Rect, callback, *, togglable: bool = False):
        self.label = label
        self.rect = rect
        self.callback = callback
        self.hover = False
        self.togglable = togglable
        self.active = False  # highlight state

    def set_active(self, value: bool):
        self.active = bool(value)

    def draw(self, screen: pygame.Surface, font: pygame.font.Font):
        base = pygame.Surface(self.rect.size, pygame.SRCALPHA)
        bg_idle   = (36, 40, 48, 220)
        bg_hover  = (46, 50, 60, 230)
        bg_active = (58, 86, 160, 235)

        if self.active and self.togglable:
            bg = bg_active
        elif self.hover:
            bg = bg_hover
        else:
            bg = bg_idle
        pygame.draw.rect(base, bg, base.get_rect(), border_radius=8)
        screen.blit(base, self.rect.topleft)

        if self.active and self.togglable:
            pygame.draw.rect(screen, (120, 170, 255), self.rect, width=2, border_radius=8)

        text = font.render(self.label, True, (235, 238, 242))
        screen.blit(text, text.get_rect(center=self.rect.center))

    def handle_mouse(self, event: pygame.event.Event) -> bool:
        if event.type == pygame.MOUSEMOTION:
            self.hover = self.rect.collidepoint(event.pos)
        elif event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            if self.rect.collidepoint(event.pos):
                self.callback()
                return True
        return False


# ---------- Viewer ----------
class Viewer:
    """Paints the session's grid and replays its runs; also its RunListener."""

    def __init__(self, speed: str, seed: Optional[int] = None):
        pygame.init()
        self.session = PathfindingSession(self, speed=speed, seed=seed)
        grid = self.session.grid

        self.font_small = pygame.font.Font(FONT_NAME, 16)
        self.font = pygame.font.Font(FONT_NAME, 20)
        self.font_big = pygame.font.Font(FONT_NAME, 26)

        win_w = GRID_MARGIN * 2 + grid.cols * CELL_SIZE_DEFAULT + PANEL_W
        win_h = max(GRID_MARGIN * 2 + grid.rows * CELL_SIZE_DEFAULT, 640)
        self.screen = pygame.display.set_mode((win_w, win_h), pygame.RESIZABLE)
        pygame.display.set_caption("Pathfinding Visualizer")

        self.explored: Set[Cell] = set()
        self.path: Set[Cell] = set()
        self._painting: Optional[bool] = None   # wall value while dragging
        self._last_algo: Optional[str] = None

        self._buttons: List[UIButton] = []
        self._algo_buttons: Dict[str, UIButton] = {}
        self._speed_buttons: Dict[str, UIButton] = {}
        self._layout(win_w, win_h)
        self.clock = pygame.time.Clock()

    # ---------- RunListener ----------
    def on_cell_explored(self, row: int, col: int) -> None:
        self.explored.add((row, col))

    def on_cell_on_path(self, row: int, col: int) -> None:
        self.path.add((row, col))

    def on_run_complete(self, algorithm_id: str, report: RunReport) -> None:
        """The results card reads session.results each frame; nothing to store here."""
        log.info("%s done: %s", algorithm_id, report)

    def on_wall_placed(self, row: int, col: int) -> None:
        pass  # the wall is already on session.grid

    # ---------- layout ----------
    def _layout(self, win_w: int, win_h: int):
        """Compute integer cell_size that fits window, grid on the left, panel on the right."""
        grid = self.session.grid
        avail_w = max(1, win_w - PANEL_W - 2 * GRID_MARGIN)
        avail_h = max(1, win_h - 2 * GRID_MARGIN)
        self.cell_size = max(6, min(avail_w // grid.cols, avail_h // grid.rows))

        grid_h = grid.rows * self.cell_size
        self._grid_origin = (GRID_MARGIN, max(GRID_MARGIN, (win_h - grid_h) // 2))
        self._right_band = pygame.Rect(win_w - PANEL_W, 0, PANEL_W, win_h)
        self._build_buttons()

    def _build_buttons(self):
        self._buttons.clear()
        self._algo_buttons.clear()
        self._speed_buttons.clear()
        rb = self._right_band
        x = rb.x + 16
        y = rb.y + 16
        w = rb.width - 32
        h = 34
        gap = 8

        for algo_id, label in ALGORITHMS:
            btn = UIButton(label, pygame.Rect(x, y, w, h),
                           lambda a=algo_id: self._run_algorithm(a), togglable=True)
            self._buttons.append(btn)
            self._algo_buttons[algo_id] = btn
            y += h + gap

        y += gap
        for maze_id, label in MAZES:
            self._buttons.append(UIButton(label, pygame.Rect(x, y, w, h),
                                          lambda m=maze_id: self._run_maze(m)))
            y += h + gap

        y += gap
        names = list(SPEED_PRESETS)
        bw = (w - gap * (len(names) - 1)) // len(names)
        for i, name in enumerate(names):
            btn = UIButton(name.capitalize(), pygame.Rect(x + i * (bw + gap), y, bw, h),
                           lambda s=name: self._set_speed(s), togglable=True)
            self._buttons.append(btn)
            self._speed_buttons[name] = btn
        y += h + gap * 2

        half = (w - gap) // 2
        self._buttons.append(UIButton("Reset Path", pygame.Rect(x, y, half, h), self._reset_path))
        self._buttons.append(UIButton("Clear All", pygame.Rect(x + half + gap, y, half, h), self._clear_all))
        self._results_top = y + h + gap * 2

        self._refresh_active_states()

    def _refresh_active_states(self):
        for algo_id, btn in self._algo_buttons.items():
            btn.set_active(algo_id == self._last_algo)
        for name, btn in self._speed_buttons.items():
            btn.set_active(name == self.session.speed)

    # ---------- actions ----------
    def _reset_overlays(self):
        self.explored.clear()
        self.path.clear()

    def _run_algorithm(self, algo_id: str):
        if self.session.start_search(algo_id):
            self._reset_overlays()
            self._last_algo = algo_id
            self._refresh_active_states()

    def _run_maze(self, maze_id: str):
        if self.session.start_maze(maze_id):
            self._reset_overlays()
            self._last_algo = None
            self._refresh_active_states()

    def _set_speed(self, name: str):
        self.session.set_speed(name)
        self._refresh_active_states()

    def _reset_path(self):
        if self.session.reset_path():
            self._reset_overlays()

    def _clear_all(self):
        if self.session.reset_grid():
            self._reset_overlays()
            self._last_algo = None
            self._refresh_active_states()

    # ---------- main loop ----------
    def run(self):
        while True:
            self._handle_events()
            self.session.tick()
            self._draw()
            self.clock.tick(60)

    def _cell_at(self, pos: Tuple[int, int]) -> Optional[Cell]:
        ox, oy = self._grid_origin
        col = (pos[0] - ox) // self.cell_size
        row = (pos[1] - oy) // self.cell_size
        cell = (row, col)
        return cell if self.session.grid.in_bounds(cell) else None

    def _paint(self, pos: Tuple[int, int], first: bool):
        cell = self._cell_at(pos)
        if cell is None:
            return
        node = self.session.grid.node(*cell)
        if node.is_start or node.is_end:
            return
        if first:
            # the first cell decides whether this drag draws or erases
            value = not node.is_wall
            if self.session.edit_wall(*cell, value):
                self._painting = value
        elif self._painting is not None:
            self.session.edit_wall(*cell, self._painting)

    def _handle_events(self):
        for e in pygame.event.get():
            if e.type == pygame.QUIT:
                pygame.quit(); sys.exit(0)
            elif e.type == pygame.KEYDOWN:
                if e.key in (pygame.K_ESCAPE, pygame.K_q):
                    pygame.quit(); sys.exit(0)
                elif e.key == pygame.K_d:
                    self._run_algorithm("dijkstra")
                elif e.key == pygame.K_a:
                    self._run_algorithm("astar")
                elif e.key == pygame.K_b:
                    self._run_algorithm("bfs")
                elif e.key == pygame.K_m:
                    self._run_maze("recursive")
                elif e.key == pygame.K_w:
                    self._run_maze("random")
                elif e.key == pygame.K_1:
                    self._set_speed("slow")
                elif e.key == pygame.K_2:
                    self._set_speed("medium")
                elif e.key == pygame.K_3:
                    self._set_speed("fast")
                elif e.key == pygame.K_c:
                    self._reset_path()
                elif e.key == pygame.K_x:
                    self._clear_all()
            elif e.type == pygame.VIDEORESIZE:
                self.screen = pygame.display.set_mode((e.w, e.h), pygame.RESIZABLE)
                self._layout(e.w, e.h)
            elif e.type == pygame.MOUSEBUTTONDOWN and e.button == 1:
                if not any(b.handle_mouse(e) for b in self._buttons):
                    self._paint(e.pos, first=True)
            elif e.type == pygame.MOUSEMOTION:
                for b in self._buttons:
                    b.handle_mouse(e)
                if self._painting is not None:
                    self._paint(e.pos, first=False)
            elif e.type == pygame.MOUSEBUTTONUP and e.button == 1:
                self._painting = None

    # ---------- drawing ----------
    def _draw(self):
        self.screen.fill((18, 20, 26))
        self._draw_grid()
        self._draw_panel()
        pygame.display.flip()

    def _draw_grid(self):
        cs = self.cell_size
        ox, oy = self._grid_origin
        visited = pygame.Surface((cs, cs), pygame.SRCALPHA)
        visited.fill(VISITED_A)

        for node in self.session.grid.nodes:
            rect = pygame.Rect(ox + node.col * cs, oy + node.row * cs, cs, cs)
            if node.is_start:
                color = START
            elif node.is_end:
                color = END
            elif node.is_wall:
                color = WALL
            elif node.cell in self.path:
                color = PATH_COLOR
            else:
                color = CELL_EMPTY
            pygame.draw.rect(self.screen, color, rect)
            if node.cell in self.explored and node.cell not in self.path \
                    and not (node.is_start or node.is_end or node.is_wall):
                self.screen.blit(visited, rect.topleft)
            pygame.draw.rect(self.screen, GRID_LINE, rect, 1)

    def _draw_panel(self):
        rb = self._right_band
        card = pygame.Surface((rb.width - 20, rb.height - 20), pygame.SRCALPHA)
        pygame.draw.rect(card, CARD_BG, card.get_rect(), border_radius=14)
        hi = pygame.Surface((card.get_width(), 24), pygame.SRCALPHA)
        pygame.draw.rect(hi, CARD_HI, hi.get_rect(), border_radius=14)
        card.blit(hi, (0, 0))
        self.screen.blit(card, (rb.x + 10, rb.y + 10))

        for b in self._buttons:
            b.draw(self.screen, self.font_small)

        x0 = rb.x + 24
        y0 = self._results_top

        def line(text, font=None, color=TEXT_LIGHT):
            nonlocal y0
            surf = (font or self.font).render(text, True, color)
            self.screen.blit(surf, (x0, y0))
            y0 += surf.get_height() + 4

        line("Results", font=self.font_big, color=ACCENT_GOLD)
        for algo_id, label in ALGORITHMS:
            report = self.session.results.get(algo_id)
            if report is None:
                line(f"{label}: -", color=TEXT_DIM)
                continue
            if report.success:
                line(f"{label}: visited {report.visited_nodes}, path {report.path_length}")
            else:
                line(f"{label}: No path!", color=FAIL_RED)
            line(f"  Logic: {report.execution_time:.4f}ms  Visual: {report.visual_time:.2f}s",
                 font=self.font_small, color=TEXT_DIM)

        y0 += 8
        line("Running..." if self.session.busy else "Idle", color=ACCENT_GOLD if self.session.busy else TEXT_DIM)
        line(f"Speed: {self.session.speed}", font=self.font_small, color=TEXT_DIM)


# ---------- main ----------
def main():
    logging.basicConfig(level=resolve_log_level(),
                        format="%(asctime)s - %(levelname)s - %(message)s")
    try:
        viewer = Viewer(speed=resolve_speed(), seed=resolve_seed())
    except (ValueError, pygame.error) as ex:
        log.error("Failed to start viewer: %s", ex)
        sys.exit(1)
    viewer.run()


if __name__ == "__main__":
    main()
