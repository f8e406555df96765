# pathviz/core/maze.py
#!/usr/bin/env python3
"""
Maze generators. Each returns the cells to turn into walls, in the order they
should appear on screen. Start and end are never part of a plan.
"""

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Set

from pathviz.core.config import MAZE_DELAYS, WALL_PROBABILITY
from pathviz.core.types import Cell, Grid

log = logging.getLogger(__name__)

HORIZONTAL = "horizontal"
VERTICAL = "vertical"


@dataclass
class MazePlan:
    maze_id: str
    walls: List[Cell] = field(default_factory=list)
    delay_ms: int = 0


class _WallCollector:
    """Ordered, duplicate-free wall list that silently drops start/end."""

    def __init__(self, grid: Grid):
        self.grid = grid
        self.walls: List[Cell] = []
        self._seen: Set[Cell] = set()

    def add(self, row: int, col: int) -> None:
        node = self.grid.node(row, col)
        if node.is_start or node.is_end or node.cell in self._seen:
            return
        self._seen.add(node.cell)
        self.walls.append(node.cell)


# -------------------- random walls --------------------

def random_walls(grid: Grid, rng: Optional[random.Random] = None) -> List[Cell]:
    rng = rng or random.Random()
    walls = [
        n.cell for n in grid.nodes
        if not (n.is_start or n.is_end) and rng.random() < WALL_PROBABILITY
    ]
    # only changes the order walls are drawn in
    rng.shuffle(walls)
    return walls


# -------------------- recursive division --------------------

def _orientation(height: int, width: int) -> str:
    return HORIZONTAL if height > width else VERTICAL


def _divide(out: _WallCollector, row_start: int, row_end: int, col_start: int, col_end: int,
            orientation: str, rng: random.Random) -> None:
    if row_end < row_start or col_end < col_start:
        return

    if orientation == HORIZONTAL:
        rows = [r for r in range(row_start, row_end + 1) if r % 2 == 0]
        gaps = [c for c in range(col_start - 1, col_end + 2) if c % 2 == 1]
        if not rows or not gaps:
            return
        wall_row = rng.choice(rows)
        gap = rng.choice(gaps)
        for c in range(col_start - 1, col_end + 2):
            if c != gap:
                out.add(wall_row, c)
        _divide(out, row_start, wall_row - 2, col_start, col_end,
                _orientation(wall_row - 2 - row_start, col_end - col_start), rng)
        _divide(out, wall_row + 2, row_end, col_start, col_end,
                _orientation(row_end - (wall_row + 2), col_end - col_start), rng)
    else:
        cols = [c for c in range(col_start, col_end + 1) if c % 2 == 0]
        gaps = [r for r in range(row_start - 1, row_end + 2) if r % 2 == 1]
        if not cols or not gaps:
            return
        wall_col = rng.choice(cols)
        gap = rng.choice(gaps)
        for r in range(row_start - 1, row_end + 2):
            if r != gap:
                out.add(r, wall_col)
        _divide(out, row_start, row_end, col_start, wall_col - 2,
                _orientation(row_end - row_start, wall_col - 2 - col_start), rng)
        _divide(out, row_start, row_end, wall_col + 2, col_end,
                _orientation(row_end - row_start, col_end - (wall_col + 2)), rng)


def recursive_division(grid: Grid, rng: Optional[random.Random] = None) -> List[Cell]:
    """
    Border ring first, then the interior [2, rows-3] x [2, cols-3] is split by
    walls on even lines with a single gap on an odd line, recursing into both
    halves. Output order is the order walls were laid down.
    """
    rng = rng or random.Random()
    out = _WallCollector(grid)

    for r in range(grid.rows):
        for c in range(grid.cols):
            if r in (0, grid.rows - 1) or c in (0, grid.cols - 1):
                out.add(r, c)

    _divide(out, 2, grid.rows - 3, 2, grid.cols - 3, HORIZONTAL, rng)
    return out.walls


# -------------------- registry --------------------

MAZE_GENERATORS: Dict[str, Callable[[Grid, Optional[random.Random]], List[Cell]]] = {
    "recursive": recursive_division,
    "random":    random_walls,
}


def generate_maze(maze_id: str, grid: Grid, rng: Optional[random.Random] = None) -> MazePlan:
    try:
        generator = MAZE_GENERATORS[maze_id]
    except KeyError:
        raise ValueError(f"Unknown maze: {maze_id!r}") from None
    walls = generator(grid, rng)
    log.info("maze %s: %d walls planned", maze_id, len(walls))
    return MazePlan(maze_id, walls, MAZE_DELAYS[maze_id])
