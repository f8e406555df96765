# pathviz/core/session.py
#!/usr/bin/env python3
"""
PathfindingSession: the surface a presentation layer talks to.

Inputs   edit_wall / start_search / start_maze / reset_path / reset_grid
Outputs  RunListener callbacks, fired from tick() as the timeline plays out

Every input returns True when it was applied and False when it was dropped
because a run is still animating. Dropped inputs are not queued.
"""

import logging
import random
from typing import Dict, Optional, Protocol

from pathviz.core.config import COLS, DEFAULT_END, DEFAULT_SPEED, DEFAULT_START, ROWS, SPEED_PRESETS
from pathviz.core.grid import clear_walls, create_grid, reset_search_state, toggle_wall
from pathviz.core.maze import generate_maze
from pathviz.core.scheduler import AnimationScheduler, Clock, cadence
from pathviz.core.search import run_search
from pathviz.core.types import Cell, RunReport, RunResult

log = logging.getLogger(__name__)


class RunListener(Protocol):
    def on_cell_explored(self, row: int, col: int) -> None: ...
    def on_cell_on_path(self, row: int, col: int) -> None: ...
    def on_run_complete(self, algorithm_id: str, report: RunReport) -> None: ...
    def on_wall_placed(self, row: int, col: int) -> None: ...


class NullListener:
    """Collaborator placeholder; ignores every event."""

    def on_cell_explored(self, row: int, col: int) -> None:
        pass

    def on_cell_on_path(self, row: int, col: int) -> None:
        pass

    def on_run_complete(self, algorithm_id: str, report: RunReport) -> None:
        pass

    def on_wall_placed(self, row: int, col: int) -> None:
        pass


class PathfindingSession:
    def __init__(self, listener: Optional[RunListener] = None, *,
                 rows: int = ROWS, cols: int = COLS,
                 start: Cell = DEFAULT_START, end: Cell = DEFAULT_END,
                 speed: str = DEFAULT_SPEED, clock: Optional[Clock] = None,
                 seed: Optional[int] = None):
        self.listener: RunListener = listener or NullListener()
        self.grid = create_grid(rows, cols, start, end)
        self.scheduler = AnimationScheduler(clock)
        self.rng = random.Random(seed)
        self.speed = DEFAULT_SPEED
        self.set_speed(speed)
        self.results: Dict[str, RunReport] = {}
        self.last_run: Optional[RunResult] = None

    @property
    def busy(self) -> bool:
        return self.scheduler.busy

    def set_speed(self, name: str) -> None:
        if name not in SPEED_PRESETS:
            raise ValueError(f"Unknown speed: {name!r} (expected one of {sorted(SPEED_PRESETS)})")
        self.speed = name

    # ---------- inputs ----------
    def edit_wall(self, row: int, col: int, forced_value: Optional[bool] = None) -> bool:
        if self.busy:
            log.debug("edit_wall(%d, %d) ignored: run in progress", row, col)
            return False
        self.grid = toggle_wall(self.grid, row, col, forced_value)
        return True

    def start_search(self, algorithm_id: str) -> bool:
        if self.busy:
            log.debug("start_search(%s) ignored: run in progress", algorithm_id)
            return False

        preset = SPEED_PRESETS[self.speed]
        result = run_search(algorithm_id, self.grid)
        self.grid = result.grid
        self.last_run = result

        visited = [n.cell for n in result.visited]
        path = [n.cell for n in result.path] if result.success else []
        path_start_ms = len(visited) * preset.exploration_delay_ms
        report = RunReport(
            algorithm=algorithm_id,
            visited_nodes=len(visited),
            path_length=len(path),
            execution_time=result.execution_time,
            visual_time=(path_start_ms + len(path) * preset.path_delay_ms) / 1000.0,
            success=result.success,
        )

        events = cadence(visited, preset.exploration_delay_ms, self.listener.on_cell_explored)
        events += cadence(path, preset.path_delay_ms, self.listener.on_cell_on_path,
                          start_ms=path_start_ms)

        def finish() -> None:
            self.results[algorithm_id] = report
            self.listener.on_run_complete(algorithm_id, report)

        log.info("replaying %s at %s speed (%d explored, %d on path)",
                 algorithm_id, self.speed, len(visited), len(path))
        return self.scheduler.start(events, finish)

    def start_maze(self, maze_id: str) -> bool:
        if self.busy:
            log.debug("start_maze(%s) ignored: run in progress", maze_id)
            return False

        fresh = clear_walls(self.grid)
        plan = generate_maze(maze_id, fresh, self.rng)
        self.grid = fresh
        self.results.clear()
        self.last_run = None
        return self.scheduler.start(cadence(plan.walls, plan.delay_ms, self._place_wall))

    def reset_path(self) -> bool:
        if self.busy:
            return False
        self.grid = reset_search_state(self.grid)
        self.last_run = None
        return True

    def reset_grid(self) -> bool:
        if self.busy:
            return False
        self.grid = clear_walls(self.grid)
        self.results.clear()
        self.last_run = None
        return True

    # ---------- frame loop ----------
    def tick(self) -> int:
        return self.scheduler.tick()

    def flush(self) -> int:
        return self.scheduler.flush()

    def _place_wall(self, row: int, col: int) -> None:
        self.grid = toggle_wall(self.grid, row, col, True)
        self.listener.on_wall_placed(row, col)
