import pytest

from pathviz.core.config import COLS, DEFAULT_END, DEFAULT_START, ROWS
from pathviz.core.grid import create_grid, toggle_wall


class FakeClock:
    """Millisecond clock that only moves when told to."""

    def __init__(self):
        self.now = 0.0

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class RecordingListener:
    def __init__(self):
        self.events = []
        self.reports = []

    def on_cell_explored(self, row, col):
        self.events.append(("explored", (row, col)))

    def on_cell_on_path(self, row, col):
        self.events.append(("path", (row, col)))

    def on_run_complete(self, algorithm_id, report):
        self.events.append(("complete", algorithm_id))
        self.reports.append(report)

    def on_wall_placed(self, row, col):
        self.events.append(("wall", (row, col)))

    def cells(self, kind):
        return [c for k, c in self.events if k == kind]


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def open_grid():
    return create_grid(ROWS, COLS, DEFAULT_START, DEFAULT_END)


@pytest.fixture
def with_walls():
    def build(grid, cells):
        for row, col in cells:
            grid = toggle_wall(grid, row, col, True)
        return grid
    return build


@pytest.fixture
def enclosed_goal_walls():
    r, c = DEFAULT_END
    return [(r - 1, c), (r + 1, c), (r, c - 1), (r, c + 1)]
