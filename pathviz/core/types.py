# pathviz/core/types.py
#!/usr/bin/env python3
from dataclasses import dataclass, field
from math import inf
from typing import List, Tuple, Optional

Cell = Tuple[int, int]  # (row, col)


class InvalidCoordinate(ValueError):
    """A (row, col) outside the grid was passed to a grid operation."""

    def __init__(self, cell: Cell, rows: int, cols: int):
        super().__init__(f"cell {cell} outside grid of {rows}x{cols}")
        self.cell = cell


@dataclass
class Node:
    row: int
    col: int
    is_start: bool = False
    is_end: bool = False
    is_wall: bool = False
    # outcome of the most recent search run
    is_visited: bool = False
    is_path: bool = False
    distance: float = inf
    total_cost: float = inf
    previous: Optional[int] = None     # flat index into Grid.nodes

    @property
    def cell(self) -> Cell:
        return (self.row, self.col)


@dataclass
class Grid:
    rows: int
    cols: int
    nodes: List[Node]                  # row-major, index = row * cols + col
    start: Cell
    end: Cell

    def in_bounds(self, c: Cell) -> bool:
        r, k = c
        return 0 <= r < self.rows and 0 <= k < self.cols

    def index(self, c: Cell) -> int:
        if not self.in_bounds(c):
            raise InvalidCoordinate(c, self.rows, self.cols)
        r, k = c
        return r * self.cols + k

    def index_of(self, node: Node) -> int:
        return node.row * self.cols + node.col

    def node(self, row: int, col: int) -> Node:
        return self.nodes[self.index((row, col))]

    @property
    def start_node(self) -> Node:
        return self.nodes[self.index(self.start)]

    @property
    def end_node(self) -> Node:
        return self.nodes[self.index(self.end)]

    def neighbors4(self, node: Node) -> List[Node]:
        """Orthogonal neighbors (up, down, left, right), clipped at the border."""
        r, k = node.row, node.col
        out: List[Node] = []
        if r > 0:
            out.append(self.nodes[(r - 1) * self.cols + k])
        if r < self.rows - 1:
            out.append(self.nodes[(r + 1) * self.cols + k])
        if k > 0:
            out.append(self.nodes[r * self.cols + k - 1])
        if k < self.cols - 1:
            out.append(self.nodes[r * self.cols + k + 1])
        return out

    def walls(self) -> List[Cell]:
        return [n.cell for n in self.nodes if n.is_wall]


@dataclass
class RunResult:
    algorithm: str
    grid: Grid                         # the searched snapshot
    visited: List[Node] = field(default_factory=list)
    path: List[Node] = field(default_factory=list)
    execution_time: float = 0.0        # ms, algorithm only
    metrics: dict = field(default_factory=dict)   # frontier counters from the algorithm

    @property
    def success(self) -> bool:
        return bool(self.path) and self.path[0].is_start


@dataclass
class RunReport:
    algorithm: str
    visited_nodes: int
    path_length: int
    execution_time: float              # ms
    visual_time: float                 # s
    success: bool
