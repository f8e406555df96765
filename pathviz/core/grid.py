# pathviz/core/grid.py
#!/usr/bin/env python3
"""
Copy-on-write grid operations.

Every function returns a new Grid and never mutates a node that an earlier
grid can still reach, so a replay holding an older snapshot keeps seeing the
layout it started with.
"""

from dataclasses import replace
from math import inf
from typing import List, Optional

from pathviz.core.types import Cell, Grid, InvalidCoordinate, Node


def create_grid(rows: int, cols: int, start: Cell, end: Cell) -> Grid:
    if rows <= 0 or cols <= 0:
        raise ValueError(f"grid needs positive dimensions, got {rows}x{cols}")
    for c in (start, end):
        if not (0 <= c[0] < rows and 0 <= c[1] < cols):
            raise InvalidCoordinate(c, rows, cols)
    if start == end:
        raise ValueError(f"start and end must differ, both are {start}")

    nodes: List[Node] = []
    for row in range(rows):
        for col in range(cols):
            nodes.append(Node(row, col,
                              is_start=(row, col) == start,
                              is_end=(row, col) == end))
    return Grid(rows, cols, nodes, start, end)


def toggle_wall(grid: Grid, row: int, col: int, forced_value: Optional[bool] = None) -> Grid:
    """Flip (or force) the wall flag of one cell. Start and end are left alone."""
    i = grid.index((row, col))
    node = grid.nodes[i]
    if node.is_start or node.is_end:
        return grid
    value = (not node.is_wall) if forced_value is None else bool(forced_value)
    nodes = list(grid.nodes)
    nodes[i] = replace(node, is_wall=value)
    return replace(grid, nodes=nodes)


def reset_search_state(grid: Grid) -> Grid:
    """Fresh copy of every node with the transient search fields cleared."""
    nodes = [
        replace(n, is_visited=False, is_path=False,
                distance=inf, total_cost=inf, previous=None)
        for n in grid.nodes
    ]
    return replace(grid, nodes=nodes)


def clear_walls(grid: Grid) -> Grid:
    return create_grid(grid.rows, grid.cols, grid.start, grid.end)
