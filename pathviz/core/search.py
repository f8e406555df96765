# pathviz/core/search.py
#!/usr/bin/env python3
"""
Shared search contract: every algorithm exposes
    search(grid, start, goal) -> visited nodes in finalization order
and leaves `previous` back-references on the grid it searched. One routine,
reconstruct_path(), turns those back-references into the path.
"""

import logging
import time
from typing import Callable, Dict, List, Protocol

from pathviz.core.astar import AStarAlgo
from pathviz.core.bfs import BFSAlgo
from pathviz.core.dijkstra import DijkstraAlgo
from pathviz.core.grid import reset_search_state
from pathviz.core.types import Grid, Node, RunResult

log = logging.getLogger(__name__)


class SearchAlgorithm(Protocol):
    name: str

    def search(self, grid: Grid, start: Node, goal: Node) -> List[Node]: ...

    def metrics(self) -> dict: ...


SEARCH_ALGORITHMS: Dict[str, Callable[[], SearchAlgorithm]] = {
    "dijkstra": DijkstraAlgo,
    "astar":    AStarAlgo,
    "bfs":      BFSAlgo,
}


def make_algorithm(algorithm_id: str) -> SearchAlgorithm:
    try:
        return SEARCH_ALGORITHMS[algorithm_id]()
    except KeyError:
        raise ValueError(f"Unknown algorithm: {algorithm_id!r}") from None


def reconstruct_path(grid: Grid, goal: Node) -> List[Node]:
    """
    Walk `previous` from goal back to the chain's root and return it root-first.

    The walk is capped at rows * cols steps. When the goal was never reached the
    result is just [goal], whose first node is not the start: callers treat
    that as "no path".
    """
    path: List[Node] = []
    cur = goal
    for _ in range(grid.rows * grid.cols):
        path.append(cur)
        if cur.previous is None:
            break
        cur = grid.nodes[cur.previous]
    path.reverse()
    return path


def run_search(algorithm_id: str, grid: Grid) -> RunResult:
    """Reset a copy of `grid`, search it and reconstruct the path from that run."""
    algo = make_algorithm(algorithm_id)
    snapshot = reset_search_state(grid)
    start, goal = snapshot.start_node, snapshot.end_node

    t0 = time.perf_counter()
    visited = algo.search(snapshot, start, goal)
    elapsed_ms = (time.perf_counter() - t0) * 1000.0

    result = RunResult(algorithm_id, snapshot, visited, reconstruct_path(snapshot, goal), elapsed_ms,
                       algo.metrics())
    if result.success:
        for node in result.path:
            node.is_path = True
    log.info("%s: visited=%d path=%d success=%s in %.3f ms",
             algo.name, len(visited), len(result.path) if result.success else 0,
             result.success, elapsed_ms)
    log.debug("%s frontier: %s", algo.name, result.metrics)
    return result
