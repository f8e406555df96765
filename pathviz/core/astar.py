# pathviz/core/astar.py
#!/usr/bin/env python3
"""
A* over the unit-cost 4-connected grid.

Heuristic:
- Manhattan distance to the goal (admissible and consistent here, so the first
  time the goal is finalized its distance is optimal).

Tie-breaking in the PQ:
- (f, h, -g, seq, index): lower f, then lower h, then deeper g, then FIFO by seq.

A node sits in the candidate pool at most once (open_set). A better relaxation
of a pooled node pushes a fresher heap entry instead of a second pool member;
the stale entry is dropped when popped.
"""

from dataclasses import dataclass, field
from typing import List, Set, Tuple
import heapq

from pathviz.core.types import Grid, Node

HeapEntry = Tuple[float, int, float, int, int]


def manhattan(a: Node, b: Node) -> int:
    return abs(a.row - b.row) + abs(a.col - b.col)


@dataclass
class AStarAlgo:
    name: str = "A*"

    open_pq: List[HeapEntry] = field(default_factory=list)
    open_set: Set[int] = field(default_factory=set)
    popped_count: int = 0
    discovered: int = 0
    peak_open: int = 0
    seq: int = 0  # monotonic counter for PQ stability

    # -------------------- lifecycle --------------------

    def reset(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.popped_count = 0
        self.discovered = 0
        self.peak_open = 0
        self.seq = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def _push(self, grid: Grid, node: Node, h: int) -> None:
        i = grid.index_of(node)
        if i not in self.open_set:
            self.discovered += 1
            self.open_set.add(i)
            self.peak_open = max(self.peak_open, len(self.open_set))
        heapq.heappush(self.open_pq, (node.total_cost, h, -node.distance, self._bump(), i))

    # -------------------- main loop --------------------

    def search(self, grid: Grid, start: Node, goal: Node) -> List[Node]:
        self.reset()
        visited: List[Node] = []

        h0 = manhattan(start, goal)
        start.distance = 0
        start.total_cost = h0
        self._push(grid, start, h0)

        while self.open_pq:
            f_u, _, neg_g_u, _, i = heapq.heappop(self.open_pq)
            u = grid.nodes[i]
            # ignore stale pops
            if u.is_visited or -neg_g_u != u.distance:
                continue
            self.open_set.discard(i)
            if u.is_wall:
                continue

            self.popped_count += 1
            u.is_visited = True
            visited.append(u)
            if u is goal:
                return visited

            for v in grid.neighbors4(u):
                if v.is_visited or v.is_wall:
                    continue
                g = u.distance + 1
                if g < v.distance:
                    h = manhattan(v, goal)
                    v.previous = i
                    v.distance = g
                    v.total_cost = g + h
                    self._push(grid, v, h)

        return visited

    # -------------------- metrics --------------------

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "pushes": self.seq,
            "discovered": self.discovered,
            "open_size": len(self.open_set),
            "peak_open": self.peak_open,
        }
