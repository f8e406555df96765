# pathviz/core/dijkstra.py
#!/usr/bin/env python3

from dataclasses import dataclass, field
from typing import List, Set, Tuple
import heapq

from pathviz.core.types import Grid, Node


@dataclass
class DijkstraAlgo:
    name: str = "Dijkstra"

    open_pq: List[Tuple[float, int, int]] = field(default_factory=list)   # (g, seq, index)
    open_set: Set[int] = field(default_factory=set)
    popped_count: int = 0
    discovered: int = 0
    peak_open: int = 0
    seq: int = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def reset(self) -> None:
        self.open_pq.clear()
        self.open_set.clear()
        self.popped_count = 0
        self.discovered = 0
        self.peak_open = 0
        self.seq = 0

    def _push(self, i: int, g: float) -> None:
        if i not in self.open_set:
            self.discovered += 1
            self.open_set.add(i)
            self.peak_open = max(self.peak_open, len(self.open_set))
        heapq.heappush(self.open_pq, (g, self._bump(), i))

    def search(self, grid: Grid, start: Node, goal: Node) -> List[Node]:
        """Expand nodes by lowest distance; return them in the order they were finalized."""
        self.reset()
        visited: List[Node] = []

        start.distance = 0
        self._push(grid.index_of(start), 0)

        while self.open_pq:
            g_u, _, i = heapq.heappop(self.open_pq)
            u = grid.nodes[i]
            # stale entry from an earlier, worse relaxation
            if u.is_visited or g_u != u.distance:
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
                alt = u.distance + 1
                if alt < v.distance:
                    v.distance = alt
                    v.previous = i
                    self._push(grid.index_of(v), alt)

        return visited

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "pushes": self.seq,
            "discovered": self.discovered,
            "open_size": len(self.open_set),
            "peak_open": self.peak_open,
        }
