# pathviz/core/bfs.py
#!/usr/bin/env python3

from collections import deque
from dataclasses import dataclass, field
from math import inf
from typing import Deque, List

from pathviz.core.types import Grid, Node


@dataclass
class BFSAlgo:
    """Breadth-first search; unit edges make FIFO order shortest-first."""
    name: str = "BFS"

    queue: Deque[int] = field(default_factory=deque)
    popped_count: int = 0
    discovered: int = 0
    peak_open: int = 0

    def reset(self) -> None:
        self.queue.clear()
        self.popped_count = 0
        self.discovered = 0
        self.peak_open = 0

    def _enqueue(self, i: int) -> None:
        self.discovered += 1
        self.queue.append(i)
        self.peak_open = max(self.peak_open, len(self.queue))

    def search(self, grid: Grid, start: Node, goal: Node) -> List[Node]:
        self.reset()
        visited: List[Node] = []

        # a finite distance marks a node as discovered
        start.distance = 0
        self._enqueue(grid.index_of(start))

        while self.queue:
            i = self.queue.popleft()
            u = grid.nodes[i]
            if u.is_visited or u.is_wall:
                continue

            self.popped_count += 1
            u.is_visited = True
            visited.append(u)
            if u is goal:
                return visited

            for v in grid.neighbors4(u):
                if v.is_wall or v.distance != inf:
                    continue
                v.distance = u.distance + 1
                v.previous = i
                self._enqueue(grid.index_of(v))

        return visited

    def metrics(self) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "pushes": self.discovered,
            "discovered": self.discovered,
            "open_size": len(self.queue),
            "peak_open": self.peak_open,
        }
