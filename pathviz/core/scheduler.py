# pathviz/core/scheduler.py
#!/usr/bin/env python3
"""
Timed replay of a finished run.

A run is turned into a timeline of (offset_ms, action) pairs up front. The
owner's frame loop calls tick(); every event whose offset has elapsed since
start() is dispatched, strictly in timeline order. Only one timeline runs at a
time: start() is refused while another is still dispatching, and the flag
drops only after the last event has fired.
"""

import logging
import time
from collections import deque
from dataclasses import dataclass
from functools import partial
from typing import Callable, Deque, Iterable, List, Optional, Sequence

from pathviz.core.types import Cell

log = logging.getLogger(__name__)

IDLE = "idle"
RUNNING = "running"

Clock = Callable[[], float]  # milliseconds


def _perf_ms() -> float:
    return time.perf_counter() * 1000.0


@dataclass
class TimelineEvent:
    offset_ms: float
    action: Callable[[], None]


def cadence(cells: Iterable[Cell], delay_ms: float, action: Callable[[int, int], None],
            start_ms: float = 0.0) -> List[TimelineEvent]:
    """One event per cell at start_ms + i * delay_ms, in the given order."""
    return [
        TimelineEvent(start_ms + i * delay_ms, partial(action, row, col))
        for i, (row, col) in enumerate(cells)
    ]


class AnimationScheduler:
    def __init__(self, clock: Optional[Clock] = None):
        self.clock = clock or _perf_ms
        self.state = IDLE
        self._queue: Deque[TimelineEvent] = deque()
        self._started_at = 0.0
        self._on_finish: Optional[Callable[[], None]] = None

    @property
    def busy(self) -> bool:
        return self.state == RUNNING

    # ---------- lifecycle ----------
    def start(self, events: Sequence[TimelineEvent],
              on_finish: Optional[Callable[[], None]] = None) -> bool:
        if self.busy:
            log.debug("timeline refused: a run is still animating")
            return False
        self._queue = deque(sorted(events, key=lambda e: e.offset_ms))
        self._on_finish = on_finish
        self._started_at = self.clock()
        self.state = RUNNING
        if not self._queue:
            self._finish()
        return True

    def tick(self) -> int:
        """Dispatch every event that is due; returns how many fired."""
        if not self.busy:
            return 0
        return self._dispatch(self.clock() - self._started_at)

    def flush(self) -> int:
        """Dispatch everything left right now, in order."""
        if not self.busy:
            return 0
        return self._dispatch(float("inf"))

    # ---------- internals ----------
    def _dispatch(self, elapsed_ms: float) -> int:
        fired = 0
        while self._queue and self._queue[0].offset_ms <= elapsed_ms:
            event = self._queue.popleft()
            event.action()
            fired += 1
        if not self._queue:
            self._finish()
        return fired

    def _finish(self) -> None:
        on_finish, self._on_finish = self._on_finish, None
        self.state = IDLE
        if on_finish is not None:
            on_finish()
