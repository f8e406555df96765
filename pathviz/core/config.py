# pathviz/core/config.py
#!/usr/bin/env python3
"""
Grid dimensions, start/goal placement and animation cadence.

Speed and seed can be picked at launch:
- ENV: PATHVIZ_SPEED=slow|medium|fast, PATHVIZ_SEED=<int>
- CLI: --speed=slow|medium|fast, --seed=<int>
"""

import os
import sys
from typing import Dict, List, NamedTuple, Optional

from pathviz.core.types import Cell

# ---------- Grid ----------
ROWS = 20
COLS = 50
DEFAULT_START: Cell = (10, 15)
DEFAULT_END: Cell = (10, 35)


# ---------- Animation cadence ----------
class SpeedPreset(NamedTuple):
    exploration_delay_ms: int
    path_delay_ms: int


SPEED_PRESETS: Dict[str, SpeedPreset] = {
    "slow":   SpeedPreset(50, 100),
    "medium": SpeedPreset(10, 50),
    "fast":   SpeedPreset(2, 10),
}
DEFAULT_SPEED = "medium"

# per-wall delay for each maze type
MAZE_DELAYS: Dict[str, int] = {
    "random":    5,
    "recursive": 10,
}
WALL_PROBABILITY = 0.3


# ---------- Launch-time resolution ----------
def _argv_value(argv: List[str], flag: str) -> Optional[str]:
    value = None
    for arg in argv:
        if arg.startswith(flag + "="):
            value = arg.split("=", 1)[1]
    return value


def resolve_speed(argv: Optional[List[str]] = None) -> str:
    speed = os.getenv("PATHVIZ_SPEED", DEFAULT_SPEED).lower()
    override = _argv_value(sys.argv if argv is None else argv, "--speed")
    if override is not None:
        speed = override.lower()
    return speed if speed in SPEED_PRESETS else DEFAULT_SPEED


def resolve_seed(argv: Optional[List[str]] = None) -> Optional[int]:
    raw = os.getenv("PATHVIZ_SEED")
    override = _argv_value(sys.argv if argv is None else argv, "--seed")
    if override is not None:
        raw = override
    if raw is None or raw == "":
        return None
    return int(raw)


def resolve_log_level() -> str:
    return os.getenv("PATHVIZ_LOG_LEVEL", "INFO").upper()
