# pathviz/app/bench.py
#!/usr/bin/env python3
"""
Headless comparison: optionally lay a maze, then run every algorithm on the
same walls and print one report row each. Timelines are fast-forwarded, so
visual time is what the animation *would* take at the chosen speed.
"""

import argparse
import json
import logging
import sys
from dataclasses import asdict
from typing import List, Optional, Tuple

from pathviz.core.config import COLS, DEFAULT_END, DEFAULT_SPEED, DEFAULT_START, ROWS, SPEED_PRESETS, resolve_log_level
from pathviz.core.maze import MAZE_GENERATORS
from pathviz.core.search import SEARCH_ALGORITHMS
from pathviz.core.session import PathfindingSession
from pathviz.core.types import RunReport

log = logging.getLogger(__name__)


def _cell(text: str):
    row, col = text.split(",")
    return int(row), int(col)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="pathviz-bench", description=__doc__)
    p.add_argument("--rows", type=int, default=ROWS)
    p.add_argument("--cols", type=int, default=COLS)
    p.add_argument("--start", type=_cell, default=DEFAULT_START, help="row,col")
    p.add_argument("--end", type=_cell, default=DEFAULT_END, help="row,col")
    p.add_argument("--maze", choices=sorted(MAZE_GENERATORS), default=None)
    p.add_argument("--seed", type=int, default=None)
    p.add_argument("--speed", choices=list(SPEED_PRESETS), default=DEFAULT_SPEED)
    p.add_argument("--json", action="store_true", help="print JSON instead of a table")
    return p


def run_all(session: PathfindingSession, maze: Optional[str] = None) -> List[Tuple[RunReport, dict]]:
    """Every algorithm on the same walls; pairs each report with its frontier counters."""
    if maze is not None:
        session.start_maze(maze)
        session.flush()
    reports = []
    for algo_id in SEARCH_ALGORITHMS:
        session.start_search(algo_id)
        session.flush()
        reports.append((session.results[algo_id], session.last_run.metrics))
    return reports


def _fmt_row(r: RunReport, frontier: dict) -> str:
    status = "OK  " if r.success else "FAIL"
    return (f"{r.algorithm:<9} {status} visited={r.visited_nodes:<5} path={r.path_length:<4} "
            f"pushes={frontier['pushes']:<5} peak_open={frontier['peak_open']:<4} "
            f"logic={r.execution_time:.4f}ms visual={r.visual_time:.2f}s")


def main(argv: Optional[List[str]] = None) -> int:
    logging.basicConfig(level=resolve_log_level(),
                        format="%(asctime)s - %(levelname)s - %(message)s")
    args = build_parser().parse_args(argv)
    try:
        session = PathfindingSession(rows=args.rows, cols=args.cols, start=args.start, end=args.end,
                                     speed=args.speed, seed=args.seed)
    except ValueError as ex:
        log.error("Bad grid: %s", ex)
        return 1

    reports = run_all(session, args.maze)
    if args.json:
        print(json.dumps({"maze": args.maze, "seed": args.seed,
                          "walls": len(session.grid.walls()),
                          "results": [dict(asdict(r), frontier=m) for r, m in reports]}, indent=2))
    else:
        print(f"{args.rows}x{args.cols} grid, maze={args.maze or 'none'}, "
              f"walls={len(session.grid.walls())}, speed={args.speed}")
        for r, m in reports:
            print(_fmt_row(r, m))
    return 0


if __name__ == "__main__":
    sys.exit(main())
