import json

from pathviz.app.bench import main, run_all
from pathviz.core.session import PathfindingSession


def test_run_all_reports_every_algorithm_on_the_same_walls():
    session = PathfindingSession(seed=4)
    runs = run_all(session, "recursive")
    reports = [r for r, _ in runs]
    assert [r.algorithm for r in reports] == ["dijkstra", "astar", "bfs"]
    assert all(r.success for r in reports)
    lengths = {r.path_length for r in reports}
    assert len(lengths) == 1
    assert not session.busy


def test_run_all_pairs_reports_with_frontier_counters():
    runs = run_all(PathfindingSession(seed=4), "random")
    for report, frontier in runs:
        assert frontier["popped"] == report.visited_nodes
        assert frontier["peak_open"] <= frontier["discovered"] <= frontier["pushes"]


def test_json_output(capsys):
    assert main(["--maze", "random", "--seed", "2", "--speed", "fast", "--json"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out["maze"] == "random"
    assert out["walls"] > 0
    assert [r["algorithm"] for r in out["results"]] == ["dijkstra", "astar", "bfs"]
    for r in out["results"]:
        assert r["frontier"]["popped"] == r["visited_nodes"]


def test_table_output_on_an_open_grid(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("20x50 grid, maze=none")
    assert len(lines) == 4
    assert all("path=21" in line and "peak_open=" in line for line in lines[1:])


def test_bad_grid_exits_nonzero():
    assert main(["--start", "0,0", "--end", "0,0"]) == 1
