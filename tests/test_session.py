import random

import pytest

from pathviz.core.config import SPEED_PRESETS
from pathviz.core.grid import create_grid
from pathviz.core.maze import random_walls, recursive_division
from pathviz.core.session import NullListener, PathfindingSession
from pathviz.core.types import InvalidCoordinate


@pytest.fixture
def session(listener, clock):
    return PathfindingSession(listener, clock=clock, seed=7)


def _wall_in(session, cells):
    for cell in cells:
        assert session.edit_wall(*cell, True)


def test_search_replays_exploration_then_path(session, listener):
    assert session.start_search("dijkstra")
    assert session.busy
    assert listener.events == []

    session.flush()
    report = listener.reports[0]
    explored = listener.cells("explored")
    path = listener.cells("path")

    assert report.success
    assert report.path_length == 21 == len(path)
    assert report.visited_nodes == len(explored) <= 20 * 50
    assert path[0] == (10, 15) and path[-1] == (10, 35)
    assert explored == [n.cell for n in session.last_run.visited]

    kinds = [k for k, _ in listener.events]
    assert kinds == ["explored"] * len(explored) + ["path"] * len(path) + ["complete"]
    assert not session.busy


def test_path_replay_starts_after_exploration(session, listener, clock):
    explore_ms, path_ms = SPEED_PRESETS["medium"]
    session.start_search("astar")
    n = len(session.last_run.visited)
    assert n == 21

    clock.advance((n - 1) * explore_ms)
    session.tick()
    assert len(listener.cells("explored")) == n
    assert listener.cells("path") == []

    clock.advance(explore_ms)
    session.tick()
    assert listener.cells("path") == [(10, 15)]

    clock.advance(19 * path_ms)
    session.tick()
    assert len(listener.cells("path")) == 20
    assert session.busy and listener.reports == []

    clock.advance(path_ms)
    session.tick()
    assert len(listener.cells("path")) == 21
    assert listener.reports[0].algorithm == "astar"
    assert not session.busy


def test_report_times(listener, clock):
    session = PathfindingSession(listener, clock=clock, speed="fast")
    session.start_search("bfs")
    session.flush()
    report = listener.reports[0]
    explore_ms, path_ms = SPEED_PRESETS["fast"]
    assert report.visual_time == pytest.approx((report.visited_nodes * explore_ms + 21 * path_ms) / 1000)
    assert report.execution_time >= 0


def test_results_are_recorded_on_completion(session):
    session.start_search("bfs")
    assert "bfs" not in session.results
    session.flush()
    assert session.results["bfs"].success


@pytest.mark.parametrize("algorithm_id", ["dijkstra", "astar", "bfs"])
def test_enclosed_goal_reports_failure_without_path_replay(
        session, listener, enclosed_goal_walls, algorithm_id):
    _wall_in(session, enclosed_goal_walls)
    session.start_search(algorithm_id)
    session.flush()

    report = listener.reports[0]
    assert not report.success
    assert report.path_length == 0
    assert listener.cells("path") == []
    assert report.visual_time == pytest.approx(report.visited_nodes * SPEED_PRESETS["medium"][0] / 1000)
    assert listener.events[-1] == ("complete", algorithm_id)


def test_every_input_is_ignored_while_running(session, listener):
    _wall_in(session, [(0, 0)])
    session.start_search("dijkstra")
    grid_during_run = session.grid

    assert not session.edit_wall(5, 5)
    assert not session.start_search("bfs")
    assert not session.start_maze("random")
    assert not session.reset_path()
    assert not session.reset_grid()
    assert session.grid is grid_during_run

    session.flush()
    assert len(listener.reports) == 1
    assert session.grid.walls() == [(0, 0)]


def test_edit_during_search_touches_neither_the_run_nor_the_grid_after(session):
    session.start_search("dijkstra")
    run_grid = session.last_run.grid
    session.edit_wall(10, 20, True)
    session.flush()
    assert run_grid.walls() == []
    assert session.grid.walls() == []
    assert session.edit_wall(10, 20, True)
    assert session.grid.walls() == [(10, 20)]


def test_maze_replays_the_seeded_plan_in_order(listener, clock):
    session = PathfindingSession(listener, clock=clock, seed=3)
    expected = recursive_division(create_grid(20, 50, (10, 15), (10, 35)), random.Random(3))

    assert session.start_maze("recursive")
    assert session.grid.walls() == []
    session.flush()

    assert listener.cells("wall") == expected
    assert set(session.grid.walls()) == set(expected)
    assert not session.busy


def test_maze_walls_are_applied_as_they_are_placed(session, listener, clock):
    session.start_maze("random")
    session.tick()
    placed = listener.cells("wall")
    assert set(session.grid.walls()) == set(placed)

    clock.advance(50)
    session.tick()
    placed = listener.cells("wall")
    assert len(placed) == 11
    assert set(session.grid.walls()) == set(placed)


def test_maze_starts_from_a_clean_grid(session, listener):
    _wall_in(session, [(0, 0), (1, 1)])
    session.start_search("bfs")
    session.flush()

    session.start_maze("random")
    assert session.results == {}
    session.flush()
    assert set(session.grid.walls()) == set(listener.cells("wall"))


def test_random_maze_matches_generator(listener, clock):
    session = PathfindingSession(listener, clock=clock, seed=11)
    expected = random_walls(create_grid(20, 50, (10, 15), (10, 35)), random.Random(11))
    session.start_maze("random")
    session.flush()
    assert listener.cells("wall") == expected


def test_reset_grid_twice_gives_the_same_empty_grid(session):
    _wall_in(session, [(3, 3), (4, 4)])
    session.start_search("astar")
    session.flush()

    assert session.reset_grid()
    first = session.grid
    assert session.reset_grid()
    assert session.grid == first
    assert first.walls() == []
    assert first == create_grid(20, 50, (10, 15), (10, 35))
    assert session.results == {}


def test_reset_path_clears_search_state_but_keeps_walls(session):
    _wall_in(session, [(2, 2)])
    session.start_search("dijkstra")
    session.flush()
    assert any(n.is_visited for n in session.grid.nodes)

    assert session.reset_path()
    assert not any(n.is_visited or n.is_path for n in session.grid.nodes)
    assert session.grid.walls() == [(2, 2)]
    assert session.last_run is None
    assert "dijkstra" in session.results


def test_speed_selection(session):
    session.set_speed("slow")
    assert session.speed == "slow"
    with pytest.raises(ValueError):
        session.set_speed("ludicrous")
    with pytest.raises(ValueError):
        PathfindingSession(speed="warp")


def test_bad_ids_and_coordinates_fail_fast(session):
    with pytest.raises(ValueError):
        session.start_search("greedy")
    with pytest.raises(ValueError):
        session.start_maze("spiral")
    with pytest.raises(InvalidCoordinate):
        session.edit_wall(20, 0)
    assert not session.busy


def test_default_listener_is_silent():
    session = PathfindingSession()
    assert isinstance(session.listener, NullListener)
    session.start_search("bfs")
    session.flush()
    assert session.results["bfs"].path_length == 21
