import pytest

from pathviz.core.config import DEFAULT_SPEED, resolve_seed, resolve_speed


def test_speed_defaults_to_medium(monkeypatch):
    monkeypatch.delenv("PATHVIZ_SPEED", raising=False)
    assert resolve_speed([]) == DEFAULT_SPEED == "medium"


def test_speed_from_env_then_argv(monkeypatch):
    monkeypatch.setenv("PATHVIZ_SPEED", "SLOW")
    assert resolve_speed([]) == "slow"
    assert resolve_speed(["viewer", "--speed=fast"]) == "fast"


def test_unknown_speed_falls_back(monkeypatch):
    monkeypatch.setenv("PATHVIZ_SPEED", "warp")
    assert resolve_speed([]) == DEFAULT_SPEED
    assert resolve_speed(["--speed=ludicrous"]) == DEFAULT_SPEED


def test_seed_resolution(monkeypatch):
    monkeypatch.delenv("PATHVIZ_SEED", raising=False)
    assert resolve_seed([]) is None
    monkeypatch.setenv("PATHVIZ_SEED", "12")
    assert resolve_seed([]) == 12
    assert resolve_seed(["--seed=99"]) == 99


def test_bad_seed_is_an_error(monkeypatch):
    monkeypatch.delenv("PATHVIZ_SEED", raising=False)
    with pytest.raises(ValueError):
        resolve_seed(["--seed=abc"])


def test_cell_alias_is_shared_with_the_grid_types():
    from pathviz.core import config, types
    assert config.Cell is types.Cell
