import pytest

from grid_nav.config import (
    CONFIG,
    CONFIG_ENV_VAR,
    CONFIG_PATH,
    FollowerConfig,
    GridConfig,
    PathfindingConfig,
    default_config_path,
    load_config,
)


def test_config_module_loads_config():
    assert isinstance(CONFIG.grid, GridConfig)
    assert isinstance(CONFIG.pathfinding, PathfindingConfig)
    assert isinstance(CONFIG.follower, FollowerConfig)
    assert CONFIG.grid.cell_size == 1.0
    assert CONFIG.pathfinding.strategy == "theta_star"
    assert CONFIG.pathfinding.max_expansions is None
    assert CONFIG.follower.speed == 5.0
    assert CONFIG.logging.module_levels["grid_nav.systems.movement.pathfinding"] == "WARNING"


def test_missing_file_gives_defaults(tmp_path):
    cfg = load_config(tmp_path / "absent.yaml")
    assert cfg.grid == GridConfig()
    assert cfg.pathfinding == PathfindingConfig()
    assert cfg.follower == FollowerConfig()
    assert cfg.logging.global_level == "INFO"


def test_partial_yaml_overrides(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(
        "grid:\n"
        "  cell_size: 0.5\n"
        "  origin: [2, -3]\n"
        "pathfinding:\n"
        "  strategy: astar\n"
        "  max_expansions: 200\n"
        "logging:\n"
        "  global_level: debug\n"
    )
    cfg = load_config(path)
    assert cfg.grid.cell_size == 0.5
    assert cfg.grid.origin == (2.0, -3.0)
    assert cfg.pathfinding.strategy == "astar"
    assert cfg.pathfinding.max_expansions == 200
    assert cfg.follower == FollowerConfig()
    assert cfg.logging.global_level == "DEBUG"


def test_bad_origin_rejected(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("grid:\n  origin: [1, 2, 3]\n")
    with pytest.raises(ValueError):
        load_config(path)


def test_env_var_selects_config_file(tmp_path, monkeypatch):
    path = tmp_path / "other.yaml"
    path.write_text("follower:\n  speed: 9\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))
    assert default_config_path() == path
    assert load_config().follower.speed == 9.0
    monkeypatch.delenv(CONFIG_ENV_VAR)
    assert default_config_path() == CONFIG_PATH
