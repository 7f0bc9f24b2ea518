"""Simple configuration loader for grid_nav."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional
import os

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"
CONFIG_ENV_VAR = "GRID_NAV_CONFIG"


@dataclass
class GridConfig:
    """Geometry of the world grid."""

    cell_size: float = 1.0
    origin: tuple[float, float] = (0.0, 0.0)


@dataclass
class PathfindingConfig:
    """Search strategy selection."""

    strategy: str = "theta_star"
    max_expansions: Optional[int] = None


@dataclass
class FollowerConfig:
    """Defaults for :class:`PathFollower` and the demo tick loop."""

    speed: float = 5.0
    arrival_tolerance: float = 0.1
    tick_rate: float = 30.0


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    pathfinding: PathfindingConfig
    follower: FollowerConfig
    logging: LoggingConfig


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid", {}) or {}
    origin = grid_data.get("origin", [0.0, 0.0])
    if len(origin) != 2:
        raise ValueError(f"grid.origin must have two values, got {origin!r}")
    grid = GridConfig(
        cell_size=float(grid_data.get("cell_size", 1.0)),
        origin=(float(origin[0]), float(origin[1])),
    )

    pf_data = data.get("pathfinding", {}) or {}
    max_expansions = pf_data.get("max_expansions")
    pathfinding = PathfindingConfig(
        strategy=str(pf_data.get("strategy", "theta_star")),
        max_expansions=int(max_expansions) if max_expansions is not None else None,
    )

    follower_data = data.get("follower", {}) or {}
    follower = FollowerConfig(
        speed=float(follower_data.get("speed", 5.0)),
        arrival_tolerance=float(follower_data.get("arrival_tolerance", 0.1)),
        tick_rate=float(follower_data.get("tick_rate", 30.0)),
    )

    logging_data = data.get("logging", {}) or {}
    logging_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(
        grid=grid, pathfinding=pathfinding, follower=follower, logging=logging_cfg
    )


def default_config_path() -> Path:
    """Return ``$GRID_NAV_CONFIG`` if set, else the bundled ``config.yaml``."""

    override = os.getenv(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config(path: Path | None = None) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    path = Path(path) if path is not None else default_config_path()
    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "CONFIG_PATH",
    "CONFIG_ENV_VAR",
    "Config",
    "GridConfig",
    "PathfindingConfig",
    "FollowerConfig",
    "LoggingConfig",
    "default_config_path",
    "load_config",
]
