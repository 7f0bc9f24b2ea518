# grid_nav/main.py
"""Demo bootstrap: plan across an ASCII map and walk the agent to the goal."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Sequence
import argparse
import logging

from dotenv import load_dotenv

from .config import CONFIG, Config, LoggingConfig, load_config
from .core.components.position import Position
from .core.spatial.grid_mapper import GridMapper
from .core.spatial.obstacle_map import ObstacleMap, find_glyph
from .core.time_manager import TimeManager
from .systems.movement.path_follower import PathFollower
from .systems.movement.pathfinding import GridSearch
from .systems.movement.strategies import get_search
from .systems.perception.line_of_sight import trace_path
from .utils.cli.terminal_view import TerminalView
from .utils.observer import average_fps, install_tick_observer

logger = logging.getLogger(__name__)

DEFAULT_MAP_PATH = Path("maps/demo.txt")
START_GLYPH = "S"
GOAL_GLYPH = "G"


def configure_logging(cfg: LoggingConfig) -> None:
    """Apply the global and per-module levels from ``cfg``."""

    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


configure_logging(CONFIG.logging)


@dataclass
class Scenario:
    """Everything needed to run one demo walk."""

    obstacle_map: ObstacleMap
    mapper: GridMapper
    search: GridSearch
    follower: PathFollower
    time_manager: TimeManager
    goal: Position


def bootstrap(map_text: str, cfg: Config, strategy: str | None = None) -> Scenario:
    """Build a :class:`Scenario` from an ASCII map holding ``S`` and ``G``."""

    start_cell = find_glyph(map_text, START_GLYPH)
    goal_cell = find_glyph(map_text, GOAL_GLYPH)
    if start_cell is None or goal_cell is None:
        raise ValueError(
            f"map must contain a start '{START_GLYPH}' and a goal '{GOAL_GLYPH}'"
        )

    obstacle_map = ObstacleMap.from_ascii(map_text)
    mapper = GridMapper(cfg.grid.cell_size, Position(*cfg.grid.origin))
    search = get_search(
        strategy or cfg.pathfinding.strategy, cfg.pathfinding.max_expansions
    )
    follower = PathFollower(
        search,
        obstacle_map,
        mapper,
        mapper.cell_to_world_center(start_cell),
        speed=cfg.follower.speed,
        arrival_tolerance=cfg.follower.arrival_tolerance,
    )
    logger.info(
        "[Bootstrap] %dx%d map, strategy=%s, start=%s goal=%s",
        obstacle_map.bounds[0],
        obstacle_map.bounds[1],
        search.name,
        start_cell,
        goal_cell,
    )
    return Scenario(
        obstacle_map=obstacle_map,
        mapper=mapper,
        search=search,
        follower=follower,
        time_manager=TimeManager(cfg.follower.tick_rate),
        goal=mapper.cell_to_world_center(goal_cell),
    )


def run(
    scenario: Scenario,
    max_ticks: int,
    view: TerminalView | None = None,
    realtime: bool = False,
) -> int:
    """Step the follower until it stops or ``max_ticks`` elapse.

    Returns the number of ticks run.
    """

    follower = scenario.follower
    tm = scenario.time_manager
    path_cells = (
        trace_path(follower.last_result.cells) if follower.last_result else []
    )

    while follower.is_moving and tm.tick_counter < max_ticks:
        follower.step(tm.delta)
        if realtime:
            tm.sleep_until_next_tick()
        else:
            tm.tick_counter += 1
        if view is not None:
            view.render(
                scenario.obstacle_map,
                path_cells,
                scenario.mapper.world_to_cell(follower.position),
            )
    return tm.tick_counter


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--map", type=Path, default=DEFAULT_MAP_PATH)
    parser.add_argument("--config", type=Path, default=None)
    parser.add_argument("--strategy", default=None, help="astar or theta_star")
    parser.add_argument("--ticks", type=int, default=10_000)
    parser.add_argument("--view", action="store_true", help="render each tick")
    parser.add_argument(
        "--realtime", action="store_true", help="sleep to the configured tick rate"
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    args = _parse_args(argv)
    cfg = load_config(args.config)
    configure_logging(cfg.logging)

    try:
        map_text = args.map.read_text(encoding="utf-8")
        scenario = bootstrap(map_text, cfg, args.strategy)
    except FileNotFoundError:
        logger.error("Map file not found: %s", args.map)
        return 1
    except ValueError as exc:
        logger.error("Cannot start scenario: %s", exc)
        return 1

    view: TerminalView | None = None
    if args.view:
        view = TerminalView(colour=True)
        view.toggle()
    if args.realtime:
        install_tick_observer(scenario.time_manager)

    events: List[str] = []
    scenario.follower.subscribe(None, lambda event: events.append(event.kind.value))

    result = scenario.follower.move_to(scenario.goal)
    if not result.success:
        logger.error("No path to goal: %s", result.message)
        return 1

    logger.info(
        "Path with %d waypoints, length %.2f, %d expansions",
        len(result.path),
        result.length,
        result.expansions,
    )
    ticks = run(scenario, args.ticks, view, args.realtime)
    logger.info(
        "Finished after %d ticks at %s (events: %s)",
        ticks,
        scenario.follower.position,
        ", ".join(events),
    )
    if args.realtime:
        logger.info("Average tick rate: %.1f", average_fps())
    if view is None:
        print(
            TerminalView().render_to_string(
                scenario.obstacle_map,
                trace_path(result.cells),
                scenario.mapper.world_to_cell(scenario.follower.position),
            )
        )
    return 0 if not scenario.follower.is_moving else 1


if __name__ == "__main__":
    raise SystemExit(main())
