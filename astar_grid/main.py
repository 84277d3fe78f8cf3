# astar_grid/main.py
"""Interactive demo: random grid, prompted endpoints, replay loop."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from dotenv import load_dotenv

from .config import CONFIG, Config, load_config
from .core.errors import InvalidEndpoint
from .core.grid import Grid
from .search.engine import SearchEngine
from .utils.cli.prompts import ReadFn, WriteFn, ask_coordinate, ask_yes_no
from .utils.cli.terminal_view import LEGEND, render_grid
from .utils.generation import random_block_predicate


log_level_str = CONFIG.logging.global_level
numeric_level = getattr(logging, log_level_str, logging.INFO)
logging.basicConfig(
    level=numeric_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    force=True
)
logger = logging.getLogger(__name__)

# Apply per-module levels if defined
if CONFIG.logging.module_levels:
    for module_name, level_str in CONFIG.logging.module_levels.items():
        module_numeric_level = getattr(logging, level_str.upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", level_str, module_name)


def bootstrap(config_path: str | Path | None = None) -> tuple[Grid, Config]:
    """Load configuration and build the demo grid it describes."""

    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    if config_path is None:
        config_path = os.getenv("ASTAR_GRID_CONFIG", "config.yaml")
    cfg = load_config(Path(config_path))

    predicate = random_block_predicate(
        cfg.grid.size, cfg.grid.block_chance, seed=cfg.grid.seed
    )
    grid = Grid(cfg.grid.size, predicate)
    blocked = sum(1 for tile in grid.tiles() if tile.blocked)
    logger.info(
        "[Bootstrap] %dx%d grid, %d blocked tiles (1-in-%d, seed=%s)",
        grid.size,
        grid.size,
        blocked,
        cfg.grid.block_chance,
        cfg.grid.seed,
    )
    return grid, cfg


def run_once(grid: Grid, cfg: Config, read: ReadFn = input, write: WriteFn = print) -> bool:
    """Prompt for endpoints, search once and print the outcome."""

    while True:
        start = ask_coordinate("start", grid.size, read, write)
        goal = ask_coordinate("goal", grid.size, read, write)
        write(render_grid(grid, start, goal))
        engine = SearchEngine(
            grid,
            cfg.search.diagonal_cost,
            cfg.search.orthogonal_cost,
            cfg.search.max_expansions,
        )
        try:
            result = engine.find_path(start, goal)
        except InvalidEndpoint as exc:
            write(f"Invalid tile: {exc}")
            continue
        break

    if result.found:
        write("Path Found!")
        write(render_grid(grid, start, goal, result.path))
    else:
        write("Path not found!")
    return result.found


def run(grid: Grid, cfg: Config, read: ReadFn = input, write: WriteFn = print) -> None:
    """Replay loop: search, then reset and repeat while the user answers ``y``."""

    while True:
        write("-------------------------------------------")
        write(LEGEND)
        write("Please provide valid input")
        write(render_grid(grid))
        run_once(grid, cfg, read, write)
        if not ask_yes_no("Do you want to replay?(y/n): ", read):
            break
        grid.reset()
        write("\n")


def main() -> None:
    grid, cfg = bootstrap()
    try:
        run(grid, cfg)
    except (KeyboardInterrupt, EOFError):
        logger.info("Input closed. Shutting down...")


if __name__ == "__main__":
    main()
