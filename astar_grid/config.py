"""Simple configuration loader for astar_grid."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


CONFIG_PATH = Path(__file__).resolve().parents[1] / "config.yaml"


@dataclass
class GridConfig:
    """Configuration values for the demo grid."""

    size: int = 15
    block_chance: int = 10
    seed: Optional[int] = None


@dataclass
class SearchConfig:
    """Move costs and the optional expansion budget."""

    diagonal_cost: int = 14
    orthogonal_cost: int = 10
    max_expansions: Optional[int] = None


@dataclass
class LoggingConfig:
    global_level: str = "INFO"
    module_levels: Dict[str, str] = field(default_factory=dict)


@dataclass
class Config:
    """Top level configuration dataclass."""

    grid: GridConfig
    search: SearchConfig
    logging: LoggingConfig


def _optional_int(value: Any) -> Optional[int]:
    return None if value is None else int(value)


def _parse_config(data: dict[str, Any]) -> Config:
    """Convert raw ``data`` into :class:`Config`."""

    grid_data = data.get("grid") or {}
    grid = GridConfig(
        size=int(grid_data.get("size", 15)),
        block_chance=int(grid_data.get("block_chance", 10)),
        seed=_optional_int(grid_data.get("seed")),
    )

    search_data = data.get("search") or {}
    search = SearchConfig(
        diagonal_cost=int(search_data.get("diagonal_cost", 14)),
        orthogonal_cost=int(search_data.get("orthogonal_cost", 10)),
        max_expansions=_optional_int(search_data.get("max_expansions")),
    )

    logging_data = data.get("logging") or {}
    log_cfg = LoggingConfig(
        global_level=str(logging_data.get("global_level", "INFO")).upper(),
        module_levels=dict(logging_data.get("module_levels") or {}),
    )

    return Config(grid=grid, search=search, logging=log_cfg)


def load_config(path: Path = CONFIG_PATH) -> Config:
    """Load configuration from ``path`` and return a :class:`Config`."""

    if path.is_file():
        raw = yaml.safe_load(path.read_text()) or {}
    else:
        raw = {}
    return _parse_config(raw)


# Load configuration at module import time.
CONFIG = load_config()


__all__ = [
    "CONFIG",
    "Config",
    "GridConfig",
    "SearchConfig",
    "LoggingConfig",
    "load_config",
]
