"""Maze configuration system with frozen, hashable, serializable dataclasses."""

from mazes.config.maze import GridConfig, MazeConfig, SolveConfig
from mazes.config.defaults import DEFAULT_CONFIG
from mazes.config.hashing import config_hash, maze_id
from mazes.config.serialization import config_to_json, config_from_json

__all__ = [
    "MazeConfig",
    "GridConfig",
    "SolveConfig",
    "DEFAULT_CONFIG",
    "config_hash",
    "maze_id",
    "config_to_json",
    "config_from_json",
]
