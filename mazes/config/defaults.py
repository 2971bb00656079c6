"""Default configuration: the default maze parameters."""

from mazes.config.maze import MazeConfig

# All-default values: 10x10 grid, weights in [0, 100) from numpy,
# breadth-first search between opposite corners, seed=42.
DEFAULT_CONFIG = MazeConfig()
