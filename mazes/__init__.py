"""Perfect maze generation with Kruskal's algorithm and tree search solving."""

from mazes.errors import (
    BrokenChainError,
    InvalidDimensionsError,
    MazeError,
    SpanningTreeError,
    UnknownCellError,
    UnreachableGoalError,
)
from mazes.grid.types import Cell, Edge, Grid
from mazes.pipeline import (
    Maze,
    generate_maze,
    generate_maze_from_config,
    solve_maze,
    solve_maze_from_config,
)
from mazes.search.types import SearchMode, Solution

__all__ = [
    "BrokenChainError",
    "Cell",
    "Edge",
    "Grid",
    "InvalidDimensionsError",
    "Maze",
    "MazeError",
    "SearchMode",
    "Solution",
    "SpanningTreeError",
    "UnknownCellError",
    "UnreachableGoalError",
    "generate_maze",
    "generate_maze_from_config",
    "solve_maze",
    "solve_maze_from_config",
]
