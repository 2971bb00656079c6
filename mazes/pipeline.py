"""Maze entry points: generate a perfect maze, then solve it.

generate_maze chains grid construction, Kruskal spanning tree and tree
validation. solve_maze chains search and path reconstruction. Each call
allocates its own transient state; results are immutable and can be
shared between independent solves.
"""

import logging
from dataclasses import dataclass

from mazes.config.maze import MazeConfig
from mazes.errors import SpanningTreeError
from mazes.grid.lattice import DEFAULT_MAX_WEIGHT, WeightSource, build_grid, make_rng
from mazes.grid.types import Cell, Edge, Grid
from mazes.search.reconstruct import reconstruct
from mazes.search.traversal import find_path
from mazes.search.types import SearchMode, Solution
from mazes.tree.kruskal import build_spanning_tree
from mazes.tree.validation import validate_spanning_tree

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class Maze:
    """A generated maze: its grid and the corridor/wall partition of its edges."""

    grid: Grid
    corridors: tuple[Edge, ...]
    walls: tuple[Edge, ...]
    seed: int | None

    @property
    def start(self) -> Cell:
        return self.grid.top_left

    @property
    def goal(self) -> Cell:
        return self.grid.bottom_right

    def solve(
        self,
        mode: SearchMode | str = SearchMode.BREADTH_FIRST,
        start: Cell | None = None,
        goal: Cell | None = None,
    ) -> Solution:
        """Solve between start and goal, defaulting to opposite corners."""
        return solve_maze(
            self.corridors,
            start if start is not None else self.start,
            goal if goal is not None else self.goal,
            mode,
            grid=self.grid,
        )


def generate_maze(
    rows: int,
    cols: int,
    seed: int | None = None,
    *,
    rng: WeightSource | None = None,
    max_weight: int = DEFAULT_MAX_WEIGHT,
) -> Maze:
    """Generate a perfect maze as a random minimum spanning tree.

    Args:
        rows: Number of rows (must be positive).
        cols: Number of columns (must be positive).
        seed: Seed for numpy.random.default_rng when rng is not given.
        rng: Explicit weight source; overrides seed.
        max_weight: Exclusive upper bound on edge weights.

    Returns:
        Maze with rows*cols - 1 corridors.

    Raises:
        InvalidDimensionsError: If rows or cols is not positive.
        SpanningTreeError: If the constructed tree fails validation.
    """
    if rng is None:
        rng = make_rng(seed)

    grid = build_grid(rows, cols, rng, max_weight)
    tree = build_spanning_tree(grid)

    errors = validate_spanning_tree(grid, tree)
    if errors:
        raise SpanningTreeError(
            f"Spanning tree for {rows}x{cols} grid is invalid: "
            f"{'; '.join(errors)}"
        )

    log.info(
        "Maze generated (rows=%d, cols=%d, edges=%d, corridors=%d, walls=%d)",
        rows,
        cols,
        len(grid.edges),
        len(tree.corridors),
        len(tree.walls),
    )
    return Maze(grid=grid, corridors=tree.corridors, walls=tree.walls, seed=seed)


def generate_maze_from_config(config: MazeConfig) -> Maze:
    """Generate the maze described by a MazeConfig."""
    rng = make_rng(config.seed, config.grid.weight_source)
    return generate_maze(
        config.grid.rows,
        config.grid.cols,
        config.seed,
        rng=rng,
        max_weight=config.grid.max_weight,
    )


def solve_maze(
    corridors: tuple[Edge, ...] | list[Edge],
    start: Cell,
    goal: Cell,
    mode: SearchMode | str = SearchMode.BREADTH_FIRST,
    grid: Grid | None = None,
) -> Solution:
    """Search the corridors from start to goal and reconstruct the path.

    Args:
        corridors: Spanning-tree edges of a maze.
        start: Cell the search begins at.
        goal: Cell to reach.
        mode: SearchMode or its name / "b" / "d" shortcut.
        grid: Optional grid for bounds-checking start and goal.

    Returns:
        Solution with the expansion order and the goal -> start path.

    Raises:
        UnknownCellError: If start or goal lies outside the maze.
        UnreachableGoalError: If goal cannot be reached.
        BrokenChainError: If the predecessor chain does not lead to start.
    """
    mode = mode if isinstance(mode, SearchMode) else SearchMode.from_key(mode)
    traversal = find_path(corridors, start, goal, mode, grid=grid)
    path = reconstruct(traversal.predecessors, goal, start)

    log.info(
        "Solved %s -> %s with %s search: %d cells visited, path length %d",
        start,
        goal,
        mode,
        len(traversal.visited_order),
        len(path),
    )
    return Solution(
        visited_order=traversal.visited_order,
        path=tuple(path),
        mode=mode,
    )


def solve_maze_from_config(maze: Maze, config: MazeConfig) -> Solution:
    """Solve a maze with the search settings of a MazeConfig."""
    start = Cell(*config.solve.start) if config.solve.start is not None else None
    goal = Cell(*config.solve.goal) if config.solve.goal is not None else None
    return maze.solve(config.solve.search_mode, start=start, goal=goal)
