"""Breadth-first and depth-first search over a corridor tree.

Maintains a deque frontier seeded with the start cell. Each round removes
the front cell: the goal ends the search, an already visited cell is
skipped, anything else is marked visited and its unvisited corridor
neighbors are recorded in the predecessor map and inserted (back for
breadth-first, front for depth-first).

Neighbor order is the grid's edge creation order, so identical input
always produces an identical visitation order.
"""

import logging
from collections import deque

from mazes.errors import UnknownCellError, UnreachableGoalError
from mazes.grid.types import Cell, Edge, Grid
from mazes.search.types import SearchMode, Traversal

log = logging.getLogger(__name__)


def corridor_neighbors(corridors: tuple[Edge, ...] | list[Edge]) -> dict[Cell, list[Cell]]:
    """Map each cell to its corridor neighbors, in edge creation order."""
    neighbors: dict[Cell, list[Cell]] = {}
    for edge in sorted(corridors, key=lambda e: e.index):
        neighbors.setdefault(edge.first, []).append(edge.second)
        neighbors.setdefault(edge.second, []).append(edge.first)
    return neighbors


def _check_endpoint(
    cell: Cell, neighbors: dict[Cell, list[Cell]], grid: Grid | None
) -> None:
    if grid is not None:
        grid.cell_id(cell)
    elif not neighbors:
        # No corridors: the only maze is the single cell at the origin
        if cell != Cell(0, 0):
            raise UnknownCellError(f"{cell} is outside a single-cell maze")
    elif cell not in neighbors:
        raise UnknownCellError(f"{cell} is not touched by any corridor")


def find_path(
    corridors: tuple[Edge, ...] | list[Edge],
    start: Cell,
    goal: Cell,
    mode: SearchMode | str = SearchMode.BREADTH_FIRST,
    grid: Grid | None = None,
) -> Traversal:
    """Search the corridor tree from start until goal is dequeued.

    Args:
        corridors: Spanning-tree edges.
        start: Cell the search begins at.
        goal: Cell that ends the search when removed from the frontier.
        mode: SearchMode or its name / "b" / "d" shortcut.
        grid: Optional grid used to bounds-check start and goal. Without
            it, both must be endpoints of some corridor (an empty corridor
            set is the single-cell maze and accepts only Cell(0, 0)).

    Returns:
        Traversal with the predecessor map and the expansion order.

    Raises:
        UnknownCellError: If start or goal lies outside the maze.
        UnreachableGoalError: If the frontier empties before goal.
    """
    mode = mode if isinstance(mode, SearchMode) else SearchMode.from_key(mode)
    neighbors = corridor_neighbors(corridors)
    _check_endpoint(start, neighbors, grid)
    _check_endpoint(goal, neighbors, grid)

    frontier: deque[Cell] = deque([start])
    visited: set[Cell] = set()
    visited_order: list[Cell] = []
    predecessors: dict[Cell, Cell] = {}

    if mode is SearchMode.BREADTH_FIRST:
        insert = frontier.append
    else:
        insert = frontier.appendleft

    while frontier:
        cell = frontier.popleft()
        if cell == goal:
            log.debug(
                "%s search reached %s after expanding %d cells",
                mode,
                goal,
                len(visited_order),
            )
            return Traversal(
                predecessors=predecessors,
                visited_order=tuple(visited_order),
            )
        if cell in visited:
            continue

        visited.add(cell)
        visited_order.append(cell)
        for neighbor in neighbors.get(cell, ()):
            if neighbor not in visited:
                predecessors[neighbor] = cell
                insert(neighbor)

    raise UnreachableGoalError(
        f"{mode} search from {start} exhausted its frontier after "
        f"{len(visited_order)} cells without reaching {goal}; "
        f"corridors do not form a spanning tree"
    )
