"""Animation contract: per-tick cell states derived from a Solution.

A presenter steps through the exploration first, then the path from start
to goal, one cell per tick. Every cell is in exactly one of three states,
and a path cell overrides its earlier visited state once its tick passes.
"""

from collections.abc import Iterator
from enum import StrEnum

from mazes.grid.types import Cell
from mazes.search.types import Solution


class CellState(StrEnum):
    """Mutually exclusive visual states of a cell."""

    UNVISITED = "unvisited"
    VISITED = "visited"
    ON_PATH = "on_path"


def frame_count(solution: Solution) -> int:
    """Total number of ticks needed to show the whole solution."""
    return len(solution.visited_order) + len(solution.path)


def iter_frames(solution: Solution) -> Iterator[tuple[Cell, CellState]]:
    """Yield one (cell, new state) change per tick.

    Exploration cells come first in visitation order, then path cells in
    start -> goal order.
    """
    for cell in solution.visited_order:
        yield cell, CellState.VISITED
    for cell in solution.route:
        yield cell, CellState.ON_PATH


def cell_states(solution: Solution, step: int | None = None) -> dict[Cell, CellState]:
    """States of every cell touched within the first `step` ticks.

    Cells absent from the result are UNVISITED. With step=None all ticks
    are applied.
    """
    if step is not None and step < 0:
        raise ValueError(f"step must be non-negative, got {step}")

    states: dict[Cell, CellState] = {}
    for tick, (cell, state) in enumerate(iter_frames(solution)):
        if step is not None and tick >= step:
            break
        states[cell] = state
    return states
