"""Unwind a predecessor map into the ordered path from goal back to start."""

from mazes.errors import BrokenChainError
from mazes.grid.types import Cell


def reconstruct(
    predecessors: dict[Cell, Cell], goal: Cell, start: Cell
) -> list[Cell]:
    """Walk predecessors from goal to start, both inclusive.

    Args:
        predecessors: cell -> cell it was first reached from.
        goal: First cell of the returned path.
        start: Last cell of the returned path.

    Returns:
        Cells ordered goal -> start.

    Raises:
        BrokenChainError: If a cell on the walk has no predecessor, or the
            walk revisits a cell, before start is reached.
    """
    path = [goal]
    seen = {goal}
    cell = goal
    while cell != start:
        if cell not in predecessors:
            raise BrokenChainError(
                f"No predecessor recorded for {cell} after {len(path)} steps "
                f"back from {goal}; cannot reach {start}"
            )
        cell = predecessors[cell]
        if cell in seen:
            raise BrokenChainError(
                f"Predecessor chain from {goal} loops at {cell}"
            )
        seen.add(cell)
        path.append(cell)
    return path
