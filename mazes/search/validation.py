"""Path validation against a corridor set."""

from mazes.grid.types import Cell, Edge, Grid


def validate_path(
    path: tuple[Cell, ...] | list[Cell],
    corridors: tuple[Edge, ...] | list[Edge],
    start: Cell,
    goal: Cell,
    grid: Grid | None = None,
) -> list[str]:
    """Check that path runs goal -> start along corridors without repeats.

    Args:
        path: Cells ordered goal -> start.
        corridors: Spanning-tree edges.
        start: Expected last cell.
        goal: Expected first cell.
        grid: Optional owning grid. When given, corridors that are not the
            grid's own edges are ignored and every cell must lie inside it.

    Returns:
        List of error strings (empty = valid path).
    """
    errors: list[str] = []
    if not path:
        return ["Path is empty"]

    if path[0] != goal:
        errors.append(f"Path starts at {path[0]}, expected goal {goal}")
    if path[-1] != start:
        errors.append(f"Path ends at {path[-1]}, expected start {start}")
    if len(set(path)) != len(path):
        errors.append("Path visits a cell more than once")

    if grid is not None:
        outside = [cell for cell in path if not grid.contains(cell)]
        if outside:
            errors.append(f"{len(outside)} path cells lie outside the grid: {outside[:3]}")
        corridors = [e for e in corridors if grid.owns(e)]

    links = {frozenset((e.first, e.second)) for e in corridors}
    for step, (a, b) in enumerate(zip(path, path[1:])):
        if frozenset((a, b)) not in links:
            errors.append(f"Step {step}: {a} -> {b} is not a corridor")

    return errors
