"""Structural checks for a constructed spanning tree.

Verifies the corridor/wall partition against the grid it was built from:
1. Corridor count is rows*cols - 1 and wall count is the remainder
2. Every edge is the grid's own and corridors and walls partition them
3. Corridors connect every cell (one connected component)

Together with the count in (1), connectivity in (3) implies acyclicity.
"""

import logging

import numpy as np
import scipy.sparse
from scipy.sparse.csgraph import connected_components

from mazes.grid.types import Edge, Grid
from mazes.tree.types import SpanningTree

log = logging.getLogger(__name__)


def corridor_adjacency(grid: Grid, corridors: tuple[Edge, ...]) -> scipy.sparse.csr_matrix:
    """Symmetric sparse adjacency matrix of the corridor graph (n x n)."""
    n = grid.n_cells
    if not corridors:
        return scipy.sparse.csr_matrix((n, n), dtype=np.int8)

    a = np.array([grid.cell_id(e.first) for e in corridors], dtype=np.int64)
    b = np.array([grid.cell_id(e.second) for e in corridors], dtype=np.int64)
    rows = np.concatenate([a, b])
    cols = np.concatenate([b, a])
    data = np.ones(len(rows), dtype=np.int8)
    return scipy.sparse.csr_matrix((data, (rows, cols)), shape=(n, n))


def validate_spanning_tree(grid: Grid, tree: SpanningTree) -> list[str]:
    """Validate a spanning tree against its grid.

    Args:
        grid: The grid the tree was built from.
        tree: Corridor/wall partition to check.

    Returns:
        List of error strings (empty = valid tree).
    """
    errors: list[str] = []
    n = grid.n_cells

    # 1. Sizes
    expected_corridors = n - 1
    expected_walls = len(grid.edges) - expected_corridors
    if len(tree.corridors) != expected_corridors:
        errors.append(
            f"Expected {expected_corridors} corridors, found {len(tree.corridors)}"
        )
    if len(tree.walls) != expected_walls:
        errors.append(
            f"Expected {expected_walls} walls, found {len(tree.walls)}"
        )

    # 2. Every edge belongs to this grid, and together they partition its edges
    foreign = sorted(
        {e.index for e in tree.corridors + tree.walls if not grid.owns(e)}
    )
    if foreign:
        errors.append(
            f"{len(foreign)} edges do not belong to the grid: indices {foreign[:5]}"
        )
    corridor_ids = {e.index for e in tree.corridors}
    wall_ids = {e.index for e in tree.walls}
    overlap = corridor_ids & wall_ids
    if overlap:
        errors.append(
            f"{len(overlap)} edges are both corridor and wall: {sorted(overlap)[:5]}"
        )
    if corridor_ids | wall_ids != set(range(len(grid.edges))):
        errors.append("Corridors and walls do not cover the grid's edge list")

    # 3. Connectivity
    owned = tuple(e for e in tree.corridors if grid.owns(e))
    n_components, _ = connected_components(
        corridor_adjacency(grid, owned), directed=False
    )
    if n_components != 1:
        errors.append(f"Corridors form {n_components} components, expected 1")

    if errors:
        log.debug("Spanning tree validation found %d errors", len(errors))

    return errors
