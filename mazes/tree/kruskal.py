"""Randomized maze carving as a minimum spanning tree (Kruskal, 1956).

Edges are considered in ascending weight order. An edge joining two
different components becomes a corridor and merges them; an edge inside a
single component would close a cycle and stays a wall. Construction stops
as soon as one component remains, and every unexamined edge is a wall.
"""

import logging

from mazes.grid.types import Edge, Grid
from mazes.tree.types import SpanningTree
from mazes.tree.union_find import DisjointSet

log = logging.getLogger(__name__)


def sort_edges(edges: tuple[Edge, ...] | list[Edge]) -> list[Edge]:
    """Sort edges by ascending weight.

    The sort is stable, so equal weights keep creation order. Tie-breaking
    is therefore deterministic but arbitrary with respect to geometry.
    """
    return sorted(edges, key=lambda e: e.weight)


def build_spanning_tree(grid: Grid) -> SpanningTree:
    """Split the grid's edges into a minimum spanning tree and its complement.

    Args:
        grid: Grid whose edges carry random weights.

    Returns:
        SpanningTree with rows*cols - 1 corridors and the remaining edges
        as walls.
    """
    ordered = sort_edges(grid.edges)
    components = DisjointSet(grid.n_cells)

    corridors: list[Edge] = []
    walls: list[Edge] = []
    examined = 0

    for edge in ordered:
        if components.components == 1:
            break
        examined += 1
        rep_a = components.find(grid.cell_id(edge.first))
        rep_b = components.find(grid.cell_id(edge.second))
        if rep_a != rep_b:
            corridors.append(edge)
            components.union(rep_a, rep_b)
        else:
            walls.append(edge)

    # Everything past the last merge is a wall
    walls.extend(ordered[examined:])

    log.debug(
        "Kruskal examined %d of %d edges: %d corridors, %d walls",
        examined,
        len(ordered),
        len(corridors),
        len(walls),
    )

    return SpanningTree(corridors=tuple(corridors), walls=tuple(walls))
