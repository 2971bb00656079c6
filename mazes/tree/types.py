"""Spanning tree container produced by Kruskal construction."""

from dataclasses import dataclass

from mazes.grid.types import Edge


@dataclass(frozen=True)
class SpanningTree:
    """Partition of a grid's edges into corridors (tree) and walls.

    corridors are in acceptance order (ascending weight); walls are in the
    order they were rejected or left unexamined, also ascending weight.
    """

    corridors: tuple[Edge, ...]
    walls: tuple[Edge, ...]
