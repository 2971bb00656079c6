"""Grid and edge model: the cell lattice and its weighted adjacency edges."""

from mazes.grid.lattice import (
    DEFAULT_MAX_WEIGHT,
    LegacyRandom,
    WeightSource,
    build_grid,
    make_rng,
)
from mazes.grid.types import Cell, Edge, Grid

__all__ = [
    "Cell",
    "DEFAULT_MAX_WEIGHT",
    "Edge",
    "Grid",
    "LegacyRandom",
    "WeightSource",
    "build_grid",
    "make_rng",
]
