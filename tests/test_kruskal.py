"""Tests for Kruskal spanning tree construction and tree validation."""

from dataclasses import replace

import numpy as np
import pytest
from scipy.sparse import csr_matrix
from scipy.sparse.csgraph import minimum_spanning_tree

from mazes.grid import Cell, Edge, LegacyRandom, build_grid
from mazes.tree import (
    DisjointSet,
    SpanningTree,
    build_spanning_tree,
    sort_edges,
    validate_spanning_tree,
)


def _reference_grid():
    """2 rows x 3 cols with legacy seed 5: weights 87, 92, 74, 24, 6, 5, 54."""
    return build_grid(2, 3, LegacyRandom(5))


class TestSortEdges:
    def test_ascending(self) -> None:
        ordered = sort_edges(_reference_grid().edges)
        assert [e.weight for e in ordered] == [5, 6, 24, 54, 74, 87, 92]

    def test_ties_keep_creation_order(self) -> None:
        edges = [
            Edge(Cell(0, 0), Cell(0, 1), weight=3, index=0),
            Edge(Cell(0, 1), Cell(0, 2), weight=1, index=1),
            Edge(Cell(0, 2), Cell(0, 3), weight=3, index=2),
            Edge(Cell(0, 3), Cell(0, 4), weight=1, index=3),
        ]
        assert [e.index for e in sort_edges(edges)] == [1, 3, 0, 2]


class TestBuildSpanningTree:
    def test_reference_scenario(self) -> None:
        grid = _reference_grid()
        tree = build_spanning_tree(grid)
        assert len(grid.edges) == 7
        assert len(tree.corridors) == 5
        assert len(tree.walls) == 2
        assert [e.index for e in tree.corridors] == [5, 4, 3, 6, 2]
        assert [e.index for e in tree.walls] == [0, 1]

    @pytest.mark.parametrize(
        "rows,cols,seed", [(1, 1, 0), (1, 8, 1), (6, 1, 2), (4, 4, 3), (9, 13, 4)]
    )
    def test_sizes(self, rows: int, cols: int, seed: int) -> None:
        grid = build_grid(rows, cols, np.random.default_rng(seed))
        tree = build_spanning_tree(grid)
        assert len(tree.corridors) == rows * cols - 1
        assert len(tree.walls) == rows * cols - rows - cols + 1

    def test_single_component(self) -> None:
        grid = build_grid(8, 8, np.random.default_rng(7))
        tree = build_spanning_tree(grid)
        ds = DisjointSet(grid.n_cells)
        for e in tree.corridors:
            ds.union(ds.find(grid.cell_id(e.first)), ds.find(grid.cell_id(e.second)))
        assert ds.components == 1
        cells = list(grid.cells())
        for a in cells[::7]:
            for b in cells[::5]:
                assert ds.connected(grid.cell_id(a), grid.cell_id(b))

    def test_minimum_weight(self) -> None:
        """Total corridor weight matches scipy's minimum spanning tree."""
        grid = build_grid(6, 7, np.random.default_rng(5))
        tree = build_spanning_tree(grid)

        # Shift weights by 1 so zero-weight edges are not dropped as missing
        n = grid.n_cells
        rows = [grid.cell_id(e.first) for e in grid.edges]
        cols = [grid.cell_id(e.second) for e in grid.edges]
        data = [e.weight + 1 for e in grid.edges]
        mst = minimum_spanning_tree(csr_matrix((data, (rows, cols)), shape=(n, n)))
        expected = int(mst.sum()) - (n - 1)

        assert sum(e.weight for e in tree.corridors) == expected

    def test_corridors_ascending(self) -> None:
        tree = build_spanning_tree(build_grid(5, 5, np.random.default_rng(9)))
        weights = [e.weight for e in tree.corridors]
        assert weights == sorted(weights)

    def test_deterministic(self) -> None:
        t1 = build_spanning_tree(build_grid(10, 10, np.random.default_rng(21)))
        t2 = build_spanning_tree(build_grid(10, 10, np.random.default_rng(21)))
        assert [e.index for e in t1.corridors] == [e.index for e in t2.corridors]


class TestValidateSpanningTree:
    def test_valid_tree(self) -> None:
        grid = build_grid(5, 6, np.random.default_rng(1))
        assert validate_spanning_tree(grid, build_spanning_tree(grid)) == []

    def test_single_cell_tree_is_valid(self) -> None:
        grid = build_grid(1, 1, np.random.default_rng(1))
        assert validate_spanning_tree(grid, SpanningTree((), ())) == []

    def test_missing_corridor(self) -> None:
        grid = _reference_grid()
        tree = build_spanning_tree(grid)
        broken = SpanningTree(tree.corridors[:-1], tree.walls)
        errors = validate_spanning_tree(grid, broken)
        assert any("corridors" in e for e in errors)
        assert any("components" in e for e in errors)
        assert any("cover" in e for e in errors)

    def test_edge_in_both_sets(self) -> None:
        grid = _reference_grid()
        tree = build_spanning_tree(grid)
        broken = replace(tree, walls=tree.walls + (tree.corridors[0],))
        errors = validate_spanning_tree(grid, broken)
        assert any("both corridor and wall" in e for e in errors)

    def test_isolated_cell_detected(self) -> None:
        """Swapping a wall in for a leaf corridor keeps the counts but disconnects a cell."""
        grid = build_grid(3, 3, np.random.default_rng(2))
        tree = build_spanning_tree(grid)

        def degree(cell: Cell) -> int:
            return sum(1 for e in tree.corridors if cell in (e.first, e.second))

        leaf = next(c for c in grid.cells() if degree(c) == 1)
        dropped = next(e for e in tree.corridors if leaf in (e.first, e.second))
        # A leaf touches at most 3 walls and a 3x3 maze has 4
        wall = next(w for w in tree.walls if leaf not in (w.first, w.second))

        corridors = tuple(e for e in tree.corridors if e is not dropped) + (wall,)
        walls = tuple(w for w in tree.walls if w is not wall) + (dropped,)
        errors = validate_spanning_tree(grid, SpanningTree(corridors, walls))
        assert len(errors) == 1
        assert "2 components" in errors[0]

    def test_foreign_edge_detected(self) -> None:
        """An edge with a valid index but a different weight is not the grid's."""
        grid = _reference_grid()
        tree = build_spanning_tree(grid)
        forged = replace(tree.corridors[0], weight=tree.corridors[0].weight + 1)
        broken = replace(tree, corridors=(forged,) + tree.corridors[1:])
        errors = validate_spanning_tree(grid, broken)
        assert any("do not belong to the grid" in e for e in errors)
        assert any("2 components" in e for e in errors)

    def test_edge_with_borrowed_index(self) -> None:
        """Same index and weight but different endpoints still counts as foreign."""
        grid = _reference_grid()
        tree = build_spanning_tree(grid)
        wall = tree.walls[0]
        impostor = Edge(Cell(0, 0), Cell(0, 1), weight=wall.weight, index=wall.index)
        mixed = replace(tree, walls=(impostor,) + tree.walls[1:])
        errors = validate_spanning_tree(grid, mixed)
        assert errors == ["1 edges do not belong to the grid: indices [0]"]
