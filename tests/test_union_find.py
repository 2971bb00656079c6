"""Tests for the array-backed disjoint-set."""

import numpy as np
import pytest

from mazes.errors import UnknownCellError
from mazes.tree.union_find import DisjointSet


class TestFind:
    def test_initially_self_representative(self) -> None:
        ds = DisjointSet(6)
        for i in range(6):
            assert ds.find(i) == i
            assert ds.is_representative(i)
        assert ds.components == 6

    def test_out_of_range(self) -> None:
        ds = DisjointSet(3)
        with pytest.raises(UnknownCellError):
            ds.find(3)
        with pytest.raises(UnknownCellError):
            ds.find(-1)

    def test_find_returns_python_int(self) -> None:
        ds = DisjointSet(4)
        ds.union(ds.find(0), ds.find(1))
        assert type(ds.find(1)) is int


class TestUnion:
    def test_union_then_connected(self) -> None:
        ds = DisjointSet(4)
        root = ds.union(ds.find(0), ds.find(1))
        assert ds.connected(0, 1)
        assert ds.find(0) == ds.find(1) == root
        assert not ds.connected(0, 2)
        assert ds.components == 3

    def test_union_same_representative_is_noop(self) -> None:
        ds = DisjointSet(3)
        ds.union(0, 1)
        root = ds.find(1)
        assert ds.union(root, root) == root
        assert ds.components == 2

    def test_union_requires_representatives(self) -> None:
        ds = DisjointSet(3)
        root = ds.union(0, 1)
        child = 1 if root == 0 else 0
        with pytest.raises(ValueError, match="not a representative"):
            ds.union(child, 2)

    def test_union_by_size(self) -> None:
        ds = DisjointSet(5)
        big = ds.union(ds.find(0), ds.find(1))
        big = ds.union(big, ds.find(2))
        merged = ds.union(ds.find(3), big)
        assert merged == big
        assert ds.component_size(3) == 4

    def test_union_find_property(self) -> None:
        """union(find(a), find(b)) always leaves a and b connected."""
        rng = np.random.default_rng(42)
        ds = DisjointSet(50)
        for _ in range(200):
            a, b = (int(x) for x in rng.integers(0, 50, size=2))
            ds.union(ds.find(a), ds.find(b))
            assert ds.find(a) == ds.find(b)

    def test_components_counter_reaches_one(self) -> None:
        n = 30
        ds = DisjointSet(n)
        for i in range(1, n):
            ds.union(ds.find(i - 1), ds.find(i))
        assert ds.components == 1
        rep = ds.find(0)
        assert all(ds.find(i) == rep for i in range(n))

    def test_long_chain_resolves(self) -> None:
        """A union order that would build a linear chain stays shallow."""
        n = 5000
        ds = DisjointSet(n)
        for i in range(n - 1, 0, -1):
            ds.union(ds.find(i), ds.find(i - 1))
        assert ds.components == 1
        assert ds.connected(0, n - 1)
        assert len(ds) == n
