"""Disjoint-set over integer cell ids, backed by flat numpy arrays.

find is iterative with path compression and union merges by component
size, so chains stay short regardless of merge order. The partition it
produces is the same as a naive representative map would give.
"""

import numpy as np

from mazes.errors import UnknownCellError


class DisjointSet:
    """Union-find over the ids 0 .. n-1.

    Example:
        >>> ds = DisjointSet(4)
        >>> root = ds.union(ds.find(0), ds.find(1))
        >>> ds.connected(0, 1)
        True
        >>> ds.components
        3
    """

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        self._parent = np.arange(n, dtype=np.int64)
        self._size = np.ones(n, dtype=np.int64)
        self.components = n

    def __len__(self) -> int:
        return len(self._parent)

    def _check(self, i: int) -> int:
        if not 0 <= i < len(self._parent):
            raise UnknownCellError(
                f"cell id {i} is outside [0, {len(self._parent)})"
            )
        return int(i)

    def find(self, i: int) -> int:
        """Return the representative of the component containing i."""
        i = self._check(i)
        parent = self._parent

        root = i
        while parent[root] != root:
            root = int(parent[root])

        # Path compression: point every node on the chain at the root
        while parent[i] != root:
            next_i = int(parent[i])
            parent[i] = root
            i = next_i

        return root

    def is_representative(self, i: int) -> bool:
        return int(self._parent[self._check(i)]) == i

    def union(self, rep_a: int, rep_b: int) -> int:
        """Merge two components given their representatives.

        Both arguments must already be representatives (results of find).
        The larger component absorbs the smaller one.

        Returns:
            The representative of the merged component.

        Raises:
            ValueError: If either argument is not a representative.
        """
        for rep in (rep_a, rep_b):
            if not self.is_representative(rep):
                raise ValueError(f"cell id {rep} is not a representative")

        if rep_a == rep_b:
            return rep_a

        if self._size[rep_a] < self._size[rep_b]:
            rep_a, rep_b = rep_b, rep_a
        self._parent[rep_b] = rep_a
        self._size[rep_a] += self._size[rep_b]
        self.components -= 1
        return rep_a

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def component_size(self, i: int) -> int:
        return int(self._size[self.find(i)])
