"""Spanning tree construction: disjoint-set, Kruskal builder and validation."""

from mazes.tree.kruskal import build_spanning_tree, sort_edges
from mazes.tree.types import SpanningTree
from mazes.tree.union_find import DisjointSet
from mazes.tree.validation import corridor_adjacency, validate_spanning_tree

__all__ = [
    "DisjointSet",
    "SpanningTree",
    "build_spanning_tree",
    "corridor_adjacency",
    "sort_edges",
    "validate_spanning_tree",
]
