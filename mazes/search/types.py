"""Search modes and result containers for maze solving."""

from dataclasses import dataclass
from enum import StrEnum

from mazes.grid.types import Cell


class SearchMode(StrEnum):
    """Frontier discipline for tree search.

    BREADTH_FIRST: new cells join the back of the frontier (queue).
    DEPTH_FIRST: new cells join the front of the frontier (stack).

    Both remove from the front. On a spanning tree they produce the same
    path and differ only in visitation order.
    """

    BREADTH_FIRST = "breadth-first"
    DEPTH_FIRST = "depth-first"

    @classmethod
    def from_key(cls, key: str) -> "SearchMode":
        """Parse a mode from its name or its single-key shortcut ("b" / "d")."""
        shortcuts = {"b": cls.BREADTH_FIRST, "d": cls.DEPTH_FIRST}
        if key in shortcuts:
            return shortcuts[key]
        try:
            return cls(key)
        except ValueError:
            raise ValueError(
                f"Unknown search mode {key!r}; expected one of "
                f"{sorted(shortcuts) + [m.value for m in cls]}"
            ) from None


@dataclass(frozen=True)
class Traversal:
    """Raw output of one search: who reached whom, and in what order.

    visited_order lists expanded cells; the goal is dequeued but never
    expanded, so it does not appear there.
    """

    predecessors: dict[Cell, Cell]  # cell -> cell it was first reached from
    visited_order: tuple[Cell, ...]


@dataclass(frozen=True)
class Solution:
    """Solved maze: exploration order and the unique path.

    path runs goal -> start; use route for start -> goal.
    """

    visited_order: tuple[Cell, ...]
    path: tuple[Cell, ...]
    mode: SearchMode

    @property
    def route(self) -> tuple[Cell, ...]:
        return tuple(reversed(self.path))

    @property
    def start(self) -> Cell:
        return self.path[-1]

    @property
    def goal(self) -> Cell:
        return self.path[0]
