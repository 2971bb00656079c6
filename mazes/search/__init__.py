"""Tree search: BFS/DFS traversal, path reconstruction and animation frames."""

from mazes.search.frames import CellState, cell_states, frame_count, iter_frames
from mazes.search.reconstruct import reconstruct
from mazes.search.traversal import corridor_neighbors, find_path
from mazes.search.types import SearchMode, Solution, Traversal
from mazes.search.validation import validate_path

__all__ = [
    "CellState",
    "SearchMode",
    "Solution",
    "Traversal",
    "cell_states",
    "corridor_neighbors",
    "find_path",
    "frame_count",
    "iter_frames",
    "reconstruct",
    "validate_path",
]
