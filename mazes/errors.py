"""Exception taxonomy for maze generation and solving.

Every error here is structural: a bad argument or a broken invariant.
None of them is retried and no partial result is returned alongside them.
"""


class MazeError(Exception):
    """Base class for all maze core errors."""


class InvalidDimensionsError(MazeError, ValueError):
    """Raised when a grid is requested with a non-positive row or column count."""


class UnknownCellError(MazeError, KeyError):
    """Raised when a cell or cell id outside the grid is queried."""


class UnreachableGoalError(MazeError):
    """Raised when a search exhausts its frontier without reaching the goal.

    A correctly built spanning tree makes this impossible, so seeing it
    means the corridor set handed to the search is not a spanning tree.
    """


class BrokenChainError(MazeError):
    """Raised when a predecessor chain cannot be walked back to the start."""


class SpanningTreeError(MazeError):
    """Raised when a freshly built spanning tree fails validation."""
