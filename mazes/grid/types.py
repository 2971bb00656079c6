"""Cell, edge and grid data structures for rectangular mazes."""

from collections.abc import Iterator
from dataclasses import dataclass

from mazes.errors import UnknownCellError


@dataclass(frozen=True, slots=True, order=True)
class Cell:
    """A position in the lattice, identified by zero-based (row, col)."""

    row: int
    col: int

    def index(self, cols: int) -> int:
        """Stable integer id of this cell in a grid with `cols` columns."""
        return self.row * cols + self.col

    def is_adjacent(self, other: "Cell") -> bool:
        """True iff the cells differ by one unit in exactly one coordinate."""
        return abs(self.row - other.row) + abs(self.col - other.col) == 1


@dataclass(frozen=True, slots=True)
class Edge:
    """Undirected weighted connection between two adjacent cells.

    `index` is the creation order within the owning grid. It fixes the
    order in which a cell sees its neighbors and breaks weight ties.
    """

    first: Cell
    second: Cell
    weight: int
    index: int

    def other(self, cell: Cell) -> Cell:
        """Return the endpoint opposite `cell`."""
        if cell == self.first:
            return self.second
        if cell == self.second:
            return self.first
        raise UnknownCellError(f"{cell} is not an endpoint of edge {self.index}")

    @property
    def same_row(self) -> bool:
        """True when the endpoints share a row (the edge separates columns)."""
        return self.first.row == self.second.row


@dataclass(frozen=True)
class Grid:
    """Immutable rows x cols lattice owning every candidate edge."""

    rows: int
    cols: int
    edges: tuple[Edge, ...]  # creation order: vertical pairs, then horizontal
    incidence: tuple[tuple[int, ...], ...]  # cell id -> edge indices, attachment order

    @property
    def n_cells(self) -> int:
        return self.rows * self.cols

    @property
    def top_left(self) -> Cell:
        return Cell(0, 0)

    @property
    def bottom_right(self) -> Cell:
        return Cell(self.rows - 1, self.cols - 1)

    def contains(self, cell: Cell) -> bool:
        return 0 <= cell.row < self.rows and 0 <= cell.col < self.cols

    def cell_id(self, cell: Cell) -> int:
        """Integer id of `cell`, raising UnknownCellError outside the grid."""
        if not self.contains(cell):
            raise UnknownCellError(
                f"{cell} is outside the {self.rows}x{self.cols} grid"
            )
        return cell.index(self.cols)

    def cell_at(self, cell_id: int) -> Cell:
        """Inverse of cell_id."""
        if not 0 <= cell_id < self.n_cells:
            raise UnknownCellError(
                f"cell id {cell_id} is outside [0, {self.n_cells})"
            )
        return Cell(cell_id // self.cols, cell_id % self.cols)

    def cells(self) -> Iterator[Cell]:
        """Iterate cells in row-major order."""
        for row in range(self.rows):
            for col in range(self.cols):
                yield Cell(row, col)

    def incident_edges(self, cell: Cell) -> list[Edge]:
        """Edges touching `cell`, in the order they were attached."""
        return [self.edges[i] for i in self.incidence[self.cell_id(cell)]]

    def owns(self, edge: Edge) -> bool:
        """True iff `edge` is this grid's edge at `edge.index`."""
        return 0 <= edge.index < len(self.edges) and self.edges[edge.index] == edge
