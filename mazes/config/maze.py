"""Maze configuration dataclasses, all frozen and slotted."""

from dataclasses import dataclass, field

from mazes.errors import InvalidDimensionsError
from mazes.search.types import SearchMode

WEIGHT_SOURCES = ("numpy", "legacy")


@dataclass(frozen=True, slots=True)
class GridConfig:
    """Lattice size and edge weight parameters."""

    rows: int = 10
    cols: int = 10
    max_weight: int = 100  # weights drawn from [0, max_weight)
    weight_source: str = "numpy"  # "numpy" or "legacy"

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise InvalidDimensionsError(
                f"Grid dimensions must be positive, got rows={self.rows}, "
                f"cols={self.cols}"
            )
        if self.max_weight <= 0:
            raise ValueError(f"max_weight must be positive, got {self.max_weight}")
        if self.weight_source not in WEIGHT_SOURCES:
            raise ValueError(
                f"weight_source must be one of {WEIGHT_SOURCES}, "
                f"got {self.weight_source!r}"
            )


@dataclass(frozen=True, slots=True)
class SolveConfig:
    """Search parameters. start/goal default to the top-left/bottom-right corners."""

    mode: str = SearchMode.BREADTH_FIRST.value
    start: tuple[int, int] | None = None  # (row, col)
    goal: tuple[int, int] | None = None  # (row, col)

    def __post_init__(self) -> None:
        # Raises ValueError for anything but a mode name or "b"/"d"
        SearchMode.from_key(self.mode)

    @property
    def search_mode(self) -> SearchMode:
        return SearchMode.from_key(self.mode)


@dataclass(frozen=True, slots=True)
class MazeConfig:
    """Top-level configuration composing grid and solve settings.

    Cross-parameter validation runs in __post_init__ to reject
    start/goal cells that fall outside the grid.
    """

    grid: GridConfig = field(default_factory=GridConfig)
    solve: SolveConfig = field(default_factory=SolveConfig)
    seed: int = 42
    description: str = ""

    def __post_init__(self) -> None:
        for name in ("start", "goal"):
            cell = getattr(self.solve, name)
            if cell is None:
                continue
            row, col = cell
            if not (0 <= row < self.grid.rows and 0 <= col < self.grid.cols):
                raise ValueError(
                    f"solve.{name} {cell} is outside the "
                    f"{self.grid.rows}x{self.grid.cols} grid"
                )
