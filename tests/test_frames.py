"""Tests for the per-tick animation states of a solution."""

import pytest

from mazes.grid import Cell
from mazes.search import CellState, SearchMode, Solution, cell_states, frame_count, iter_frames


def _solution() -> Solution:
    # Breadth-first solve of a 2x3 corridor chain (0,0)-(0,1)-(0,2)-(1,2)
    return Solution(
        visited_order=(Cell(0, 0), Cell(0, 1), Cell(0, 2)),
        path=(Cell(1, 2), Cell(0, 2), Cell(0, 1), Cell(0, 0)),
        mode=SearchMode.BREADTH_FIRST,
    )


class TestFrames:
    def test_frame_count(self) -> None:
        assert frame_count(_solution()) == 7

    def test_exploration_then_route(self) -> None:
        frames = list(iter_frames(_solution()))
        assert frames[:3] == [
            (Cell(0, 0), CellState.VISITED),
            (Cell(0, 1), CellState.VISITED),
            (Cell(0, 2), CellState.VISITED),
        ]
        assert [cell for cell, _ in frames[3:]] == [
            Cell(0, 0), Cell(0, 1), Cell(0, 2), Cell(1, 2)
        ]
        assert all(state is CellState.ON_PATH for _, state in frames[3:])


class TestCellStates:
    def test_no_ticks(self) -> None:
        assert cell_states(_solution(), step=0) == {}

    def test_mid_exploration(self) -> None:
        assert cell_states(_solution(), step=2) == {
            Cell(0, 0): CellState.VISITED,
            Cell(0, 1): CellState.VISITED,
        }

    def test_path_overrides_visited(self) -> None:
        states = cell_states(_solution(), step=5)
        assert states[Cell(0, 0)] is CellState.ON_PATH
        assert states[Cell(0, 1)] is CellState.ON_PATH
        assert states[Cell(0, 2)] is CellState.VISITED

    def test_final_states(self) -> None:
        states = cell_states(_solution())
        assert set(states.values()) == {CellState.ON_PATH}
        assert len(states) == 4

    def test_states_are_exclusive(self) -> None:
        solution = Solution(
            visited_order=(Cell(0, 0), Cell(1, 0), Cell(0, 1)),
            path=(Cell(0, 1), Cell(0, 0)),
            mode=SearchMode.BREADTH_FIRST,
        )
        assert cell_states(solution) == {
            Cell(0, 0): CellState.ON_PATH,
            Cell(1, 0): CellState.VISITED,
            Cell(0, 1): CellState.ON_PATH,
        }

    def test_negative_step(self) -> None:
        with pytest.raises(ValueError):
            cell_states(_solution(), step=-1)
