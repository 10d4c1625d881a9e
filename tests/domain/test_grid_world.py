"""Tests for grid_motion.domain.grid_world."""

from __future__ import annotations

import pytest

from grid_motion.domain.grid_world import CellState, GridWorld


class TestClassify:
    def test_missing_cell_is_blocked(self) -> None:
        world = GridWorld()
        assert world.classify((0, 0)) is CellState.BLOCKED
        assert not world.is_open((5, -3))

    def test_explicit_states(self) -> None:
        world = GridWorld(cells={(0, 0): CellState.OPEN, (1, 0): CellState.BLOCKED})
        assert world.classify((0, 0)) is CellState.OPEN
        assert world.classify((1, 0)) is CellState.BLOCKED
        assert (1, 0) in world
        assert len(world) == 2

    def test_rejects_non_integer_keys(self) -> None:
        with pytest.raises(ValueError, match="pair of ints"):
            GridWorld(cells={(0.5, 0): CellState.OPEN})  # type: ignore[dict-item]

    def test_rejects_non_enum_state(self) -> None:
        with pytest.raises(ValueError, match="CellState"):
            GridWorld(cells={(0, 0): "open"})  # type: ignore[dict-item]


class TestConstructors:
    def test_from_open_cells(self) -> None:
        world = GridWorld.from_open_cells([(0, 0), (2, 1)])
        assert set(world.open_cells()) == {(0, 0), (2, 1)}
        assert world.classify((1, 0)) is CellState.BLOCKED

    def test_from_ascii_top_row_is_highest_y(self) -> None:
        world = GridWorld.from_ascii("#.\n..\n")
        assert world.classify((0, 1)) is CellState.BLOCKED
        assert world.classify((1, 1)) is CellState.OPEN
        assert world.classify((0, 0)) is CellState.OPEN
        assert world.classify((1, 0)) is CellState.OPEN
        assert len(world) == 4

    def test_from_ascii_spaces_leave_cells_absent(self) -> None:
        world = GridWorld.from_ascii(". .")
        assert (1, 0) not in world
        assert world.classify((1, 0)) is CellState.BLOCKED

    def test_from_ascii_origin_offset(self) -> None:
        world = GridWorld.from_ascii("..", origin=(-3, 5))
        assert set(world.open_cells()) == {(-3, 5), (-2, 5)}

    def test_from_ascii_rejects_identical_markers(self) -> None:
        with pytest.raises(ValueError, match="differ"):
            GridWorld.from_ascii("..", open_char="x", blocked_char="x")
