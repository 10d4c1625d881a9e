"""Sparse grid of open and blocked cells.

The motion core only ever reads a world through ``classify``. Coordinates
with no entry are treated as blocked (unexplored space is wall).
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, TypeAlias

CellCoordinate: TypeAlias = tuple[int, int]
"""Integer ``(x, y)`` cell address, obtained by flooring a continuous position."""


class CellState(Enum):
    """Classification of a single grid cell."""

    OPEN = "open"
    BLOCKED = "blocked"


class GridQuery(Protocol):
    """Read-only view of a world consumed by the projector."""

    def classify(self, coord: CellCoordinate) -> CellState: ...


@dataclass
class GridWorld:
    """Mapping from integer cell coordinates to cell state."""

    cells: dict[CellCoordinate, CellState] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for coord, state in self.cells.items():
            _check_coordinate(coord)
            if not isinstance(state, CellState):
                raise ValueError(f"cell state must be a CellState, got {state!r}")

    @classmethod
    def from_open_cells(cls, coords: Iterable[CellCoordinate]) -> GridWorld:
        """Build a world in which exactly ``coords`` are open."""
        return cls(cells={tuple(c): CellState.OPEN for c in coords})  # type: ignore[misc]

    @classmethod
    def from_ascii(
        cls,
        text: str,
        open_char: str = ".",
        blocked_char: str = "#",
        origin: CellCoordinate = (0, 0),
    ) -> GridWorld:
        """Parse a text map.

        The first non-empty line is the top row (highest y) so the picture
        reads the same way velocities point: +y is up. Column 0 of the last
        line sits at ``origin``. Any other character leaves the cell absent.
        """
        if open_char == blocked_char:
            raise ValueError("open_char and blocked_char must differ")
        rows = [line.rstrip("\n") for line in text.splitlines() if line.strip()]
        ox, oy = origin
        cells: dict[CellCoordinate, CellState] = {}
        for row_index, line in enumerate(rows):
            y = oy + (len(rows) - 1 - row_index)
            for col, char in enumerate(line):
                if char == open_char:
                    cells[(ox + col, y)] = CellState.OPEN
                elif char == blocked_char:
                    cells[(ox + col, y)] = CellState.BLOCKED
        return cls(cells=cells)

    def classify(self, coord: CellCoordinate) -> CellState:
        return self.cells.get(coord, CellState.BLOCKED)

    def is_open(self, coord: CellCoordinate) -> bool:
        return self.classify(coord) is CellState.OPEN

    def open_cells(self) -> Iterator[CellCoordinate]:
        return (coord for coord, state in self.cells.items() if state is CellState.OPEN)

    def __contains__(self, coord: object) -> bool:
        return coord in self.cells

    def __len__(self) -> int:
        return len(self.cells)


def _check_coordinate(coord: object) -> None:
    if (
        not isinstance(coord, tuple)
        or len(coord) != 2
        or not all(isinstance(c, int) and not isinstance(c, bool) for c in coord)
    ):
        raise ValueError(f"cell coordinate must be a pair of ints, got {coord!r}")
