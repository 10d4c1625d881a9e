"""Motion segments, projected paths, and agent state."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TypeAlias

from grid_motion.domain.grid_world import CellCoordinate
from grid_motion.domain.vector import Vector2


@dataclass(frozen=True)
class MotionSegment:
    """Constant-velocity travel from ``a`` to ``b`` over ``duration`` seconds.

    ``cell`` is the cell the segment ends inside (or on the boundary of).
    ``blocked_by`` names the blocked cell that forced a velocity axis to be
    dropped for this segment, if any; it is diagnostic only.
    """

    a: Vector2
    b: Vector2
    v: Vector2
    duration: float
    cell: CellCoordinate
    blocked_by: CellCoordinate | None = None

    def __post_init__(self) -> None:
        if not math.isfinite(self.duration) or self.duration <= 0.0:
            raise ValueError(f"segment duration must be finite and > 0, got {self.duration!r}")

    def position_at(self, t: float) -> Vector2:
        """Position ``t`` seconds into the segment."""
        return self.a.add(self.v.mul(t))


Path: TypeAlias = list[MotionSegment]
"""Ordered segments; each segment's ``b`` is the next segment's ``a``."""


def path_duration(path: Path) -> float:
    """Total simulated time covered by ``path``."""
    return math.fsum(segment.duration for segment in path)


def path_endpoint(path: Path) -> Vector2 | None:
    """Continuous position at the end of ``path``, or ``None`` if empty."""
    if not path:
        return None
    return path[-1].b


def is_truncated(path: Path, path_time: float) -> bool:
    """True when ``path`` covers less than the look-ahead horizon.

    An empty path counts as truncated; callers that project with a zero
    velocity should not ask.
    """
    total = path_duration(path)
    return total < path_time and not math.isclose(total, path_time, rel_tol=1e-9, abs_tol=1e-12)


@dataclass(frozen=True)
class AgentState:
    """Continuous agent position and the grid cell it currently occupies."""

    position: Vector2
    cell: CellCoordinate

    @classmethod
    def at(cls, position: Vector2) -> AgentState:
        """State at ``position`` with the cell derived by flooring."""
        return cls(position=position, cell=(math.floor(position.x), math.floor(position.y)))
