"""Domain layer: vectors, grid world, path projection and integration."""

from grid_motion.domain.errors import PathInvariantError
from grid_motion.domain.grid_world import CellCoordinate, CellState, GridQuery, GridWorld
from grid_motion.domain.integrator import advance
from grid_motion.domain.path import (
    AgentState,
    MotionSegment,
    Path,
    is_truncated,
    path_duration,
    path_endpoint,
)
from grid_motion.domain.projector import classify_cell, project
from grid_motion.domain.vector import Vector2, floored_mod, snap_to_integer

__all__ = [
    "AgentState",
    "CellCoordinate",
    "CellState",
    "GridQuery",
    "GridWorld",
    "MotionSegment",
    "Path",
    "PathInvariantError",
    "Vector2",
    "advance",
    "classify_cell",
    "floored_mod",
    "is_truncated",
    "path_duration",
    "path_endpoint",
    "project",
    "snap_to_integer",
]
