"""Grid path projection and motion integration for a point agent."""

from grid_motion.config.types import MotionConfig
from grid_motion.domain.grid_world import CellState, GridWorld
from grid_motion.domain.integrator import advance
from grid_motion.domain.path import AgentState, MotionSegment, Path
from grid_motion.domain.projector import classify_cell, project
from grid_motion.domain.vector import Vector2

__all__ = [
    "AgentState",
    "CellState",
    "GridWorld",
    "MotionConfig",
    "MotionSegment",
    "Path",
    "Vector2",
    "advance",
    "classify_cell",
    "project",
]
