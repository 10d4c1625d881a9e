"""Configuration layer: constants and typed config dataclasses."""

from grid_motion.config.constants import (
    FLUSH_THRESHOLD,
    FRAME_RATE,
    MAX_SPEED,
    MOVEMENT_ENABLED,
    PATH_TIME,
    SESSION_FRAMES,
    SNAP_EPSILON,
)
from grid_motion.config.types import MotionConfig, SessionConfig, SessionResult

__all__ = [
    "FLUSH_THRESHOLD",
    "FRAME_RATE",
    "MAX_SPEED",
    "MOVEMENT_ENABLED",
    "MotionConfig",
    "PATH_TIME",
    "SESSION_FRAMES",
    "SNAP_EPSILON",
    "SessionConfig",
    "SessionResult",
]
