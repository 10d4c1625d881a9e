"""Configuration dataclasses for projection, integration and sessions."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from grid_motion.config.constants import (
    FRAME_RATE,
    MAX_SPEED,
    MOVEMENT_ENABLED,
    PATH_TIME,
    SESSION_FRAMES,
    SNAP_EPSILON,
)

__all__ = [
    "MotionConfig",
    "SessionConfig",
    "SessionResult",
]


# ---------------------------------------------------------------------------
# Core motion knobs
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MotionConfig:
    """Host-supplied constants consumed by the projector and integrator.

    ``strict_invariants`` follows ``__debug__``: geometry invariant
    violations raise under a normal interpreter and truncate the path
    under ``python -O``.
    """

    path_time: float = PATH_TIME
    movement_enabled: bool = MOVEMENT_ENABLED
    snap_epsilon: float = SNAP_EPSILON
    strict_invariants: bool = __debug__

    def __post_init__(self) -> None:
        if not math.isfinite(self.path_time) or self.path_time <= 0.0:
            raise ValueError("path_time must be finite and > 0")
        if not math.isfinite(self.snap_epsilon) or self.snap_epsilon < 0.0:
            raise ValueError("snap_epsilon must be finite and >= 0")


# ---------------------------------------------------------------------------
# Headless session
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class SessionConfig:
    """Frame-loop settings for a headless session run."""

    frames: int = SESSION_FRAMES
    frame_rate: float = FRAME_RATE
    max_speed: float = MAX_SPEED
    record_paths: bool = False
    motion: MotionConfig = field(default_factory=MotionConfig)

    def __post_init__(self) -> None:
        if self.frames < 1:
            raise ValueError("frames must be >= 1")
        if not math.isfinite(self.frame_rate) or self.frame_rate <= 0.0:
            raise ValueError("frame_rate must be finite and > 0")
        if not math.isfinite(self.max_speed) or self.max_speed <= 0.0:
            raise ValueError("max_speed must be finite and > 0")

    @property
    def frame_dt(self) -> float:
        """Elapsed seconds handed to the integrator each frame."""
        return 1.0 / self.frame_rate


@dataclass(frozen=True)
class SessionResult:
    """Top-level result for one headless session."""

    session_id: str
    frames: int
    final_x: float
    final_y: float
    final_cell: tuple[int, int]
    distance_travelled: float
    moving_frames: int
    blocked_frames: int
