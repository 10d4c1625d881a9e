"""Centralized defaults for path projection and headless sessions.

Hosts normally override these through ``MotionConfig`` / ``SessionConfig``
rather than importing them directly.
"""

from __future__ import annotations

import sys

PATH_TIME = 0.5
"""Look-ahead horizon in seconds; no single integration step may exceed it."""

MOVEMENT_ENABLED = True
"""Global kill-switch for the motion integrator."""

SNAP_EPSILON = sys.float_info.epsilon
"""Coordinates this close to an integer are snapped onto the grid line."""

MAX_SPEED = 10.0
"""Speed cap in cells per second applied to resolved velocities."""

FRAME_RATE = 60
"""Default frames per second for headless sessions."""

SESSION_FRAMES = 120
"""Default number of frames per headless session."""

FLUSH_THRESHOLD = 8_192
"""Flush trajectory rows to Parquet once this in-memory row count is reached."""
