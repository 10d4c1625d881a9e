"""Summary metrics over a sequence of continuous agent positions.

Positions are ``(x, y)`` pairs sampled once per frame, starting with the
position before the first frame.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np


def _as_array(positions: Sequence[tuple[float, float]]) -> np.ndarray:
    arr = np.asarray(positions, dtype=np.float64)
    if arr.size == 0:
        return arr.reshape(0, 2)
    if arr.ndim != 2 or arr.shape[1] != 2:
        raise ValueError("positions must be a sequence of (x, y) pairs")
    return arr


def _step_lengths(positions: Sequence[tuple[float, float]]) -> np.ndarray:
    arr = _as_array(positions)
    if len(arr) < 2:
        return np.zeros(0, dtype=np.float64)
    deltas = np.diff(arr, axis=0)
    return np.hypot(deltas[:, 0], deltas[:, 1])


def distance_travelled(positions: Sequence[tuple[float, float]]) -> float:
    """Total polyline length through ``positions``."""
    return float(np.sum(_step_lengths(positions)))


def mean_speed(positions: Sequence[tuple[float, float]], dt: float) -> float:
    """Average speed in cells per second for frames of ``dt`` seconds."""
    if dt <= 0.0:
        raise ValueError("dt must be > 0")
    steps = _step_lengths(positions)
    if steps.size == 0:
        return 0.0
    return float(np.sum(steps) / (steps.size * dt))


def stall_fraction(positions: Sequence[tuple[float, float]]) -> float:
    """Fraction of frames in which the position did not change."""
    steps = _step_lengths(positions)
    if steps.size == 0:
        return 0.0
    return float(np.count_nonzero(steps == 0.0) / steps.size)
