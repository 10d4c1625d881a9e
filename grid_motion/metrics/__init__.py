"""Trajectory metrics computed from recorded session positions."""

from grid_motion.metrics.trajectory import distance_travelled, mean_speed, stall_fraction

__all__ = [
    "distance_travelled",
    "mean_speed",
    "stall_fraction",
]
