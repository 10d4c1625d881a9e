"""Simulation engine: headless frame loop, velocity schedules, Parquet persistence."""

from grid_motion.simulation.engine import run_session
from grid_motion.simulation.persistence import flush_columns
from grid_motion.simulation.schedule import VelocityCommand, VelocitySchedule

__all__ = [
    "VelocityCommand",
    "VelocitySchedule",
    "flush_columns",
    "run_session",
]
