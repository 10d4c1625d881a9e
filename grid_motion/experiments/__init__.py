"""Command-line entrypoints."""

from grid_motion.experiments.session import main

__all__ = ["main"]
