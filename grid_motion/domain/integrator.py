"""Advance an agent along a projected path by an elapsed frame time."""

from __future__ import annotations

from grid_motion.config.types import MotionConfig
from grid_motion.domain.path import AgentState, Path


def advance(
    state: AgentState,
    path: Path,
    elapsed: float,
    config: MotionConfig | None = None,
) -> AgentState:
    """Consume ``elapsed`` seconds of ``path`` starting from its first segment.

    Fully consumed segments move the agent to their endpoint and cell. A
    partially consumed segment interpolates the position and leaves the cell
    untouched. Time left over after the last segment is dropped: the caller
    re-projects from the returned state on the next frame.
    """
    cfg = config or MotionConfig()
    if not cfg.movement_enabled or not path or elapsed <= 0.0:
        return state

    position = state.position
    cell = state.cell
    remaining = elapsed
    for segment in path:
        if remaining <= 0.0:
            break
        if remaining < segment.duration:
            position = segment.position_at(remaining)
            remaining = 0.0
        else:
            position = segment.b
            cell = segment.cell
            remaining -= segment.duration

    return AgentState(position=position, cell=cell)
