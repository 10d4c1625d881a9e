"""Headless frame loop: re-project and integrate once per frame.

Mirrors what a rendering host does on every animation frame: read the
current velocity, project a fresh path from the current state, advance the
agent by the frame time, and record the result.
"""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from pathlib import Path

import pyarrow.parquet as pq

from grid_motion.config.constants import FLUSH_THRESHOLD
from grid_motion.config.types import SessionConfig, SessionResult
from grid_motion.domain.grid_world import GridQuery
from grid_motion.domain.integrator import advance
from grid_motion.domain.path import AgentState, is_truncated, path_duration
from grid_motion.domain.path import Path as MotionPath
from grid_motion.domain.projector import project
from grid_motion.domain.vector import Vector2
from grid_motion.io.paths import (
    logs_dir,
    path_segment_log_path,
    session_summary_path,
    sessions_dir,
    trajectory_log_path,
)
from grid_motion.io.schemas import (
    PATH_SEGMENT_SCHEMA,
    SESSION_PAYLOAD_SCHEMA_VERSION,
    TRAJECTORY_SCHEMA,
)
from grid_motion.metrics.trajectory import distance_travelled
from grid_motion.simulation.persistence import empty_columns, flush_columns, write_empty
from grid_motion.simulation.schedule import VelocitySchedule

logger = logging.getLogger(__name__)


def _append_segments(
    columns: dict[str, list],
    session_id: str,
    frame: int,
    path: MotionPath,
) -> None:
    for index, segment in enumerate(path):
        blocked = segment.blocked_by
        columns["session_id"].append(session_id)
        columns["frame"].append(frame)
        columns["segment"].append(index)
        columns["ax"].append(segment.a.x)
        columns["ay"].append(segment.a.y)
        columns["bx"].append(segment.b.x)
        columns["by"].append(segment.b.y)
        columns["vx"].append(segment.v.x)
        columns["vy"].append(segment.v.y)
        columns["duration"].append(segment.duration)
        columns["cell_x"].append(segment.cell[0])
        columns["cell_y"].append(segment.cell[1])
        columns["blocked_by_x"].append(None if blocked is None else blocked[0])
        columns["blocked_by_y"].append(None if blocked is None else blocked[1])


def run_session(
    world: GridQuery,
    start: Vector2,
    schedule: VelocitySchedule,
    out_dir: Path,
    config: SessionConfig | None = None,
    session_id: str = "session",
) -> SessionResult:
    """Run a fixed number of frames and persist Parquet/JSON outputs.

    Frame ``k`` samples the schedule at ``k * frame_dt``, clamps the speed
    to ``max_speed``, projects from the current state and advances by
    ``frame_dt``.
    """
    cfg = config or SessionConfig()
    motion = cfg.motion
    dt = cfg.frame_dt

    out_dir = Path(out_dir)
    logs_dir(out_dir).mkdir(parents=True, exist_ok=True)
    sessions_dir(out_dir).mkdir(parents=True, exist_ok=True)
    trajectory_path = trajectory_log_path(out_dir)
    segment_path = path_segment_log_path(out_dir)

    logger.info(
        "session %s: %d frames at %.1f fps from (%s, %s)",
        session_id,
        cfg.frames,
        cfg.frame_rate,
        start.x,
        start.y,
    )

    state = AgentState.at(start)
    positions: list[tuple[float, float]] = [start.as_tuple()]
    moving_frames = 0
    blocked_frames = 0

    trajectory_columns = empty_columns(TRAJECTORY_SCHEMA)
    segment_columns = empty_columns(PATH_SEGMENT_SCHEMA)
    trajectory_writer: pq.ParquetWriter | None = None
    segment_writer: pq.ParquetWriter | None = None

    try:
        for frame in range(cfg.frames):
            velocity = schedule.velocity_at(frame * dt).clamp_length(cfg.max_speed)
            path = project(state.position, velocity, world, motion)
            truncated = not velocity.is_zero() and is_truncated(path, motion.path_time)
            next_state = advance(state, path, dt, motion)

            if next_state.position != state.position:
                moving_frames += 1
            if truncated:
                blocked_frames += 1
            state = next_state
            positions.append(state.position.as_tuple())

            trajectory_columns["session_id"].append(session_id)
            trajectory_columns["frame"].append(frame)
            trajectory_columns["time"].append((frame + 1) * dt)
            trajectory_columns["x"].append(state.position.x)
            trajectory_columns["y"].append(state.position.y)
            trajectory_columns["cell_x"].append(state.cell[0])
            trajectory_columns["cell_y"].append(state.cell[1])
            trajectory_columns["vx"].append(velocity.x)
            trajectory_columns["vy"].append(velocity.y)
            trajectory_columns["path_segments"].append(len(path))
            trajectory_columns["path_duration"].append(path_duration(path))
            trajectory_columns["path_truncated"].append(truncated)
            if cfg.record_paths:
                _append_segments(segment_columns, session_id, frame, path)

            if len(trajectory_columns["frame"]) >= FLUSH_THRESHOLD:
                trajectory_writer = flush_columns(
                    trajectory_columns, trajectory_path, TRAJECTORY_SCHEMA, trajectory_writer
                )
            if len(segment_columns["frame"]) >= FLUSH_THRESHOLD:
                segment_writer = flush_columns(
                    segment_columns, segment_path, PATH_SEGMENT_SCHEMA, segment_writer
                )

        trajectory_writer = flush_columns(
            trajectory_columns, trajectory_path, TRAJECTORY_SCHEMA, trajectory_writer
        )
        if cfg.record_paths:
            segment_writer = flush_columns(
                segment_columns, segment_path, PATH_SEGMENT_SCHEMA, segment_writer
            )
            if segment_writer is None:
                write_empty(segment_path, PATH_SEGMENT_SCHEMA)
    finally:
        if trajectory_writer is not None:
            trajectory_writer.close()
        if segment_writer is not None:
            segment_writer.close()

    result = SessionResult(
        session_id=session_id,
        frames=cfg.frames,
        final_x=state.position.x,
        final_y=state.position.y,
        final_cell=state.cell,
        distance_travelled=distance_travelled(positions),
        moving_frames=moving_frames,
        blocked_frames=blocked_frames,
    )

    payload = {"schema_version": SESSION_PAYLOAD_SCHEMA_VERSION, **asdict(result)}
    payload["final_cell"] = list(state.cell)
    session_summary_path(out_dir, session_id).write_text(
        json.dumps(payload, ensure_ascii=False, indent=2)
    )

    logger.info(
        "session %s finished at (%s, %s) cell %s after %.3f cells",
        session_id,
        state.position.x,
        state.position.y,
        state.cell,
        result.distance_travelled,
    )
    return result
