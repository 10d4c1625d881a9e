"""Tests for the headless session engine (run_session)."""

from __future__ import annotations

import json
from pathlib import Path

import pyarrow.parquet as pq
import pytest

from grid_motion.config.types import MotionConfig, SessionConfig
from grid_motion.domain.grid_world import GridWorld
from grid_motion.domain.vector import Vector2
from grid_motion.io.schemas import PATH_SEGMENT_SCHEMA, TRAJECTORY_SCHEMA
from grid_motion.simulation.engine import run_session
from grid_motion.simulation.schedule import VelocityCommand, VelocitySchedule


def _open_block(width: int, height: int) -> GridWorld:
    return GridWorld.from_open_cells((x, y) for x in range(width) for y in range(height))


class TestRunSessionOpenWorld:
    def test_constant_velocity_moves_expected_distance(self, tmp_path: Path) -> None:
        result = run_session(
            world=_open_block(10, 10),
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(1.0, 0.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=30, frame_rate=60),
        )
        assert result.frames == 30
        assert result.final_x == pytest.approx(1.0, abs=1e-9)
        assert result.final_y == 0.5
        assert result.distance_travelled == pytest.approx(0.5, abs=1e-9)
        assert result.moving_frames == 30
        assert result.blocked_frames == 0

    def test_trajectory_log_has_schema_columns(self, tmp_path: Path) -> None:
        run_session(
            world=_open_block(10, 10),
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(1.0, 1.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=12),
        )
        table = pq.read_table(tmp_path / "logs" / "trajectory.parquet")
        assert table.column_names == TRAJECTORY_SCHEMA.names
        assert table.num_rows == 12
        assert table.column("frame").to_pylist() == list(range(12))
        assert not (tmp_path / "logs" / "path_segments.parquet").exists()

    def test_writes_summary_json(self, tmp_path: Path) -> None:
        run_session(
            world=_open_block(4, 4),
            start=Vector2(1.5, 1.5),
            schedule=VelocitySchedule.constant(Vector2(0.0, 1.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=5),
            session_id="walk-north",
        )
        payload = json.loads((tmp_path / "sessions" / "walk-north.json").read_text())
        assert payload["schema_version"] == 1
        assert payload["session_id"] == "walk-north"
        assert payload["frames"] == 5
        assert payload["final_cell"] == [1, 1]

    def test_speed_is_clamped(self, tmp_path: Path) -> None:
        result = run_session(
            world=_open_block(20, 20),
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(100.0, 0.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=10, frame_rate=10, max_speed=2.0),
        )
        assert result.final_x == pytest.approx(2.5, abs=1e-9)

    def test_schedule_changes_direction(self, tmp_path: Path) -> None:
        schedule = VelocitySchedule(
            commands=(
                VelocityCommand(0.0, Vector2(1.0, 0.0)),
                VelocityCommand(0.5, Vector2(0.0, 1.0)),
            )
        )
        result = run_session(
            world=_open_block(10, 10),
            start=Vector2(0.5, 0.5),
            schedule=schedule,
            out_dir=tmp_path,
            config=SessionConfig(frames=20, frame_rate=20),
        )
        assert result.final_x == pytest.approx(1.0, abs=1e-9)
        assert result.final_y == pytest.approx(1.0, abs=1e-9)


class TestRunSessionBlocking:
    def test_agent_stops_at_wall(self, tmp_path: Path) -> None:
        world = GridWorld.from_open_cells([(0, 0), (1, 0)])
        result = run_session(
            world=world,
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(7.0, 0.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=60, frame_rate=60),
        )
        assert result.final_x == 2.0
        assert result.final_cell == (1, 0)
        assert result.blocked_frames == 60
        assert 0 < result.moving_frames < 60
        assert result.distance_travelled == pytest.approx(1.5)

    def test_records_blocked_by_for_slides(self, tmp_path: Path) -> None:
        world = GridWorld.from_open_cells((x, 0) for x in range(10))
        run_session(
            world=world,
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(2.0, 2.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=3, record_paths=True),
        )
        table = pq.read_table(tmp_path / "logs" / "path_segments.parquet")
        assert table.column_names == PATH_SEGMENT_SCHEMA.names
        first_frame = [row for row in table.to_pylist() if row["frame"] == 0]
        assert [row["segment"] for row in first_frame] == [0, 1]
        assert first_frame[0]["blocked_by_x"] is None
        assert (first_frame[1]["blocked_by_x"], first_frame[1]["blocked_by_y"]) == (1, 1)

    def test_wedged_session_writes_empty_segment_log(self, tmp_path: Path) -> None:
        result = run_session(
            world=GridWorld.from_open_cells([(5, 5)]),
            start=Vector2(1.0, 1.0),
            schedule=VelocitySchedule.constant(Vector2(1.0, 1.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=4, record_paths=True),
        )
        assert result.moving_frames == 0
        assert result.blocked_frames == 4
        table = pq.read_table(tmp_path / "logs" / "path_segments.parquet")
        assert table.num_rows == 0

    def test_movement_disabled_keeps_start(self, tmp_path: Path) -> None:
        result = run_session(
            world=_open_block(4, 4),
            start=Vector2(0.5, 0.5),
            schedule=VelocitySchedule.constant(Vector2(3.0, 0.0)),
            out_dir=tmp_path,
            config=SessionConfig(frames=10, motion=MotionConfig(movement_enabled=False)),
        )
        assert (result.final_x, result.final_y) == (0.5, 0.5)
        assert result.moving_frames == 0
        assert result.distance_travelled == 0.0
