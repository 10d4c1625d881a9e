"""CLI entrypoint for headless session runs.

This module owns CLI argument parsing only. Domain logic lives in:

- ``grid_motion.domain``             – vectors, grid world, projector, integrator
- ``grid_motion.config``             – configuration dataclasses
- ``grid_motion.simulation.engine``  – ``run_session`` frame loop
- ``grid_motion.io.schemas``         – Parquet schemas
"""

from __future__ import annotations

import argparse
import json
import logging
from collections.abc import Callable
from pathlib import Path
from typing import TypeVar

from grid_motion.config.constants import (
    FRAME_RATE,
    MAX_SPEED,
    MOVEMENT_ENABLED,
    PATH_TIME,
    SESSION_FRAMES,
)
from grid_motion.config.types import MotionConfig, SessionConfig
from grid_motion.domain.grid_world import CellState, GridWorld
from grid_motion.domain.path import AgentState
from grid_motion.domain.vector import Vector2
from grid_motion.simulation.engine import run_session
from grid_motion.simulation.schedule import VelocitySchedule

T = TypeVar("T")

# ---------------------------------------------------------------------------
# CLI parsing helpers
# ---------------------------------------------------------------------------


def _parse_pair(raw: str, label: str) -> Vector2:
    """Parse ``"x,y"`` into a vector."""
    parts = [part.strip() for part in raw.split(",")]
    if len(parts) != 2 or not all(parts):
        raise ValueError(f"{label} must use x,y format")
    try:
        return Vector2(float(parts[0]), float(parts[1]))
    except ValueError as exc:
        raise ValueError(f"{label} must contain two finite numbers") from exc


def _as_bool(raw: object, key: str) -> bool:
    """Accept real booleans and the usual on/off spellings."""
    if isinstance(raw, bool):
        return raw
    if isinstance(raw, str):
        normalized = raw.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
    raise ValueError(f"{key} must be a boolean value")


def _as_int(raw: object, key: str) -> int:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be an integer value")
    if isinstance(raw, float) and not raw.is_integer():
        raise ValueError(f"{key} must be an integer value, got {raw!r}")
    return int(raw)


def _as_float(raw: object, key: str) -> float:
    if isinstance(raw, bool) or not isinstance(raw, (int, float, str)):
        raise ValueError(f"{key} must be a number")
    return float(raw)


def _as_text(raw: object, key: str) -> str:
    if not isinstance(raw, (str, Path)):
        raise ValueError(f"{key} must be a string")
    return str(raw)


def _option(
    cli_val: object,
    key: str,
    file_cfg: dict[str, object],
    default: T,
    coerce: Callable[[object, str], T],
) -> T:
    """CLI > config file > default, coerced with ``coerce`` unless defaulted."""
    if cli_val is not None:
        return coerce(cli_val, key)
    if key in file_cfg:
        return coerce(file_cfg[key], key)
    return default


def _load_schedule(
    schedule_path: str | None,
    velocity_raw: str | None,
    file_cfg: dict[str, object],
) -> VelocitySchedule:
    """Resolve the velocity schedule: schedule file > inline file entries > constant."""
    if schedule_path is not None:
        records = json.loads(Path(schedule_path).read_text())
    elif velocity_raw is None and isinstance(file_cfg.get("schedule"), list):
        records = file_cfg["schedule"]
    else:
        velocity = _parse_pair(velocity_raw or "0,0", "velocity")
        return VelocitySchedule.constant(velocity)
    if not isinstance(records, list):
        raise ValueError("schedule must be a JSON list of {time, vx, vy} objects")
    return VelocitySchedule.from_records(records)


def _build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = argparse.ArgumentParser(description="Run a headless grid motion session")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="JSON config file (CLI args override file values)",
    )
    parser.add_argument("--map", type=str, default=None, help="ASCII map ('.' open, '#' wall)")
    parser.add_argument("--start", type=str, default=None, help="start position as x,y")
    parser.add_argument("--velocity", type=str, default=None, help="constant velocity as vx,vy")
    parser.add_argument(
        "--schedule",
        type=str,
        default=None,
        help="JSON list of {time, vx, vy} velocity commands",
    )
    parser.add_argument("--frames", type=int, default=None)
    parser.add_argument("--frame-rate", type=float, default=None)
    parser.add_argument("--path-time", type=float, default=None)
    parser.add_argument("--max-speed", type=float, default=None)
    parser.add_argument("--record-paths", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--movement", action=argparse.BooleanOptionalAction, default=None)
    parser.add_argument("--out-dir", type=Path, default=None)
    parser.add_argument("--session-id", type=str, default=None)
    parser.add_argument("--verbose", action="store_true")
    return parser


# ---------------------------------------------------------------------------
# Main CLI
# ---------------------------------------------------------------------------


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for a headless session.

    Supports ``--config path/to/config.json``. CLI arguments override
    config-file values; config-file values override built-in defaults.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    file_cfg: dict[str, object] = {}
    if args.config is not None:
        try:
            file_cfg = json.loads(Path(args.config).read_text())
        except FileNotFoundError:
            parser.error(f"Config file not found: {args.config}")
        except json.JSONDecodeError as exc:
            parser.error(f"Config file is not valid JSON: {args.config}: {exc}")

    try:
        map_path = _option(args.map, "map", file_cfg, None, _as_text)
        out_dir = Path(_option(args.out_dir, "out_dir", file_cfg, "data", _as_text))
        session_id = _option(args.session_id, "session_id", file_cfg, "session", _as_text)
    except ValueError as exc:
        parser.error(str(exc))
    if map_path is None:
        parser.error("--map is required (or set 'map' in the config file)")
    try:
        world = GridWorld.from_ascii(Path(map_path).read_text())
    except FileNotFoundError:
        parser.error(f"Map file not found: {map_path}")

    try:
        start = _parse_pair(_option(args.start, "start", file_cfg, "0.5,0.5", _as_text), "start")
        schedule = _load_schedule(
            _option(args.schedule, "schedule_file", file_cfg, None, _as_text),
            _option(args.velocity, "velocity", file_cfg, None, _as_text),
            file_cfg,
        )
        motion = MotionConfig(
            path_time=_option(args.path_time, "path_time", file_cfg, PATH_TIME, _as_float),
            movement_enabled=_option(
                args.movement, "movement_enabled", file_cfg, MOVEMENT_ENABLED, _as_bool
            ),
        )
        session_config = SessionConfig(
            frames=_option(args.frames, "frames", file_cfg, SESSION_FRAMES, _as_int),
            frame_rate=_option(args.frame_rate, "frame_rate", file_cfg, FRAME_RATE, _as_float),
            max_speed=_option(args.max_speed, "max_speed", file_cfg, MAX_SPEED, _as_float),
            record_paths=_option(args.record_paths, "record_paths", file_cfg, False, _as_bool),
            motion=motion,
        )
    except (ValueError, FileNotFoundError) as exc:
        parser.error(str(exc))

    # Starts on a grid line are resolved by projection; only cell interiors are checked.
    on_line = start.x.is_integer() or start.y.is_integer()
    start_cell = AgentState.at(start).cell
    if not on_line and world.classify(start_cell) is not CellState.OPEN:
        parser.error(f"start ({start.x}, {start.y}) lies inside blocked cell {start_cell}")

    result = run_session(
        world=world,
        start=start,
        schedule=schedule,
        out_dir=out_dir,
        config=session_config,
        session_id=session_id,
    )

    summary = {
        "session_id": result.session_id,
        "frames": result.frames,
        "final_position": [result.final_x, result.final_y],
        "final_cell": list(result.final_cell),
        "distance_travelled": result.distance_travelled,
        "moving_frames": result.moving_frames,
        "blocked_frames": result.blocked_frames,
        "out_dir": str(out_dir),
    }
    print(json.dumps(summary, ensure_ascii=False, indent=2))


if __name__ == "__main__":
    main()
