"""Path construction helpers for session output directories.

Centralises the directory/file naming conventions used by the session
engine and the CLI.
"""

from __future__ import annotations

from pathlib import Path


def logs_dir(out_dir: Path) -> Path:
    """Return path to the logs subdirectory within an output directory."""
    return out_dir / "logs"


def sessions_dir(out_dir: Path) -> Path:
    """Return path to the per-session summary subdirectory."""
    return out_dir / "sessions"


def trajectory_log_path(out_dir: Path) -> Path:
    """Return path to the per-frame trajectory Parquet file."""
    return logs_dir(out_dir) / "trajectory.parquet"


def path_segment_log_path(out_dir: Path) -> Path:
    """Return path to the projected path segment Parquet file."""
    return logs_dir(out_dir) / "path_segments.parquet"


def session_summary_path(out_dir: Path, session_id: str) -> Path:
    """Return path to the JSON summary for one session."""
    return sessions_dir(out_dir) / f"{session_id}.json"
