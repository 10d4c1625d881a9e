"""Parquet schema definitions for session artifacts.

Every module that writes or reads session logs works against the column
contracts defined here.
"""

from __future__ import annotations

import pyarrow as pa

SESSION_PAYLOAD_SCHEMA_VERSION = 1

# ---------------------------------------------------------------------------
# Per-frame trajectory
# ---------------------------------------------------------------------------

TRAJECTORY_SCHEMA = pa.schema(
    [
        ("session_id", pa.string()),
        ("frame", pa.int64()),
        ("time", pa.float64()),
        ("x", pa.float64()),
        ("y", pa.float64()),
        ("cell_x", pa.int64()),
        ("cell_y", pa.int64()),
        ("vx", pa.float64()),
        ("vy", pa.float64()),
        ("path_segments", pa.int64()),
        ("path_duration", pa.float64()),
        ("path_truncated", pa.bool_()),
    ]
)

# ---------------------------------------------------------------------------
# Projected path segments (optional, one row per segment per frame)
# ---------------------------------------------------------------------------

PATH_SEGMENT_SCHEMA = pa.schema(
    [
        ("session_id", pa.string()),
        ("frame", pa.int64()),
        ("segment", pa.int64()),
        ("ax", pa.float64()),
        ("ay", pa.float64()),
        ("bx", pa.float64()),
        ("by", pa.float64()),
        ("vx", pa.float64()),
        ("vy", pa.float64()),
        ("duration", pa.float64()),
        ("cell_x", pa.int64()),
        ("cell_y", pa.int64()),
        ("blocked_by_x", pa.int64()),
        ("blocked_by_y", pa.int64()),
    ]
)
