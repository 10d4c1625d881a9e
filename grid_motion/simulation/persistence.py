"""Parquet persistence helpers for trajectory and path-segment streams."""

from __future__ import annotations

from pathlib import Path

import pyarrow as pa
import pyarrow.parquet as pq


def flush_columns(
    columns: dict[str, list],
    log_path: Path,
    schema: pa.Schema,
    writer: pq.ParquetWriter | None,
) -> pq.ParquetWriter | None:
    """Write accumulated rows to Parquet and clear in-memory buffers."""
    if not columns[schema.names[0]]:
        return writer
    table = pa.Table.from_pydict(columns, schema=schema)
    if writer is None:
        writer = pq.ParquetWriter(log_path, schema)
    writer.write_table(table)
    for values in columns.values():
        values.clear()
    return writer


def empty_columns(schema: pa.Schema) -> dict[str, list]:
    """Return a column-wise row buffer matching ``schema``."""
    return {name: [] for name in schema.names}


def write_empty(log_path: Path, schema: pa.Schema) -> None:
    """Write a zero-row Parquet file so readers always find the log."""
    pq.write_table(schema.empty_table(), log_path)
