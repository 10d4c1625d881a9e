"""I/O layer: Parquet schemas and output paths."""
