"""Exceptions raised by the motion core."""

from __future__ import annotations


class PathInvariantError(RuntimeError):
    """Projection reached a geometric state that correct classification rules out."""
