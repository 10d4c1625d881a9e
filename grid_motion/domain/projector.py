"""Grid-DDA path projection with axis-aligned wall sliding.

Starting from a continuous position and a velocity, the projector walks the
grid one line crossing at a time and emits a ``MotionSegment`` per leg until
the look-ahead horizon (``MotionConfig.path_time``) is used up or the agent
is wedged against walls.

When the cell ahead is blocked the walk tries to keep moving along a single
axis instead of stopping dead:

- on a vertical grid line, drop ``v.x`` and slide along y through the cell
  behind the line;
- on a horizontal grid line, drop ``v.y`` and slide along x;
- on a corner, try the axis with the larger speed first, then the other.

The function is pure. The world is only read through ``classify``.
"""

from __future__ import annotations

import logging
import math

from grid_motion.config.types import MotionConfig
from grid_motion.domain.errors import PathInvariantError
from grid_motion.domain.grid_world import CellCoordinate, CellState, GridQuery
from grid_motion.domain.path import MotionSegment, Path
from grid_motion.domain.vector import Vector2, floored_mod, snap_to_integer

logger = logging.getLogger(__name__)


def _axis_cell(coordinate: float, step: int) -> int:
    # Heading negative from exactly on a line puts us in the cell behind it.
    if step < 0 and coordinate.is_integer():
        return int(coordinate) - 1
    return math.floor(coordinate)


def classify_cell(position: Vector2, step: tuple[int, int]) -> CellCoordinate:
    """Return the cell a position occupies for a heading with signs ``step``.

    Plain flooring, except that an axis whose step is negative and whose
    coordinate is exactly an integer resolves to ``coordinate - 1``.
    """
    return (_axis_cell(position.x, step[0]), _axis_cell(position.y, step[1]))


def _time_to_line(coordinate: float, step: int, speed: float) -> float:
    """Seconds until ``coordinate`` reaches the next grid line in direction ``step``."""
    if speed == 0.0:
        return math.inf
    return abs((step - floored_mod(coordinate, step)) / speed)


def _resolve_blocked(
    world: GridQuery,
    cell: CellCoordinate,
    x: float,
    y: float,
    velocity: Vector2,
    step_x: int,
    step_y: int,
) -> tuple[CellCoordinate, Vector2 | None]:
    """Pick a slide cell and reduced velocity for a blocked ``cell``.

    Returns ``(cell, None)`` when no slide is possible. Raises
    ``PathInvariantError`` if the position is not on any grid line.
    """
    cx, cy = cell
    on_x_line = x.is_integer()
    on_y_line = y.is_integer()

    if on_x_line and on_y_line:
        slide_x = ((cx, cy - step_y), Vector2(velocity.x, 0.0))
        slide_y = ((cx - step_x, cy), Vector2(0.0, velocity.y))
        order = (slide_x, slide_y) if abs(velocity.x) > abs(velocity.y) else (slide_y, slide_x)
        for adjacent, reduced in order:
            if world.classify(adjacent) is CellState.OPEN:
                return adjacent, reduced
        return cell, None

    if on_x_line:
        adjacent = (cx - step_x, cy)
        if world.classify(adjacent) is not CellState.OPEN:
            return cell, None
        return adjacent, Vector2(0.0, velocity.y)

    if on_y_line:
        adjacent = (cx, cy - step_y)
        if world.classify(adjacent) is not CellState.OPEN:
            return cell, None
        return adjacent, Vector2(velocity.x, 0.0)

    raise PathInvariantError(f"blocked cell {cell} entered away from any grid line at ({x}, {y})")


def _violation(error: PathInvariantError, config: MotionConfig) -> None:
    if config.strict_invariants:
        raise error
    logger.warning("truncating path: %s", error)


def project(
    position: Vector2,
    velocity: Vector2,
    world: GridQuery,
    config: MotionConfig | None = None,
) -> Path:
    """Project up to ``config.path_time`` seconds of motion through ``world``.

    Returns an empty path for a zero velocity or when the agent cannot move
    at all. Consecutive segments share their joining point object, so
    ``path[i].b is path[i + 1].a``.
    """
    cfg = config or MotionConfig()
    path: Path = []
    if velocity.length() == 0.0:
        return path

    step_x, step_y = velocity.sign()
    epsilon = cfg.snap_epsilon
    # Sub-epsilon offsets from a line make the floored modulo round to a whole step.
    x = snap_to_integer(position.x, epsilon)
    y = snap_to_integer(position.y, epsilon)
    u = position
    time = 0.0

    while time != cfg.path_time:
        cell = (_axis_cell(x, step_x), _axis_cell(y, step_y))
        v: Vector2 | None = velocity
        blocked_by: CellCoordinate | None = None

        if world.classify(cell) is not CellState.OPEN:
            blocked_by = cell
            try:
                cell, v = _resolve_blocked(world, cell, x, y, velocity, step_x, step_y)
            except PathInvariantError as exc:
                _violation(exc, cfg)
                break

        if v is None or v.is_zero():
            logger.debug("wedged at (%s, %s) against %s after %.6fs", x, y, blocked_by, time)
            break

        t = min(_time_to_line(x, step_x, v.x), _time_to_line(y, step_y, v.y))
        if not t > 0.0:
            error = PathInvariantError(f"non-positive crossing time {t!r} at ({x}, {y})")
            _violation(error, cfg)
            break

        if time + t > cfg.path_time:
            t = cfg.path_time - time
            time = cfg.path_time
        else:
            time += t

        du = v.mul(t)
        a = u
        u = u.add(du).snapped(epsilon)
        x = snap_to_integer(x + du.x, epsilon)
        y = snap_to_integer(y + du.y, epsilon)

        path.append(MotionSegment(a=a, b=u, v=v, duration=t, cell=cell, blocked_by=blocked_by))

    return path
