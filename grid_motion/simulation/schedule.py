"""Piecewise-constant velocity input for headless sessions.

A host normally derives velocity from pointer drags; a session replays a
fixed list of timed commands instead.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from grid_motion.domain.vector import Vector2


@dataclass(frozen=True)
class VelocityCommand:
    """Velocity that takes effect at ``start_time`` seconds into the session."""

    start_time: float
    velocity: Vector2

    def __post_init__(self) -> None:
        if not math.isfinite(self.start_time) or self.start_time < 0.0:
            raise ValueError("start_time must be finite and >= 0")


@dataclass(frozen=True)
class VelocitySchedule:
    """Ordered velocity commands; zero velocity before the first one."""

    commands: tuple[VelocityCommand, ...] = ()

    def __post_init__(self) -> None:
        times = [command.start_time for command in self.commands]
        if times != sorted(times):
            raise ValueError("commands must be ordered by start_time")

    @classmethod
    def constant(cls, velocity: Vector2) -> VelocitySchedule:
        return cls(commands=(VelocityCommand(start_time=0.0, velocity=velocity),))

    @classmethod
    def from_records(cls, records: Iterable[Mapping[str, object]]) -> VelocitySchedule:
        """Build from ``{"time", "vx", "vy"}`` mappings (as loaded from JSON)."""
        commands: list[VelocityCommand] = []
        for index, record in enumerate(records):
            try:
                start_time = float(record["time"])  # type: ignore[arg-type]
                vx = float(record["vx"])  # type: ignore[arg-type]
                vy = float(record["vy"])  # type: ignore[arg-type]
            except KeyError as exc:
                raise ValueError(f"schedule entry {index} is missing {exc.args[0]!r}") from exc
            except (TypeError, ValueError) as exc:
                raise ValueError(f"schedule entry {index} must hold numeric values") from exc
            commands.append(VelocityCommand(start_time=start_time, velocity=Vector2(vx, vy)))
        commands.sort(key=lambda command: command.start_time)
        return cls(commands=tuple(commands))

    def velocity_at(self, t: float) -> Vector2:
        """Velocity of the last command whose start time is ``<= t``."""
        current = Vector2.zero()
        for command in self.commands:
            if command.start_time > t:
                break
            current = command.velocity
        return current
