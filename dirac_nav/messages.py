"""Message types exchanged between navigation nodes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Vector3:
    """A three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0


@dataclass(frozen=True)
class Twist:
    """Linear and angular velocity command."""

    linear: Vector3 = field(default_factory=Vector3)
    angular: Vector3 = field(default_factory=Vector3)


@dataclass(frozen=True)
class AgentCommand:
    """A discrete movement command: 1=forward, 2=backward, 3=left, 4=right."""

    direction: int = 0


@dataclass(frozen=True)
class GridPose:
    """An agent's pose expressed in grid cells."""

    x: int = 0
    y: int = 0
    theta: float = 0.0
    grid_size: float = 0.0
    cell_size: float = 0.0


@dataclass(frozen=True)
class Pose:
    """A continuous pose as reported by the simulator."""

    x: float = 0.0
    y: float = 0.0
    theta: float = 0.0
    linear_velocity: float = 0.0
    angular_velocity: float = 0.0