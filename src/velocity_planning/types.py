"""
Value types for velocity planning.

Everything here is an immutable dataclass built fresh per planning call.
Arc-length `s` is measured in path units from the start of the path; time
is in seconds; angles are in radians.

Author: Laércio Lucchesi
Date: October 19, 2026
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, Protocol, Tuple, TYPE_CHECKING

if TYPE_CHECKING:
    from .violations import TrajectoryViolation


@dataclass(frozen=True)
class Vec2:
    """A point in path space (not pixel space)."""
    x: float
    y: float


@dataclass(frozen=True)
class Pose2D:
    position: Vec2
    heading: Optional[float] = None  # rad, tangent-derived


@dataclass(frozen=True)
class PathSample:
    """What a path reports at a given arc-length."""
    position: Vec2
    tangent: Optional[float] = None
    curvature: Optional[float] = None


class Path(Protocol):
    """Geometric path supplied by the host. Read only, never mutated."""

    length: float

    def sample(self, s: float) -> PathSample:
        ...

    def project(self, point: Vec2) -> float:
        ...


@dataclass(frozen=True)
class MotionLimits:
    """
    Motion limits of the vehicle.

    Attributes:
        v_max: Maximum linear speed (units/s).
        a_max: Maximum linear acceleration (units/s²).
        d_max: Maximum linear deceleration (units/s²), positive.
        w_max: Maximum angular velocity (rad/s). Reserved for heading tracking.
        alpha_max: Maximum angular acceleration (rad/s²). Reserved for heading tracking.
    """
    v_max: float
    a_max: float
    d_max: float
    w_max: float = math.inf
    alpha_max: float = math.inf


class StateType(str, Enum):
    DO_BY = "DO_BY"      # reach s within `duration` of the start, no stop
    DO_HERE = "DO_HERE"  # stop at s and dwell for `duration`


@dataclass(frozen=True)
class StateConstraint:
    """
    A timing/pose constraint anchored at arc-length `s`.

    Attributes:
        id: Unique identifier, reported back in violations.
        s: Arc-length position, 0 <= s <= path.length.
        type: DO_BY or DO_HERE.
        duration: Dwell time (DO_HERE) or deadline from start of motion (DO_BY).
        limits: Limits in force inside this state's zone [s, next_state.s).
        required_heading: Optional heading (rad) the vehicle must hold at a DO_HERE stop.
    """
    id: str
    s: float
    type: StateType
    duration: float
    limits: MotionLimits
    required_heading: Optional[float] = None


@dataclass(frozen=True)
class AnnotatedPath:
    """Planning input: a path plus the constraints placed on it."""
    path: Path
    states: Tuple[StateConstraint, ...] = ()


@dataclass(frozen=True)
class VelocitySample:
    s: float
    v: float


@dataclass(frozen=True)
class VelocityProfile:
    """Velocity at each breakpoint, in breakpoint order."""
    samples: Tuple[VelocitySample, ...] = ()

    def __len__(self) -> int:
        return len(self.samples)

    def __iter__(self) -> Iterator[VelocitySample]:
        return iter(self.samples)

    def __getitem__(self, index: int) -> VelocitySample:
        return self.samples[index]

    @property
    def breakpoints(self) -> Tuple[float, ...]:
        return tuple(sample.s for sample in self.samples)

    @property
    def velocities(self) -> Tuple[float, ...]:
        return tuple(sample.v for sample in self.samples)


@dataclass(frozen=True)
class TrajectorySample:
    """A single emitted instant of the trajectory."""
    t: float
    s: float
    v: float
    pose: Pose2D
    state_id: Optional[str] = None
    waiting: bool = False


@dataclass(frozen=True)
class Trajectory:
    total_time: float
    samples: Tuple[TrajectorySample, ...] = ()
    violations: Tuple["TrajectoryViolation", ...] = field(default_factory=tuple)

    @property
    def is_feasible(self) -> bool:
        """True when planning produced no violations."""
        return not self.violations
