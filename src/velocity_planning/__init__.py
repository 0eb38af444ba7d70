"""Velocity planning building blocks.

This package turns a geometric path plus timing/pose constraints into a
time-parameterized trajectory with a list of structured violations. The pure
math lives in `core` and `integrator`; `planner` wires them together. It is
intended to be imported by a larger project that owns the path geometry and
the playback.

Author: Laércio Lucchesi
"""

from .config import PlannerConfiguration
from .core import (
    StateIndex,
    compute_backward_profile,
    compute_forward_profile,
    enforce_orientation,
    merge_profiles,
    segment_path,
    traverse_segment,
)
from .errors import InvalidLimitsError, InvalidPathError, InvalidStateError, PlanningError
from .integrator import integrate_profile
from .metrics import TrajectoryMetrics, metrics_frame, summarize
from .monte_carlo import MonteCarloRunner
from .paths import PolylinePath
from .planner import TrajectoryPlanner, plan
from .types import (
    AnnotatedPath,
    MotionLimits,
    Path,
    PathSample,
    Pose2D,
    StateConstraint,
    StateType,
    Trajectory,
    TrajectorySample,
    Vec2,
    VelocityProfile,
    VelocitySample,
)
from .violations import OrientationMissed, PhysicsLimit, StateMissed, TrajectoryViolation

__version__ = "0.1.0"

__all__ = [
    "AnnotatedPath",
    "InvalidLimitsError",
    "InvalidPathError",
    "InvalidStateError",
    "MonteCarloRunner",
    "MotionLimits",
    "OrientationMissed",
    "Path",
    "PathSample",
    "PhysicsLimit",
    "PlannerConfiguration",
    "PlanningError",
    "PolylinePath",
    "Pose2D",
    "StateConstraint",
    "StateIndex",
    "StateMissed",
    "StateType",
    "Trajectory",
    "TrajectoryMetrics",
    "TrajectoryPlanner",
    "TrajectorySample",
    "TrajectoryViolation",
    "Vec2",
    "VelocityProfile",
    "VelocitySample",
    "compute_backward_profile",
    "compute_forward_profile",
    "enforce_orientation",
    "integrate_profile",
    "merge_profiles",
    "metrics_frame",
    "plan",
    "segment_path",
    "summarize",
    "traverse_segment",
]
