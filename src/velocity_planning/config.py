"""
Configuration dataclass for the trajectory planner.

Author: Laércio Lucchesi
Date: October 19, 2026
"""

from dataclasses import dataclass

# Velocity floor used wherever a velocity divides a distance (units/s).
DEFAULT_VELOCITY_EPSILON: float = 1e-6

# Accepted heading error at a DO_HERE stop (rad).
DEFAULT_HEADING_TOLERANCE: float = 0.05


@dataclass(frozen=True)
class PlannerConfiguration:
    """
    Tunable parameters of the TrajectoryPlanner.

    Attributes:
        velocity_epsilon: Floor applied to velocities used as divisors, and slack
            allowed before an acceleration, deceleration or deadline counts as a
            violation. Typical: 1e-9–1e-4.
        heading_tolerance: Maximum |heading error| (rad) accepted at a DO_HERE
            stop with a required heading. Typical: 0.02–0.1 rad.
        emit_ramp_samples: If True, emit extra samples where a segment stops
            accelerating and starts decelerating, so linear interpolation of the
            samples follows the velocity trapezoid.
    """
    velocity_epsilon: float = DEFAULT_VELOCITY_EPSILON
    heading_tolerance: float = DEFAULT_HEADING_TOLERANCE
    emit_ramp_samples: bool = True

    def __post_init__(self):
        if not self.velocity_epsilon > 0:
            raise ValueError("velocity_epsilon must be > 0")
        if not self.heading_tolerance >= 0:
            raise ValueError("heading_tolerance must be >= 0")
