"""
Time integration of a merged velocity profile.

Walks adjacent breakpoint pairs, turns velocity-vs-arc-length into
time-vs-arc-length, records violations, and materializes pose samples,
including explicit waiting samples at DO_HERE stops.

Author: Laércio Lucchesi
Date: October 19, 2026
"""

from typing import Iterable, List, Optional, Set, Union

from .config import PlannerConfiguration
from .core import StateIndex, enforce_orientation, traverse_segment
from .types import (
    MotionLimits,
    Path,
    Pose2D,
    StateConstraint,
    StateType,
    Trajectory,
    TrajectorySample,
    VelocityProfile,
)
from .violations import OrientationMissed, PhysicsLimit, StateMissed, TrajectoryViolation


def _pose_at(path: Path, s: float) -> Pose2D:
    sample = path.sample(s)
    return Pose2D(position=sample.position, heading=sample.tangent)


def integrate_profile(
    profile: VelocityProfile,
    path: Path,
    states: Union[StateIndex, Iterable[StateConstraint]],
    limits: MotionLimits,
    config: Optional[PlannerConfiguration] = None,
) -> Trajectory:
    """
    Convert a velocity profile into a timed trajectory.

    Each segment is timed with traverse_segment() under the limits of the
    state whose zone contains the segment's end (or `limits` when none does).
    The implied acceleration (b.v - a.v) / dt of each segment is checked
    against the same limits.

    DO_HERE states produce a waiting sample and add their duration as dwell
    time. DO_BY states reached after their deadline produce a PhysicsLimit.
    States never reached produce StateMissed.

    Args:
        profile: Merged velocity profile.
        path: Path used for poses.
        states: State constraints (or a prebuilt StateIndex).
        limits: Base motion limits; v_max always caps cruising speed.
        config: Numerical tolerances and output options.

    Returns:
        Trajectory with samples in time order and the violations found.
    """
    config = config or PlannerConfiguration()
    eps = config.velocity_epsilon
    index = states if isinstance(states, StateIndex) else StateIndex(states)

    samples: List[TrajectorySample] = []
    violations: List[TrajectoryViolation] = []
    visited: Set[str] = set()

    t = 0.0
    state_index = 0

    def visit_states_up_to(s: float) -> None:
        nonlocal t, state_index

        while state_index < len(index) and index[state_index].s <= s:
            st = index[state_index]
            visited.add(st.id)

            if st.type == StateType.DO_HERE:
                pose = _pose_at(path, st.s)
                if not enforce_orientation(pose, st.required_heading, config.heading_tolerance):
                    violations.append(OrientationMissed(state_id=st.id))

                samples.append(
                    TrajectorySample(t=t, s=st.s, v=0.0, pose=pose, state_id=st.id, waiting=True)
                )
                t += st.duration
            elif st.type == StateType.DO_BY and t > st.duration + eps:
                # Deadline missed
                violations.append(PhysicsLimit(s=st.s))

            state_index += 1

    if len(profile) > 0:
        first = profile[0]
        visit_states_up_to(first.s)
        samples.append(TrajectorySample(t=t, s=first.s, v=first.v, pose=_pose_at(path, first.s)))

    for i in range(len(profile) - 1):
        a = profile[i]
        b = profile[i + 1]
        ds = b.s - a.s

        active = index.active(b.s)
        active_limits = active.limits if active is not None else limits

        traversal = traverse_segment(
            a.v,
            b.v,
            ds,
            active_limits.a_max,
            active_limits.d_max,
            limits.v_max,
            eps=eps,
        )
        dt = max(traversal.duration, eps)

        if config.emit_ramp_samples:
            for t_off, s_off, v in traversal.knots:
                s_knot = a.s + s_off
                samples.append(TrajectorySample(t=t + t_off, s=s_knot, v=v, pose=_pose_at(path, s_knot)))

        t += traversal.duration

        # Acceleration limit
        if b.v > a.v:
            acceleration = (b.v - a.v) / dt
            if acceleration > active_limits.a_max + eps:
                violations.append(PhysicsLimit(s=b.s))

        # Deceleration limit
        if b.v < a.v:
            deceleration = (a.v - b.v) / dt
            if deceleration > active_limits.d_max + eps:
                violations.append(PhysicsLimit(s=b.s))

        visit_states_up_to(b.s)

        samples.append(TrajectorySample(t=t, s=b.s, v=b.v, pose=_pose_at(path, b.s)))

    for st in index:
        if st.id not in visited:
            violations.append(StateMissed(state_id=st.id))

    return Trajectory(total_time=t, samples=tuple(samples), violations=tuple(violations))


