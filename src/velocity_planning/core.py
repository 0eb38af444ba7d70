"""
Pure mathematical functions for velocity planning.

This module contains stateless operations for:
- Path segmentation into breakpoints
- Forward (acceleration-limited) velocity reachability
- Backward (stop/deadline/deceleration-limited) velocity reachability
- Profile merging
- Time-optimal traversal of a single segment
- Heading checks

All functions operate on plain floats and the immutable value types,
making them easy to test and reuse independently of the planner.

Author: Laércio Lucchesi
Date: October 19, 2026
"""

import math
from bisect import bisect_left, bisect_right
from typing import Iterable, Iterator, List, NamedTuple, Optional, Sequence, Tuple, Union

from .config import DEFAULT_HEADING_TOLERANCE, DEFAULT_VELOCITY_EPSILON
from .types import (
    MotionLimits,
    Path,
    Pose2D,
    StateConstraint,
    StateType,
    VelocityProfile,
    VelocitySample,
)


class StateIndex:
    """
    State constraints sorted once by arc-length, with bisect lookups.

    The sort is stable: states sharing the same `s` keep their input order.
    """

    def __init__(self, states: Iterable[StateConstraint]):
        self.states: Tuple[StateConstraint, ...] = tuple(sorted(states, key=lambda st: st.s))
        self._positions: List[float] = [st.s for st in self.states]

    def __len__(self) -> int:
        return len(self.states)

    def __iter__(self) -> Iterator[StateConstraint]:
        return iter(self.states)

    def __getitem__(self, index: int) -> StateConstraint:
        return self.states[index]

    def upcoming(self, s: float) -> Optional[StateConstraint]:
        """First state with state.s >= s (earliest in input order on ties)."""
        i = bisect_left(self._positions, s)
        return self.states[i] if i < len(self.states) else None

    def active(self, s: float) -> Optional[StateConstraint]:
        """State whose zone [state.s, next_state.s) contains s, if any."""
        i = bisect_right(self._positions, s) - 1
        return self.states[i] if i >= 0 else None


def _as_index(states: Union[StateIndex, Iterable[StateConstraint]]) -> StateIndex:
    return states if isinstance(states, StateIndex) else StateIndex(states)


def segment_path(path: Path, states: Iterable[StateConstraint]) -> List[float]:
    """
    Reduce a path and its constraints to the breakpoints velocity is evaluated at.

    Returns:
        Strictly increasing arc-lengths containing 0, path.length and every
        state.s, with duplicates collapsed.
    """
    points = {0.0, float(path.length)}
    for state in states:
        points.add(float(state.s))
    return sorted(points)


def compute_forward_profile(breakpoints: Sequence[float], limits: MotionLimits) -> VelocityProfile:
    """
    Fastest velocity reachable at each breakpoint when starting from rest.

        v_i = min(sqrt(v_{i-1}² + 2·a_max·ds), v_max)

    Any need to slow down later is ignored; that is the backward pass's job.
    """
    samples: List[VelocitySample] = []
    v = 0.0

    for i, s in enumerate(breakpoints):
        if i > 0:
            ds = s - breakpoints[i - 1]
            v = min(math.sqrt(v * v + 2.0 * limits.a_max * ds), limits.v_max)
        samples.append(VelocitySample(s=s, v=v))

    return VelocityProfile(tuple(samples))


def _deadline_velocity_limit(s: float, time_constraints: Sequence[Tuple[float, float]]) -> float:
    """Tightest average-speed ceiling implied by the deadlines still ahead of s."""
    v_limit = math.inf
    for s_end, duration in time_constraints:
        if s < s_end and duration > 0:
            v_limit = min(v_limit, (s_end - s) / duration)
    return v_limit


def compute_backward_profile(
    breakpoints: Sequence[float],
    states: Union[StateIndex, Iterable[StateConstraint]],
    path: Path,
    default_decel: float = math.inf,
) -> VelocityProfile:
    """
    Fastest velocity at each breakpoint that still honors every stop and deadline ahead.

    Sweeps from the end of the path backwards. Stop points (path end and every
    DO_HERE) force v = 0 at their breakpoint. Each DO_BY state caps velocity
    before it at (s_end - s) / duration. Between breakpoints velocity may grow
    by the deceleration limit of the nearest upcoming state:

        v_i = min(sqrt(v_{i+1}² + 2·d_max·ds), v_limit)

    Args:
        breakpoints: Output of segment_path().
        states: State constraints (or a prebuilt StateIndex).
        path: The path being planned; only its length is read.
        default_decel: Deceleration used where no state lies ahead.

    Returns:
        Profile aligned index by index with `breakpoints`.
    """
    index = _as_index(states)

    stop_points = {float(path.length)}
    time_constraints: List[Tuple[float, float]] = []
    for state in index:
        if state.type == StateType.DO_HERE:
            stop_points.add(float(state.s))
        elif state.type == StateType.DO_BY:
            time_constraints.append((state.s, state.duration))

    n = len(breakpoints)
    samples: List[VelocitySample] = [None] * n  # type: ignore[list-item]
    v = 0.0

    for i in range(n - 1, -1, -1):
        s = breakpoints[i]
        v_limit = _deadline_velocity_limit(s, time_constraints)

        if i == n - 1:
            v = v_limit
        else:
            ds = breakpoints[i + 1] - s
            upcoming = index.upcoming(s)
            d_max = upcoming.limits.d_max if upcoming is not None else default_decel
            v = min(math.sqrt(v * v + 2.0 * d_max * ds), v_limit)

        if s in stop_points:
            v = 0.0

        samples[i] = VelocitySample(s=s, v=v)

    return VelocityProfile(tuple(samples))


def merge_profiles(a: VelocityProfile, b: VelocityProfile) -> VelocityProfile:
    """Pointwise minimum of two profiles computed over the same breakpoints."""
    if len(a) != len(b):
        raise ValueError(f"profiles must have the same length, got {len(a)} and {len(b)}")

    samples = []
    for sa, sb in zip(a, b):
        if sa.s != sb.s:
            raise ValueError(f"profiles are not aligned: breakpoint {sa.s!r} vs {sb.s!r}")
        samples.append(VelocitySample(s=sa.s, v=min(sa.v, sb.v)))

    return VelocityProfile(tuple(samples))


def wrap_to_pi(angle: float) -> float:
    """Wrap an angle to [-pi, pi)."""
    two_pi = 2.0 * math.pi
    a = (float(angle) + math.pi) % two_pi
    a -= math.pi
    return float(a)


def enforce_orientation(
    pose: Pose2D,
    required_heading: Optional[float],
    tolerance: float = DEFAULT_HEADING_TOLERANCE,
) -> bool:
    """
    Check a pose against a required heading.

    Passes trivially when there is no requirement or the path gave no tangent.
    """
    if required_heading is None or pose.heading is None:
        return True
    return abs(wrap_to_pi(pose.heading - required_heading)) < tolerance


def peak_velocity(
    v_start: float,
    v_end: float,
    ds: float,
    a_max: float,
    d_max: float,
    v_max: float,
) -> float:
    """
    Highest velocity reachable inside a segment that still lands on v_end.

    Intersection of the acceleration parabola from v_start and the deceleration
    parabola into v_end, capped at v_max:

        v_peak² = (2·a·d·ds + d·v_start² + a·v_end²) / (a + d)
    """
    if math.isinf(a_max) and math.isinf(d_max):
        v_peak = math.inf
    elif math.isinf(a_max):
        v_peak = math.sqrt(v_end * v_end + 2.0 * d_max * ds)
    elif math.isinf(d_max):
        v_peak = math.sqrt(v_start * v_start + 2.0 * a_max * ds)
    else:
        v_peak = math.sqrt(
            (2.0 * a_max * d_max * ds + d_max * v_start * v_start + a_max * v_end * v_end)
            / (a_max + d_max)
        )
    return min(v_peak, v_max)


class SegmentTraversal(NamedTuple):
    """Result of traverse_segment()."""

    duration: float
    # Interior corners as (t offset, s offset, v), in time order.
    knots: Tuple[Tuple[float, float, float], ...]
    feasible: bool


def _ramp(v_low: float, v_high: float, rate: float) -> Tuple[float, float]:
    """Time and distance to change speed between v_low and v_high at `rate`."""
    if v_high <= v_low or math.isinf(rate):
        return 0.0, 0.0
    return (v_high - v_low) / rate, (v_high * v_high - v_low * v_low) / (2.0 * rate)


def traverse_segment(
    v_start: float,
    v_end: float,
    ds: float,
    a_max: float,
    d_max: float,
    v_max: float,
    eps: float = DEFAULT_VELOCITY_EPSILON,
) -> SegmentTraversal:
    """
    Time-optimal accelerate / cruise / decelerate traversal of one segment.

    When v_start and v_end cannot be joined under the limits, the segment is
    timed as constant acceleration between them, ds / mean(v), and reported
    as not feasible.

    Args:
        v_start: Velocity at the start of the segment.
        v_end: Velocity at the end of the segment.
        ds: Segment length.
        a_max: Acceleration limit.
        d_max: Deceleration limit.
        v_max: Speed cap.
        eps: Floor for any velocity used as a divisor.
    """
    if ds <= 0:
        return SegmentTraversal(0.0, (), True)

    v_peak = peak_velocity(v_start, v_end, ds, a_max, d_max, v_max)
    if v_peak + eps < max(v_start, v_end):
        v_mean = 0.5 * (v_start + v_end)
        return SegmentTraversal(ds / max(v_mean, eps), (), False)
    v_peak = max(v_peak, v_start, v_end)

    t_acc, d_acc = _ramp(v_start, v_peak, a_max)
    t_dec, d_dec = _ramp(v_end, v_peak, d_max)
    d_cruise = max(ds - d_acc - d_dec, 0.0)
    t_cruise = d_cruise / max(v_peak, eps)

    knots = []
    if 0.0 < d_acc < ds:
        knots.append((t_acc, d_acc, v_peak))
    if d_cruise > 0.0 and d_dec > 0.0:
        knots.append((t_acc + t_cruise, ds - d_dec, v_peak))

    return SegmentTraversal(t_acc + t_cruise + t_dec, tuple(knots), True)
