"""
Trajectory planner: the single entry point hosts call.

Validates the planning input, then runs the pipeline
segment -> forward pass -> backward pass -> merge -> integrate.

Author: Laércio Lucchesi
Date: October 19, 2026
"""

import logging
import math
from typing import Optional, Set

from .config import PlannerConfiguration
from .core import (
    StateIndex,
    compute_backward_profile,
    compute_forward_profile,
    merge_profiles,
    segment_path,
)
from .errors import InvalidLimitsError, InvalidPathError, InvalidStateError
from .integrator import integrate_profile
from .types import AnnotatedPath, MotionLimits, StateConstraint, StateType, Trajectory


def _is_positive(value: float) -> bool:
    # False for NaN
    return value > 0


def validate_limits(limits: MotionLimits) -> None:
    """Raise InvalidLimitsError unless v_max, a_max and d_max are finite and > 0."""
    for name in ("v_max", "a_max", "d_max"):
        value = getattr(limits, name)
        if not (math.isfinite(value) and value > 0):
            raise InvalidLimitsError(f"{name} must be finite and > 0, got {value!r}")


def validate_state(state: StateConstraint, path_length: float) -> None:
    """Raise InvalidStateError if `state` cannot be planned on a path of `path_length`."""
    if state.type not in (StateType.DO_BY, StateType.DO_HERE):
        raise InvalidStateError(state.id, f"unknown type {state.type!r}")
    if not (math.isfinite(state.s) and 0.0 <= state.s <= path_length):
        raise InvalidStateError(state.id, f"s={state.s!r} is outside [0, {path_length!r}]")
    if not (math.isfinite(state.duration) and state.duration >= 0.0):
        raise InvalidStateError(state.id, f"duration must be finite and >= 0, got {state.duration!r}")
    for name in ("v_max", "a_max", "d_max"):
        value = getattr(state.limits, name)
        if not _is_positive(value):
            raise InvalidStateError(state.id, f"limits.{name} must be > 0, got {value!r}")
    if state.required_heading is not None and not math.isfinite(state.required_heading):
        raise InvalidStateError(state.id, f"required_heading must be finite, got {state.required_heading!r}")


def validate_input(annotated: AnnotatedPath, limits: MotionLimits) -> None:
    """
    Reject malformed planning input.

    Raises:
        InvalidPathError: path.length is not finite or <= 0.
        InvalidStateError: a state is out of range, has a negative duration,
            non-positive limits or a duplicate id.
        InvalidLimitsError: base limits are not finite and > 0.
    """
    length = annotated.path.length
    if not (math.isfinite(length) and length > 0):
        raise InvalidPathError(f"path length must be finite and > 0, got {length!r}")

    validate_limits(limits)

    seen: Set[str] = set()
    for state in annotated.states:
        if state.id in seen:
            raise InvalidStateError(state.id, "duplicate id")
        seen.add(state.id)
        validate_state(state, length)


class TrajectoryPlanner:
    """Plans a time-parameterized trajectory along an annotated path."""

    def __init__(self, config: Optional[PlannerConfiguration] = None):
        self._config = config or PlannerConfiguration()
        self._logger = logging.getLogger(__name__)

    @property
    def config(self) -> PlannerConfiguration:
        return self._config

    def plan(self, annotated: AnnotatedPath, base_limits: MotionLimits) -> Trajectory:
        """
        Plan a trajectory for `annotated` under `base_limits`.

        Infeasible constraints never raise; they show up in
        Trajectory.violations.

        Raises:
            PlanningError: The input is malformed (see validate_input()).
        """
        validate_input(annotated, base_limits)

        path = annotated.path
        index = StateIndex(annotated.states)

        breakpoints = segment_path(path, index)
        self._logger.debug(
            "Planning over %d breakpoints (length=%s, states=%d)",
            len(breakpoints),
            path.length,
            len(index),
        )

        v_forward = compute_forward_profile(breakpoints, base_limits)
        v_backward = compute_backward_profile(
            breakpoints, index, path, default_decel=base_limits.d_max
        )
        profile = merge_profiles(v_forward, v_backward)

        trajectory = integrate_profile(profile, path, index, base_limits, self._config)

        self._logger.debug(
            "Planned trajectory: total_time=%.3f, samples=%d",
            trajectory.total_time,
            len(trajectory.samples),
        )
        for violation in trajectory.violations:
            self._logger.warning("Trajectory violation: %s", violation)

        return trajectory


def plan(
    annotated: AnnotatedPath,
    base_limits: MotionLimits,
    config: Optional[PlannerConfiguration] = None,
) -> Trajectory:
    """Plan with a default TrajectoryPlanner."""
    return TrajectoryPlanner(config).plan(annotated, base_limits)
