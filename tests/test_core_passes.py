"""
Tests for the forward and backward velocity passes.

Tests the reachability bounds produced by acceleration (forward) and by
stops, deadlines and deceleration (backward).
"""

import math

import pytest

from velocity_planning.core import compute_backward_profile, compute_forward_profile
from velocity_planning.paths import PolylinePath
from velocity_planning.types import MotionLimits, StateConstraint, StateType

LIMITS = MotionLimits(v_max=2.0, a_max=1.0, d_max=1.0)
PATH = PolylinePath([(0.0, 0.0), (10.0, 0.0)])


def make_state(state_id, s, state_type, duration=1.0, limits=LIMITS):
    return StateConstraint(id=state_id, s=s, type=state_type, duration=duration, limits=limits)


class TestForwardProfile:
    """Test acceleration-limited forward reachability."""

    def test_starts_from_rest(self):
        """The first breakpoint always has v = 0."""
        profile = compute_forward_profile([0.0, 10.0], LIMITS)
        assert profile[0].v == 0.0

    def test_clamped_to_v_max(self):
        """Velocity never exceeds v_max."""
        profile = compute_forward_profile([0.0, 2.0, 10.0], LIMITS)
        assert profile.velocities == pytest.approx((0.0, 2.0, 2.0))

    def test_unconstrained_equality(self):
        """Without the v_max cap, v_i = sqrt(v_{i-1}² + 2·a·ds) exactly."""
        limits = MotionLimits(v_max=100.0, a_max=2.0, d_max=1.0)
        profile = compute_forward_profile([0.0, 0.5, 1.0], limits)
        assert profile.velocities == pytest.approx((0.0, math.sqrt(2.0), 2.0))

    def test_reachability_bound(self):
        """Each step respects both the acceleration bound and v_max."""
        breakpoints = [0.0, 0.3, 1.1, 4.0, 4.2, 9.0]
        limits = MotionLimits(v_max=2.5, a_max=0.8, d_max=1.0)
        profile = compute_forward_profile(breakpoints, limits)
        for prev, cur in zip(profile, profile.samples[1:]):
            bound = math.sqrt(prev.v ** 2 + 2.0 * limits.a_max * (cur.s - prev.s))
            assert cur.v <= bound + 1e-12
            assert cur.v <= limits.v_max


class TestBackwardProfile:
    """Test stop, deadline and deceleration-limited backward reachability."""

    def test_no_states_stops_at_end(self):
        """The only stop is the path end; upstream is bounded by default_decel."""
        profile = compute_backward_profile([0.0, 10.0], [], PATH, default_decel=1.0)
        assert profile.velocities == pytest.approx((math.sqrt(20.0), 0.0))

    def test_no_states_unbounded_by_default(self):
        """Without a state ahead and no default, deceleration is unbounded."""
        profile = compute_backward_profile([0.0, 10.0], [], PATH)
        assert profile[0].v == math.inf
        assert profile[1].v == 0.0

    def test_do_here_forces_zero(self):
        """A DO_HERE breakpoint has exactly v = 0."""
        states = [make_state("stop", 5.0, StateType.DO_HERE)]
        profile = compute_backward_profile([0.0, 5.0, 10.0], states, PATH)
        assert profile[1].v == 0.0
        assert profile[0].v == pytest.approx(math.sqrt(10.0))

    def test_do_here_at_path_end(self):
        """A DO_HERE at the path end keeps the final velocity at 0."""
        states = [make_state("end", 10.0, StateType.DO_HERE)]
        profile = compute_backward_profile([0.0, 10.0], states, PATH)
        assert profile[-1].v == 0.0

    def test_deadline_caps_velocity(self):
        """A DO_BY caps velocity before it at (s_end - s) / duration."""
        fast = MotionLimits(v_max=50.0, a_max=100.0, d_max=100.0)
        states = [make_state("by", 8.0, StateType.DO_BY, duration=4.0, limits=fast)]
        profile = compute_backward_profile([0.0, 8.0, 10.0], states, PATH)
        assert profile.velocities == pytest.approx((2.0, 20.0, 0.0))

    def test_tightest_deadline_wins(self):
        """With several deadlines ahead, the smallest ceiling applies."""
        fast = MotionLimits(v_max=50.0, a_max=100.0, d_max=100.0)
        states = [
            make_state("near", 4.0, StateType.DO_BY, duration=8.0, limits=fast),
            make_state("far", 8.0, StateType.DO_BY, duration=2.0, limits=fast),
        ]
        profile = compute_backward_profile([0.0, 4.0, 8.0, 10.0], states, PATH)
        # at s=0: min(4/8, 8/2) = 0.5
        assert profile[0].v == pytest.approx(0.5)
        # at s=4: only "far" is ahead: 4/2 = 2
        assert profile[1].v == pytest.approx(2.0)

    def test_zero_duration_deadline_has_no_cap(self):
        """A zero-duration DO_BY adds no velocity ceiling."""
        states = [make_state("now", 10.0, StateType.DO_BY, duration=0.0)]
        profile = compute_backward_profile([0.0, 10.0], states, PATH)
        assert profile[0].v == pytest.approx(math.sqrt(20.0))

    def test_uses_decel_of_upcoming_state(self):
        """Deceleration comes from the nearest state at or after s."""
        soft = MotionLimits(v_max=2.0, a_max=1.0, d_max=0.5)
        states = [make_state("stop", 5.0, StateType.DO_HERE, limits=soft)]
        profile = compute_backward_profile([0.0, 5.0, 10.0], states, PATH, default_decel=1.0)
        assert profile[0].v == pytest.approx(math.sqrt(5.0))

    def test_equal_s_tie_break_is_input_order(self):
        """Between two states at the same s, the one given first sets d_max."""
        soft = MotionLimits(v_max=2.0, a_max=1.0, d_max=2.0)
        hard = MotionLimits(v_max=2.0, a_max=1.0, d_max=8.0)
        a = make_state("a", 5.0, StateType.DO_HERE, limits=soft)
        b = make_state("b", 5.0, StateType.DO_HERE, limits=hard)

        profile_ab = compute_backward_profile([0.0, 5.0, 10.0], [a, b], PATH)
        profile_ba = compute_backward_profile([0.0, 5.0, 10.0], [b, a], PATH)

        assert profile_ab[0].v == pytest.approx(math.sqrt(20.0))
        assert profile_ba[0].v == pytest.approx(math.sqrt(80.0))

    def test_non_negative(self):
        """All backward velocities are >= 0."""
        states = [
            make_state("a", 2.0, StateType.DO_BY, duration=3.0),
            make_state("b", 6.0, StateType.DO_HERE),
        ]
        profile = compute_backward_profile([0.0, 2.0, 6.0, 10.0], states, PATH, default_decel=1.0)
        assert all(v >= 0.0 for v in profile.velocities)
