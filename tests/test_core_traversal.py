"""
Tests for single-segment traversal timing and heading checks.
"""

import math

import pytest

from velocity_planning.core import enforce_orientation, peak_velocity, traverse_segment, wrap_to_pi
from velocity_planning.types import Pose2D, Vec2


class TestTraverseSegment:
    """Test time-optimal accelerate / cruise / decelerate traversal."""

    def test_trapezoid(self):
        """Rest to rest over 10 units with v_max=2, a=d=1 takes 2 + 3 + 2 s."""
        traversal = traverse_segment(0.0, 0.0, 10.0, a_max=1.0, d_max=1.0, v_max=2.0)
        assert traversal.feasible
        assert traversal.duration == pytest.approx(7.0)
        assert len(traversal.knots) == 2
        assert traversal.knots[0] == pytest.approx((2.0, 2.0, 2.0))
        assert traversal.knots[1] == pytest.approx((5.0, 8.0, 2.0))

    def test_triangle(self):
        """A short segment never reaches v_max and has a single corner."""
        traversal = traverse_segment(0.0, 0.0, 2.0, a_max=1.0, d_max=1.0, v_max=2.0)
        assert traversal.duration == pytest.approx(2.0 * math.sqrt(2.0))
        assert len(traversal.knots) == 1
        t_knot, s_knot, v_knot = traversal.knots[0]
        assert t_knot == pytest.approx(math.sqrt(2.0))
        assert s_knot == pytest.approx(1.0)
        assert v_knot == pytest.approx(math.sqrt(2.0))

    def test_cruise_only(self):
        """Equal end velocities at v_max are pure cruise."""
        traversal = traverse_segment(2.0, 2.0, 4.0, a_max=1.0, d_max=1.0, v_max=2.0)
        assert traversal.duration == pytest.approx(2.0)
        assert traversal.knots == ()

    def test_unbounded_acceleration(self):
        """Infinite a/d limits jump straight to v_max."""
        traversal = traverse_segment(0.0, 0.0, 10.0, a_max=math.inf, d_max=math.inf, v_max=2.0)
        assert traversal.duration == pytest.approx(5.0)

    def test_infeasible_endpoints_fall_back(self):
        """Unjoinable end velocities are timed as constant acceleration."""
        traversal = traverse_segment(0.0, 2.0, 1.0, a_max=1.0, d_max=1.0, v_max=10.0)
        assert not traversal.feasible
        assert traversal.duration == pytest.approx(1.0)  # ds / mean(v) = 1 / 1

    def test_zero_length(self):
        """A zero-length segment takes no time."""
        traversal = traverse_segment(1.0, 1.0, 0.0, a_max=1.0, d_max=1.0, v_max=2.0)
        assert traversal.duration == 0.0

    def test_rest_to_rest_with_tiny_limits(self):
        """Velocity floor keeps the duration finite."""
        traversal = traverse_segment(0.0, 0.0, 1.0, a_max=1.0, d_max=1.0, v_max=1e-12, eps=1e-6)
        assert math.isfinite(traversal.duration)
        assert traversal.duration == pytest.approx(1e6)


class TestPeakVelocity:
    """Test the accel/decel parabola intersection."""

    def test_symmetric(self):
        """Equal limits from rest to rest peak at sqrt(a·ds)."""
        assert peak_velocity(0.0, 0.0, 8.0, 1.0, 1.0, 100.0) == pytest.approx(math.sqrt(8.0))

    def test_capped(self):
        """Peak is capped at v_max."""
        assert peak_velocity(0.0, 0.0, 100.0, 1.0, 1.0, 3.0) == 3.0

    def test_one_sided_infinite(self):
        """With infinite acceleration only the deceleration parabola matters."""
        assert peak_velocity(0.0, 1.0, 4.0, math.inf, 1.0, 100.0) == pytest.approx(3.0)


class TestOrientation:
    """Test heading normalization and the DO_HERE heading check."""

    def test_wrap_to_pi(self):
        """Angles wrap into [-pi, pi)."""
        assert wrap_to_pi(0.5) == pytest.approx(0.5)
        assert wrap_to_pi(2.0 * math.pi + 0.1) == pytest.approx(0.1)
        assert wrap_to_pi(-2.0 * math.pi - 0.1) == pytest.approx(-0.1)

    def test_within_tolerance(self):
        """Errors below tolerance pass."""
        pose = Pose2D(position=Vec2(0.0, 0.0), heading=0.04)
        assert enforce_orientation(pose, 0.0, tolerance=0.05)

    def test_outside_tolerance(self):
        """Errors above tolerance fail."""
        pose = Pose2D(position=Vec2(0.0, 0.0), heading=0.06)
        assert not enforce_orientation(pose, 0.0, tolerance=0.05)

    def test_zero_heading_is_a_requirement(self):
        """A required heading of 0 rad is checked, not ignored."""
        pose = Pose2D(position=Vec2(0.0, 0.0), heading=1.0)
        assert not enforce_orientation(pose, 0.0)

    def test_wraparound(self):
        """Headings on either side of ±pi are close."""
        pose = Pose2D(position=Vec2(0.0, 0.0), heading=math.pi - 0.01)
        assert enforce_orientation(pose, -math.pi + 0.01)

    def test_missing_data_passes(self):
        """No requirement or no tangent passes trivially."""
        assert enforce_orientation(Pose2D(position=Vec2(0.0, 0.0), heading=1.0), None)
        assert enforce_orientation(Pose2D(position=Vec2(0.0, 0.0)), 1.0)
