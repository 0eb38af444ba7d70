"""Core-only example (no host application required).

This script walks through the *pure* functions exposed by
`velocity_planning.core` on a straight 10-unit path:

- breakpoint segmentation
- forward and backward velocity passes
- profile merging
- time integration

For the full pipeline (validation + logging + export), use `main.py` at the
repository root.

Usage:
    python ./examples/ex_trapezoid_profile.py
"""

from velocity_planning import (
    MotionLimits,
    PolylinePath,
    StateConstraint,
    StateType,
    compute_backward_profile,
    compute_forward_profile,
    integrate_profile,
    merge_profiles,
    segment_path,
)


def walk_through_passes():
    """
    Plan a straight path with one DO_HERE stop, pass by pass.
    """
    print("Core-only demo: segmentation + forward/backward passes + integration")

    limits = MotionLimits(v_max=2.0, a_max=1.0, d_max=1.0)
    path = PolylinePath([(0.0, 0.0), (10.0, 0.0)])
    states = [
        StateConstraint(id="stop", s=5.0, type=StateType.DO_HERE, duration=3.0, limits=limits),
    ]

    breakpoints = segment_path(path, states)
    forward = compute_forward_profile(breakpoints, limits)
    backward = compute_backward_profile(breakpoints, states, path, default_decel=limits.d_max)
    merged = merge_profiles(forward, backward)

    print(f"Breakpoints: {breakpoints}")
    print("-" * 60)
    print(f"{'s':>6} | {'forward':>8} | {'backward':>8} | {'merged':>8}")
    print("-" * 60)
    for f, b, m in zip(forward, backward, merged):
        print(f"{f.s:>6.2f} | {f.v:>8.3f} | {b.v:>8.3f} | {m.v:>8.3f}")

    trajectory = integrate_profile(merged, path, states, limits)

    print("-" * 60)
    print(f"{'t (s)':>6} | {'s':>6} | {'v':>6} | waiting")
    for sample in trajectory.samples:
        print(f"{sample.t:>6.2f} | {sample.s:>6.2f} | {sample.v:>6.2f} | {sample.waiting}")
    print("-" * 60)
    print(f"Total time: {trajectory.total_time:.2f} s (expected 12.00: 4.5 + 3 dwell + 4.5)")
    print(f"Violations: {list(trajectory.violations)}")


if __name__ == "__main__":
    walk_through_passes()
