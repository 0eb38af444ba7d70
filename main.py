"""Trajectory planning demo.

This script plans the demo route defined in config_param.py with the
TrajectoryPlanner, prints a sample table, logs any violations, and writes
the samples to a CSV file that plot_trajectory.py can display. Optionally
it also runs a Monte Carlo sweep over perturbed constraints and stores the
per-run metrics.

Run:
    python main.py
"""

import logging
import os

from config_param import (
    DEMO_STATES,
    EMIT_RAMP_SAMPLES,
    HEADING_TOLERANCE,
    MONTE_CARLO_CSV,
    MONTE_CARLO_ITERATIONS,
    MONTE_CARLO_SEED,
    PATH_WAYPOINTS,
    TRAJECTORY_CSV,
    VELOCITY_EPSILON,
)
from velocity_planning import (
    AnnotatedPath,
    MonteCarloRunner,
    MotionLimits,
    PlannerConfiguration,
    PolylinePath,
    StateConstraint,
    StateType,
    TrajectoryPlanner,
    metrics_frame,
    summarize,
)
from velocity_planning.export import write_trajectory_csv

# ============================================================
# Motion limit presets (choose by editing ONE variable)
#
# Profiles: Cautious, Match, Sprint, Custom
# Units follow the path units (e.g. ft, ft/s, ft/s²).
# ============================================================

LIMITS_PROFILE: str = "Match"  # Choose limits profile here


CUSTOM_LIMITS = MotionLimits(
    v_max=10.0,      # Max linear speed
    a_max=6.0,       # Max acceleration
    d_max=8.0,       # Max deceleration
    w_max=6.0,       # Max angular speed (rad/s), reserved
    alpha_max=12.0,  # Max angular acceleration (rad/s²), reserved
)


LIMITS_PRESETS: dict[str, MotionLimits] = {
    "Cautious": MotionLimits(v_max=4.0, a_max=2.0, d_max=3.0, w_max=3.0, alpha_max=6.0),
    "Match": MotionLimits(v_max=12.0, a_max=8.0, d_max=10.0, w_max=8.0, alpha_max=16.0),
    "Sprint": MotionLimits(v_max=16.0, a_max=12.0, d_max=14.0, w_max=10.0, alpha_max=20.0),
    "Custom": CUSTOM_LIMITS,
}


def build_demo_input(limits: MotionLimits) -> AnnotatedPath:
    path = PolylinePath(PATH_WAYPOINTS)
    states = tuple(
        StateConstraint(
            id=state_id,
            s=s,
            type=StateType(state_type),
            duration=duration,
            limits=limits,
            required_heading=heading,
        )
        for state_id, s, state_type, duration, heading in DEMO_STATES
    )
    return AnnotatedPath(path=path, states=states)


def main() -> int:
    """Plan the demo route and write the results."""
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
    logger = logging.getLogger(__name__)

    profile = (LIMITS_PROFILE or "").strip()
    limits = LIMITS_PRESETS.get(profile)
    if limits is None:
        valid = ", ".join(sorted(LIMITS_PRESETS.keys()))
        raise ValueError(f"Unknown LIMITS_PROFILE={LIMITS_PROFILE!r}. Valid options: {valid}")

    print(
        "Limits preset: "
        f"{profile} "
        f"(v_max={limits.v_max}, a_max={limits.a_max}, d_max={limits.d_max})"
    )

    config = PlannerConfiguration(
        velocity_epsilon=VELOCITY_EPSILON,
        heading_tolerance=HEADING_TOLERANCE,
        emit_ramp_samples=EMIT_RAMP_SAMPLES,
    )
    planner = TrajectoryPlanner(config)
    annotated = build_demo_input(limits)

    trajectory = planner.plan(annotated, limits)

    print("=" * 60)
    print(f"{'t (s)':>8} | {'s':>8} | {'v':>8} | {'x':>8} | {'y':>8} | state")
    print("-" * 60)
    for sample in trajectory.samples:
        label = f"{sample.state_id} (wait)" if sample.waiting else ""
        print(
            f"{sample.t:>8.3f} | {sample.s:>8.3f} | {sample.v:>8.3f} | "
            f"{sample.pose.position.x:>8.3f} | {sample.pose.position.y:>8.3f} | {label}"
        )
    print("-" * 60)

    metrics = summarize(trajectory)
    print(
        f"total_time={metrics.total_time:.3f} s, idle_time={metrics.idle_time:.3f} s, "
        f"max_velocity={metrics.max_velocity:.3f}, max_acceleration={metrics.max_acceleration:.3f}"
    )
    if trajectory.violations:
        logger.warning("Plan is constraint-violating (%d violations)", len(trajectory.violations))
    else:
        print("Plan satisfies every constraint.")

    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TRAJECTORY_CSV)
    write_trajectory_csv(trajectory, csv_path)
    print(f"Saved: {csv_path}")

    if MONTE_CARLO_ITERATIONS > 0:
        runner = MonteCarloRunner(planner, seed=MONTE_CARLO_SEED)
        runs = runner.run(annotated, limits, MONTE_CARLO_ITERATIONS)
        df = metrics_frame(runs)
        mc_path = os.path.join(script_dir, MONTE_CARLO_CSV)
        df.to_csv(mc_path)
        print(
            f"Monte Carlo ({len(df)} runs): total_time mean={df['total_time'].mean():.3f} s, "
            f"std={df['total_time'].std():.3f} s, runs with violations={(df['violation_count'] > 0).sum()}"
        )
        print(f"Saved: {mc_path}")

    print("=" * 60)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
