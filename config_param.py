"""Centralized parameter/config constants for the demo scripts.

This module is the single source of truth for the scenario planned by
main.py and the files exchanged with plot_trajectory.py.
"""

# --------------------------------------------------------------------------------------
# 1) Planner numerics
# --------------------------------------------------------------------------------------

VELOCITY_EPSILON: float = 1e-6       # Velocity floor for divisions (units/s)
HEADING_TOLERANCE: float = 0.05      # Accepted heading error at DO_HERE stops (rad)
EMIT_RAMP_SAMPLES: bool = True       # Emit accel/decel corner samples

# --------------------------------------------------------------------------------------
# 2) Demo path (path units, e.g. feet on a field drawing)
# --------------------------------------------------------------------------------------

# Waypoints of the demo route, joined by straight segments.
PATH_WAYPOINTS: tuple = (
    (0.0, 0.0),
    (12.0, 0.0),
    (12.0, 8.0),
    (20.0, 8.0),
)

# --------------------------------------------------------------------------------------
# 3) Demo constraints
# --------------------------------------------------------------------------------------

# (id, s, type, duration, required_heading). Limits come from the selected preset.
DEMO_STATES: tuple = (
    ("intake", 12.0, "DO_HERE", 1.5, None),
    ("checkpoint", 16.0, "DO_BY", 12.0, None),
    ("score", 28.0, "DO_HERE", 2.0, 0.0),
)

# --------------------------------------------------------------------------------------
# 4) Output files
# --------------------------------------------------------------------------------------

TRAJECTORY_CSV: str = "trajectory.csv"          # Samples written by main.py
MONTE_CARLO_CSV: str = "monte_carlo.csv"        # Per-run metrics written by main.py
MONTE_CARLO_ITERATIONS: int = 200               # 0 disables the sweep
MONTE_CARLO_SEED: int = 7
