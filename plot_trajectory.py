"""Plot a planned trajectory from trajectory.csv.

Creates one figure with:
- s vs t (waiting samples marked)
- v vs t
- path (x, y) with DO_HERE stops marked

Run:
    python main.py
    python plot_trajectory.py

By default, reads ./trajectory.csv (same directory as this script).
"""

from __future__ import annotations

import os

import pandas as pd
import matplotlib.pyplot as plt

from config_param import TRAJECTORY_CSV


def main() -> int:
    script_dir = os.path.dirname(os.path.abspath(__file__))
    csv_path = os.path.join(script_dir, TRAJECTORY_CSV)

    if not os.path.exists(csv_path):
        print(f"CSV not found: {csv_path}")
        return 1

    df = pd.read_csv(csv_path)

    required_cols = {"t", "s", "v", "x", "y", "waiting"}
    missing = required_cols - set(df.columns)
    if missing:
        print(f"Missing columns in CSV: {sorted(missing)}")
        return 1

    if df.empty:
        print("CSV is empty.")
        return 0

    # Ensure numeric types and sort by time.
    df = df.copy()
    for col in ("t", "s", "v", "x", "y"):
        df[col] = pd.to_numeric(df[col], errors="coerce")
    df["waiting"] = df["waiting"].astype(str).str.lower() == "true"
    df = df.dropna(subset=["t", "s", "v", "x", "y"]).sort_values("t", kind="stable")

    stops = df[df["waiting"]]

    fig, (ax_s, ax_v, ax_xy) = plt.subplots(3, 1, figsize=(10, 10))
    fig.suptitle("Planned trajectory")

    ax_s.plot(df["t"], df["s"], linewidth=1.2, label="s")
    if not stops.empty:
        ax_s.scatter(stops["t"], stops["s"], color="tab:red", zorder=3, label="DO_HERE stop")
    ax_s.set_ylabel("s")
    ax_s.grid(True, alpha=0.3)
    ax_s.legend(loc="best")

    ax_v.plot(df["t"], df["v"], linewidth=1.2)
    ax_v.axhline(0.0, color="k", linewidth=0.8, alpha=0.4)
    ax_v.set_ylabel("v")
    ax_v.set_xlabel("t (s)")
    ax_v.grid(True, alpha=0.3)

    ax_xy.plot(df["x"], df["y"], linewidth=1.2)
    if not stops.empty:
        ax_xy.scatter(stops["x"], stops["y"], color="tab:red", zorder=3)
        if "state_id" in df.columns:
            for _, row in stops.iterrows():
                ax_xy.annotate(str(row["state_id"]), (row["x"], row["y"]), fontsize=9, alpha=0.8)
    ax_xy.set_xlabel("x")
    ax_xy.set_ylabel("y")
    ax_xy.set_aspect("equal", adjustable="datalim")
    ax_xy.grid(True, alpha=0.3)

    fig.tight_layout()
    plt.show()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
