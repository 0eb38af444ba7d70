"""
Tabular export of trajectories.

Produces pandas DataFrames (and CSV files) with one row per sample or per
violation, for plotting and offline inspection.
"""

from __future__ import annotations

import os
from typing import Union

import pandas as pd

from .types import Trajectory

SAMPLE_COLUMNS = ["t", "s", "v", "x", "y", "heading", "state_id", "waiting"]
VIOLATION_COLUMNS = ["type", "state_id", "s"]


def trajectory_to_frame(trajectory: Trajectory) -> pd.DataFrame:
    rows = [
        {
            "t": sample.t,
            "s": sample.s,
            "v": sample.v,
            "x": sample.pose.position.x,
            "y": sample.pose.position.y,
            "heading": sample.pose.heading,
            "state_id": sample.state_id,
            "waiting": sample.waiting,
        }
        for sample in trajectory.samples
    ]
    return pd.DataFrame(rows, columns=SAMPLE_COLUMNS)


def violations_to_frame(trajectory: Trajectory) -> pd.DataFrame:
    rows = [violation.to_dict() for violation in trajectory.violations]
    return pd.DataFrame(rows, columns=VIOLATION_COLUMNS)


def write_trajectory_csv(trajectory: Trajectory, csv_path: Union[str, os.PathLike]) -> None:
    """Write the samples of `trajectory` to `csv_path`."""
    trajectory_to_frame(trajectory).to_csv(csv_path, index=False)
