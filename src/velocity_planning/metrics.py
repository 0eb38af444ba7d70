"""
Derived reports over planned trajectories.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Iterable

import pandas as pd

from .types import Trajectory


@dataclass(frozen=True)
class TrajectoryMetrics:
    """
    Summary of one trajectory.

    Attributes:
        total_time: Time to the last sample, dwell included (s).
        idle_time: Time spent dwelling at DO_HERE stops (s).
        max_velocity: Highest sampled velocity.
        max_acceleration: Highest |dv/dt| between consecutive moving samples.
        violation_count: Number of violations recorded.
    """
    total_time: float
    idle_time: float
    max_velocity: float
    max_acceleration: float
    violation_count: int


def summarize(trajectory: Trajectory) -> TrajectoryMetrics:
    idle_time = 0.0
    max_v = 0.0
    max_a = 0.0

    samples = trajectory.samples
    for sample in samples:
        max_v = max(max_v, sample.v)

    for a, b in zip(samples, samples[1:]):
        dt = b.t - a.t
        if a.waiting:
            # The sample after a waiting sample marks the end of the dwell.
            idle_time += dt
            continue
        if dt > 0:
            max_a = max(max_a, abs((b.v - a.v) / dt))

    return TrajectoryMetrics(
        total_time=trajectory.total_time,
        idle_time=idle_time,
        max_velocity=max_v,
        max_acceleration=max_a,
        violation_count=len(trajectory.violations),
    )


def metrics_frame(trajectories: Iterable[Trajectory]) -> pd.DataFrame:
    """One row of TrajectoryMetrics per trajectory, indexed by run number."""
    rows = [asdict(summarize(traj)) for traj in trajectories]
    columns = list(TrajectoryMetrics.__dataclass_fields__)
    df = pd.DataFrame(rows, columns=columns)
    df.index.name = "run"
    return df
