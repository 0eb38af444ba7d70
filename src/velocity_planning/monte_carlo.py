"""
Monte Carlo robustness sweep.

Re-plans the same path many times with every state's position and duration
randomly perturbed, to show how sensitive a plan is to placement and timing
errors.
"""

import logging
from dataclasses import replace
from typing import List, Optional

import numpy as np

from .planner import TrajectoryPlanner
from .types import AnnotatedPath, MotionLimits, StateConstraint, Trajectory


class MonteCarloRunner:
    """
    Plans perturbed copies of an annotated path.

    Each run draws, per state:
        s        <- clip(s + N(0, position_sigma), 0, path.length)
        duration <- max(duration * N(1, duration_sigma), 0)
    """

    def __init__(
        self,
        planner: Optional[TrajectoryPlanner] = None,
        position_sigma: float = 0.02,
        duration_sigma: float = 0.1,
        seed: Optional[int] = None,
    ):
        if position_sigma < 0 or duration_sigma < 0:
            raise ValueError("sigmas must be >= 0")
        self._planner = planner or TrajectoryPlanner()
        self._position_sigma = position_sigma
        self._duration_sigma = duration_sigma
        self._rng = np.random.default_rng(seed)
        self._logger = logging.getLogger(__name__)

    def run(self, base: AnnotatedPath, limits: MotionLimits, iterations: int) -> List[Trajectory]:
        if iterations < 0:
            raise ValueError(f"iterations must be >= 0, got {iterations!r}")

        results: List[Trajectory] = []
        for _ in range(iterations):
            results.append(self._planner.plan(self.perturb(base), limits))

        infeasible = sum(1 for traj in results if traj.violations)
        self._logger.info("Monte Carlo: %d/%d runs with violations", infeasible, iterations)
        return results

    def perturb(self, base: AnnotatedPath) -> AnnotatedPath:
        length = float(base.path.length)
        states = tuple(self._perturb_state(st, length) for st in base.states)
        return AnnotatedPath(path=base.path, states=states)

    def _perturb_state(self, state: StateConstraint, length: float) -> StateConstraint:
        s = state.s + self._rng.normal(0.0, self._position_sigma)
        duration = state.duration * self._rng.normal(1.0, self._duration_sigma)
        return replace(
            state,
            s=float(np.clip(s, 0.0, length)),
            duration=float(max(duration, 0.0)),
        )
