"""
Structured trajectory violations.

Violations are diagnostics attached to a planned trajectory, never raised.
Each kind carries a class-level TYPE tag so hosts can dispatch on it or
serialize it without isinstance chains.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Dict, Union


@dataclass(frozen=True)
class StateMissed:
    """A constraint was never reached during integration."""

    TYPE: ClassVar[str] = "STATE_MISSED"

    state_id: str

    def to_dict(self) -> Dict[str, object]:
        return {"type": self.TYPE, "state_id": self.state_id}


@dataclass(frozen=True)
class OrientationMissed:
    """A DO_HERE stop did not satisfy its required heading."""

    TYPE: ClassVar[str] = "ORIENTATION_MISSED"

    state_id: str

    def to_dict(self) -> Dict[str, object]:
        return {"type": self.TYPE, "state_id": self.state_id}


@dataclass(frozen=True)
class PhysicsLimit:
    """Acceleration/deceleration limit exceeded, or a deadline missed, at arc-length s."""

    TYPE: ClassVar[str] = "PHYSICS_LIMIT"

    s: float

    def to_dict(self) -> Dict[str, object]:
        return {"type": self.TYPE, "s": self.s}


TrajectoryViolation = Union[StateMissed, OrientationMissed, PhysicsLimit]
