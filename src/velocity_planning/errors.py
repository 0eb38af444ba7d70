"""Errors raised when planning input is malformed."""


class PlanningError(ValueError):
    """Base class for input rejected at the plan() boundary."""


class InvalidPathError(PlanningError):
    """The path has no usable length."""


class InvalidStateError(PlanningError):
    """A state constraint is out of range or otherwise malformed."""

    def __init__(self, state_id, message: str):
        super().__init__(f"state {state_id!r}: {message}")
        self.state_id = state_id


class InvalidLimitsError(PlanningError):
    """Base motion limits cannot drive the vehicle."""
