"""Exception types raised by the simulation core."""


class NBodySimError(Exception):
    """Base class for all nbody_sim errors."""


class InvalidParameterError(NBodySimError, ValueError):
    """A parameter (G, dt, mass, ...) is non-finite, out of range or malformed."""


class BodyNotFoundError(NBodySimError, KeyError):
    """No body with the requested id is managed by the core."""

    def __init__(self, body_id: str):
        super().__init__(body_id)
        self.body_id = body_id

    def __str__(self) -> str:
        return f"Unknown body id: {self.body_id!r}"


class SimulationRunningError(NBodySimError, RuntimeError):
    """A mass or kinematic edit was requested while the simulation is running."""
