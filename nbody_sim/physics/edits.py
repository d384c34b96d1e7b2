"""Explicit, individually validated body edits.

Each edit is a small frozen record; ``SimulationCore.update_body`` validates
all of them before applying any, so a rejected edit never leaves a body
half-updated.
"""

from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np

from nbody_sim.errors import InvalidParameterError
from nbody_sim.physics.body import Body, as_vector, radius_for_mass, validate_positive


@dataclass(frozen=True)
class SetMass:
    """Change a body's mass; its display radius follows."""
    value: float

    kinematic = True

    def validated(self) -> "SetMass":
        return SetMass(validate_positive("mass", self.value))

    def apply(self, body: Body):
        body.mass = self.value
        body.radius = radius_for_mass(self.value)


@dataclass(frozen=True)
class SetPosition:
    value: Sequence[float]

    kinematic = True

    def validated(self) -> "SetPosition":
        return SetPosition(tuple(as_vector("position", self.value)))

    def apply(self, body: Body):
        body.position = np.array(self.value, dtype=np.float64)


@dataclass(frozen=True)
class SetVelocity:
    value: Sequence[float]

    kinematic = True

    def validated(self) -> "SetVelocity":
        return SetVelocity(tuple(as_vector("velocity", self.value)))

    def apply(self, body: Body):
        body.velocity = np.array(self.value, dtype=np.float64)


@dataclass(frozen=True)
class SetColor:
    """Colour is display-only and may change at any time."""
    value: str

    kinematic = False

    def validated(self) -> "SetColor":
        if not isinstance(self.value, str) or not self.value:
            raise InvalidParameterError(f"color must be a non-empty string, got {self.value!r}")
        return self

    def apply(self, body: Body):
        body.color = self.value


BodyEdit = Union[SetMass, SetPosition, SetVelocity, SetColor]
EDIT_TYPES = (SetMass, SetPosition, SetVelocity, SetColor)
