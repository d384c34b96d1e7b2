"""Physics engine for N-body simulations."""

from nbody_sim.physics.body import Body, BodySnapshot, create_body
from nbody_sim.physics.edits import SetColor, SetMass, SetPosition, SetVelocity
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.simulator import SimulationCore

__all__ = [
    "Body",
    "BodySnapshot",
    "create_body",
    "SetMass",
    "SetPosition",
    "SetVelocity",
    "SetColor",
    "ForceCalculator",
    "SimulationCore",
]
