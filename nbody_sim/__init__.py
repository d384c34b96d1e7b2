"""
N-body Simulator - physics core for an interactive gravitational N-body visualizer.

Features:
- Pairwise inverse-square gravity with a close-encounter cutoff
- Semi-implicit Euler integration at a fixed time step
- Bounded motion trails for rendering
- Preset scenarios (figure-eight, triangle, random)
- Headless CLI driver
"""

__version__ = "0.1.0"

from nbody_sim.errors import (
    BodyNotFoundError,
    InvalidParameterError,
    NBodySimError,
    SimulationRunningError,
)
from nbody_sim.physics.simulator import SimulationCore
from nbody_sim.presets import get_preset, list_presets

__all__ = [
    "SimulationCore",
    "get_preset",
    "list_presets",
    "NBodySimError",
    "InvalidParameterError",
    "BodyNotFoundError",
    "SimulationRunningError",
]
