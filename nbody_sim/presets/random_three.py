"""Randomised three-body configuration."""

from typing import List, Optional

import numpy as np

from nbody_sim.physics.body import Body, create_body
from nbody_sim.presets.base import Preset

COLORS = ("#ff6b6b", "#4ecdc4", "#45b7d1")


class RandomThreeBody(Preset):
    """Three bodies with uniformly sampled positions, velocities and masses."""

    def __init__(
        self,
        seed: Optional[int] = None,
        position_extent=(2.0, 2.0, 1.0),
        velocity_extent=(1.0, 1.0, 0.5),
        mass_range=(0.5, 2.5),
    ):
        """Initialize random preset.

        Args:
            seed: Random seed
            position_extent: Half-widths of the position box per axis
            velocity_extent: Half-widths of the velocity range per axis
            mass_range: (low, high) for uniform mass sampling
        """
        super().__init__(seed)
        self.position_extent = np.asarray(position_extent, dtype=np.float64)
        self.velocity_extent = np.asarray(velocity_extent, dtype=np.float64)
        self.mass_range = mass_range

    @property
    def name(self) -> str:
        return "random"

    def generate(self) -> List[Body]:
        rng = np.random.default_rng(self.seed)

        bodies = []
        for color in COLORS:
            position = rng.uniform(-self.position_extent, self.position_extent)
            velocity = rng.uniform(-self.velocity_extent, self.velocity_extent)
            mass = rng.uniform(*self.mass_range)
            # radius derived from mass
            bodies.append(create_body(position, velocity, mass, color=color))
        return bodies
