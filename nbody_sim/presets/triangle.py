"""Equilateral triangle (Lagrange) configuration."""

from typing import List

from nbody_sim.physics.body import Body, create_body
from nbody_sim.presets.base import Preset


class Triangle(Preset):
    """Three unit masses on the vertices of an equilateral triangle.

    Each velocity is the position rotated by 90 degrees and scaled by 1/4,
    so the pattern is symmetric under rotation by 120 degrees.
    """

    @property
    def name(self) -> str:
        return "triangle"

    def generate(self) -> List[Body]:
        return [
            create_body((2.0, 0.0, 0.0), (0.0, 0.5, 0.0), 1.0, 0.3, "#ff6b6b"),
            create_body((-1.0, 1.732, 0.0), (-0.433, -0.25, 0.0), 1.0, 0.3, "#4ecdc4"),
            create_body((-1.0, -1.732, 0.0), (0.433, -0.25, 0.0), 1.0, 0.3, "#45b7d1"),
        ]
