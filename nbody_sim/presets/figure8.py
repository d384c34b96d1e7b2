"""Figure-eight periodic three-body orbit."""

from typing import List

from nbody_sim.physics.body import Body, create_body
from nbody_sim.presets.base import Preset

# Period of the figure-eight choreography in G = m = 1 units.
FIGURE8_PERIOD = 6.3259


class Figure8(Preset):
    """Three unit masses chasing each other along a figure-eight curve."""

    @property
    def name(self) -> str:
        return "figure8"

    def generate(self) -> List[Body]:
        return [
            create_body((-1.0, 0.0, 0.0), (0.347, 0.532, 0.0), 1.0, 0.3, "#ff6b6b"),
            create_body((1.0, 0.0, 0.0), (0.347, 0.532, 0.0), 1.0, 0.3, "#4ecdc4"),
            create_body((0.0, 0.0, 0.0), (-0.694, -1.064, 0.0), 1.0, 0.3, "#45b7d1"),
        ]
