"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import List, Optional

from nbody_sim.physics.body import Body


class Preset(ABC):
    """Abstract base class for preset scenarios.

    Presets do not depend on any simulation state; every call to
    ``generate`` returns brand-new bodies with fresh ids and empty trails.
    """

    def __init__(self, seed: Optional[int] = None):
        """Initialize preset.

        Args:
            seed: Random seed for reproducibility (ignored by fixed presets)
        """
        self.seed = seed

    @abstractmethod
    def generate(self) -> List[Body]:
        """Generate initial bodies."""
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
