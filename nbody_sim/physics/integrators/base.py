"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class Integrator(ABC):
    """Abstract interface for fixed-step integrators."""

    @abstractmethod
    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """Perform one integration step.

        Args:
            positions: (n, 3) positions
            velocities: (n, 3) velocities
            masses: (n,) masses, all positive
            forces: (n, 3) net forces, fully accumulated
            dt: Time step

        Returns:
            Tuple of (new_positions, new_velocities)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
