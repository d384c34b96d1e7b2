"""Conservation diagnostics for N-body simulations."""

from typing import Tuple

import numpy as np

from nbody_sim.physics.force_calculator import MIN_DISTANCE_DEFAULT


class Diagnostics:
    """Compute momentum and energy consistently with the force law.

    Pairs closer than ``min_distance`` exert no force, so they are left out
    of the potential energy as well.
    """

    def __init__(self, G: float = 1.0, min_distance: float = MIN_DISTANCE_DEFAULT):
        self.G = G
        self.min_distance = min_distance

    def total_momentum(self, velocities, masses) -> np.ndarray:
        """Total linear momentum: sum(m_i * v_i), shape (3,)."""
        velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        return np.sum(masses[:, np.newaxis] * velocities, axis=0)

    def kinetic_energy(self, velocities, masses) -> float:
        velocities = np.asarray(velocities, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        return float(0.5 * np.sum(masses * np.sum(velocities ** 2, axis=1)))

    def potential_energy(self, positions, masses) -> float:
        """U = -G * sum_{i<j, d_ij >= min_distance} m_i * m_j / d_ij."""
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        n = len(masses)
        if n < 2:
            return 0.0

        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        distance = np.sqrt(np.sum(r_diff ** 2, axis=2))
        upper = np.triu(np.ones((n, n), dtype=bool), k=1)
        active = upper & (distance >= self.min_distance)

        safe_distance = np.where(active, distance, 1.0)
        pair_terms = np.where(active, masses[:, np.newaxis] * masses[np.newaxis, :] / safe_distance, 0.0)
        return float(-self.G * np.sum(pair_terms))

    def compute_energies(self, positions, velocities, masses) -> Tuple[float, float, float]:
        """Return (kinetic, potential, total) energy."""
        K = self.kinetic_energy(velocities, masses)
        U = self.potential_energy(positions, masses)
        return K, U, K + U

    def center_of_mass(self, positions, masses) -> np.ndarray:
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 3)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        if len(masses) == 0:
            return np.zeros(3)
        return np.sum(masses[:, np.newaxis] * positions, axis=0) / np.sum(masses)
