"""Pairwise gravitational force accumulation.

Two interchangeable methods are provided. ``direct`` walks every unordered
pair (i, j), i < j, in a fixed order and applies each force equally and
oppositely; it is the serial reference. ``vectorized`` evaluates the whole
n x n interaction matrix with NumPy and is the faster choice for larger
body counts. Both exclude self-interaction and pairs closer than
``min_distance``, and both return the complete (n, 3) force array before
any integration can see it.
"""

from typing import Literal

import numpy as np

from nbody_sim.errors import InvalidParameterError

MIN_DISTANCE_DEFAULT = 0.1

ForceMethod = Literal["direct", "vectorized"]
FORCE_METHODS = ("direct", "vectorized")


class ForceCalculator:
    """Inverse-square force law with a close-encounter cutoff."""

    def __init__(self, method: ForceMethod = "vectorized", min_distance: float = MIN_DISTANCE_DEFAULT):
        if method not in FORCE_METHODS:
            raise InvalidParameterError(
                f"Unknown force method: {method}. Available: {list(FORCE_METHODS)}"
            )
        if not np.isfinite(min_distance) or min_distance < 0.0:
            raise InvalidParameterError(f"min_distance must be finite and >= 0, got {min_distance!r}")
        self.method = method
        self.min_distance = float(min_distance)

    def compute_forces(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        """Compute the net gravitational force on every body.

        Args:
            positions: (n, 3) positions
            masses: (n,) masses
            G: Gravitational constant

        Returns:
            (n, 3) array of net forces
        """
        positions = np.asarray(positions, dtype=np.float64)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        if positions.shape[0] < 2:
            return np.zeros_like(positions)
        if self.method == "direct":
            return self._compute_forces_direct(positions, masses, G)
        return self._compute_forces_vectorized(positions, masses, G)

    def _compute_forces_direct(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        n = positions.shape[0]
        forces = np.zeros((n, 3))
        for i in range(n):
            for j in range(i + 1, n):
                r = positions[j] - positions[i]
                distance = np.linalg.norm(r)
                if distance < self.min_distance:
                    continue
                magnitude = G * masses[i] * masses[j] / (distance * distance)
                force = (r / distance) * magnitude
                # Newton's third law
                forces[i] += force
                forces[j] -= force
        return forces

    def _compute_forces_vectorized(self, positions: np.ndarray, masses: np.ndarray, G: float) -> np.ndarray:
        n = positions.shape[0]
        # r_diff[i, j] = r_j - r_i
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        distance = np.sqrt(np.sum(r_diff ** 2, axis=2))

        active = distance >= self.min_distance
        np.fill_diagonal(active, False)

        # G m_i m_j / d^2 along the unit vector r/d  ==  G m_i m_j r / d^3
        safe_distance = np.where(active, distance, 1.0)
        coefficient = G * masses[:, np.newaxis] * masses[np.newaxis, :] / safe_distance ** 3
        coefficient = np.where(active, coefficient, 0.0)

        forces = np.sum(coefficient[:, :, np.newaxis] * r_diff, axis=1)
        return forces.reshape(n, 3)
