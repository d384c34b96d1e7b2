"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple

import numpy as np

from nbody_sim.physics.integrators.base import Integrator


class SymplecticEulerIntegrator(Integrator):
    """First-order Euler step that kicks the velocity before drifting.

    The position update uses the already-updated velocity, which keeps
    orbits bounded far longer than the classic explicit Euler ordering.
    """

    @property
    def name(self) -> str:
        return "symplectic_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, masses, forces, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """v_new = v + (F/m)*dt, r_new = r + v_new*dt."""
        masses_1d = np.asarray(masses, dtype=np.float64).reshape(-1)
        accelerations = np.asarray(forces, dtype=np.float64) / masses_1d[:, np.newaxis]

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
