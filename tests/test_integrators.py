"""Tests for numerical integrators."""

import numpy as np

from nbody_sim.physics.integrators.euler import SymplecticEulerIntegrator


def test_symplectic_euler_integrator():
    """Velocity is kicked first, then the position drifts with the new velocity."""
    integrator = SymplecticEulerIntegrator()

    positions = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    velocities = np.array([[1.0, 0.0, 0.0], [0.0, 0.0, 0.0]])
    masses = np.array([2.0, 1.0])
    forces = np.array([[4.0, 0.0, 0.0], [0.0, -1.0, 0.0]])
    dt = 0.1

    new_pos, new_vel = integrator.step(positions, velocities, masses, forces, dt)

    assert np.allclose(new_vel, [[1.2, 0.0, 0.0], [0.0, -0.1, 0.0]])
    assert np.allclose(new_pos, [[0.12, 0.0, 0.0], [1.0, -0.01, 0.0]])
    assert integrator.name == "symplectic_euler"
    assert integrator.order == 1


def test_zero_force_is_linear_motion():
    integrator = SymplecticEulerIntegrator()

    positions = np.array([[0.0, 0.0, 0.0], [1.0, 1.0, 1.0]])
    velocities = np.array([[0.5, -0.5, 0.0], [0.0, 0.0, 2.0]])
    masses = np.array([1.0, 3.0])
    forces = np.zeros((2, 3))

    new_pos, new_vel = integrator.step(positions, velocities, masses, forces, 0.25)

    assert np.allclose(new_vel, velocities)
    assert np.allclose(new_pos, positions + velocities * 0.25)


def test_integrator_does_not_modify_inputs():
    integrator = SymplecticEulerIntegrator()
    positions = np.array([[0.0, 0.0, 0.0]])
    velocities = np.array([[1.0, 0.0, 0.0]])

    integrator.step(positions, velocities, np.array([1.0]), np.array([[1.0, 0.0, 0.0]]), 0.1)

    assert np.allclose(positions, [[0.0, 0.0, 0.0]])
    assert np.allclose(velocities, [[1.0, 0.0, 0.0]])
