"""Tests for preset scenarios."""

import numpy as np
import pytest

from nbody_sim.errors import InvalidParameterError
from nbody_sim.physics.body import radius_for_mass
from nbody_sim.presets import Figure8, RandomThreeBody, Triangle, get_preset, list_presets


def test_figure8():
    """Test figure-eight preset."""
    preset = Figure8()
    bodies = preset.generate()

    assert preset.name == "figure8"
    assert len(bodies) == 3
    assert np.allclose([b.position for b in bodies], [[-1, 0, 0], [1, 0, 0], [0, 0, 0]])
    assert np.allclose(
        [b.velocity for b in bodies],
        [[0.347, 0.532, 0], [0.347, 0.532, 0], [-0.694, -1.064, 0]],
    )
    assert all(b.mass == 1.0 for b in bodies)
    # Zero total momentum
    assert np.allclose(sum(b.mass * b.velocity for b in bodies), 0.0)


def test_triangle():
    """Test triangle preset."""
    preset = Triangle()
    bodies = preset.generate()

    assert preset.name == "triangle"
    assert len(bodies) == 3
    assert np.allclose(
        [b.position for b in bodies],
        [[2, 0, 0], [-1, 1.732, 0], [-1, -1.732, 0]],
    )
    speeds = [np.linalg.norm(b.velocity) for b in bodies]
    assert np.allclose(speeds, 0.5, atol=1e-3)


def test_random_preset_ranges():
    preset = RandomThreeBody(seed=42)
    bodies = preset.generate()

    assert preset.name == "random"
    assert len(bodies) == 3
    for body in bodies:
        assert np.all(np.abs(body.position[:2]) <= 2.0)
        assert abs(body.position[2]) <= 1.0
        assert np.all(np.abs(body.velocity[:2]) <= 1.0)
        assert abs(body.velocity[2]) <= 0.5
        assert 0.5 <= body.mass <= 2.5
        assert body.radius == pytest.approx(radius_for_mass(body.mass))


def test_preset_reproducibility():
    """Same seed, same configuration; ids are still fresh."""
    bodies1 = RandomThreeBody(seed=42).generate()
    bodies2 = RandomThreeBody(seed=42).generate()

    assert np.allclose([b.position for b in bodies1], [b.position for b in bodies2])
    assert np.allclose([b.velocity for b in bodies1], [b.velocity for b in bodies2])
    assert np.allclose([b.mass for b in bodies1], [b.mass for b in bodies2])
    assert {b.id for b in bodies1}.isdisjoint({b.id for b in bodies2})


def test_generated_bodies_are_fresh():
    preset = Figure8()
    first, second = preset.generate(), preset.generate()

    ids = [b.id for b in first + second]
    assert len(set(ids)) == 6
    assert all(len(b.trail) == 0 for b in first + second)


def test_registry():
    assert list_presets() == ["figure8", "triangle", "random"]
    assert isinstance(get_preset("Triangle"), Triangle)
    with pytest.raises(InvalidParameterError):
        get_preset("solar_system")
