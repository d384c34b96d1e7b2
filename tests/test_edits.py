"""Tests for body edits applied through the simulation core."""

import pytest

from nbody_sim.errors import BodyNotFoundError, InvalidParameterError, SimulationRunningError
from nbody_sim.physics.body import radius_for_mass
from nbody_sim.physics.edits import SetColor, SetMass, SetPosition, SetVelocity
from nbody_sim.physics.simulator import SimulationCore


@pytest.fixture
def core():
    core = SimulationCore()
    core.load_preset("triangle")
    return core


def test_set_mass_updates_radius(core):
    body_id = core.get_bodies()[0].id

    snapshot = core.update_body(body_id, SetMass(8.0))

    assert snapshot.mass == 8.0
    assert snapshot.radius == pytest.approx(radius_for_mass(8.0))
    assert snapshot.radius == pytest.approx(1.0)


def test_set_position_and_velocity(core):
    body_id = core.get_bodies()[1].id

    core.update_body(body_id, SetPosition((0.5, 0.5, 0.5)), SetVelocity([1, 2, 3]))

    snapshot = core.get_body(body_id)
    assert snapshot.position == (0.5, 0.5, 0.5)
    assert snapshot.velocity == (1.0, 2.0, 3.0)


def test_invalid_edit_is_atomic(core):
    before = core.get_bodies()[0]

    with pytest.raises(InvalidParameterError):
        core.update_body(before.id, SetPosition((9.0, 9.0, 9.0)), SetMass(-1.0))

    assert core.get_body(before.id) == before


@pytest.mark.parametrize("edit", [SetMass(float("nan")), SetPosition((1.0, 2.0)), SetColor("")])
def test_invalid_edit_values(core, edit):
    with pytest.raises(InvalidParameterError):
        core.update_body(core.get_bodies()[0].id, edit)


def test_unknown_body(core):
    before = core.get_bodies()
    with pytest.raises(BodyNotFoundError):
        core.update_body("missing", SetMass(2.0))
    assert core.get_bodies() == before


def test_kinematic_edits_refused_while_running(core):
    body_id = core.get_bodies()[0].id
    core.start()

    for edit in (SetMass(2.0), SetPosition((0.0, 0.0, 0.0)), SetVelocity((0.0, 0.0, 0.0))):
        with pytest.raises(SimulationRunningError):
            core.update_body(body_id, edit)

    assert core.get_body(body_id).mass == 1.0


def test_color_edit_allowed_while_running(core):
    body_id = core.get_bodies()[0].id
    core.start()

    snapshot = core.update_body(body_id, SetColor("#ffffff"))

    assert snapshot.color == "#ffffff"


def test_unsupported_edit(core):
    with pytest.raises(InvalidParameterError):
        core.update_body(core.get_bodies()[0].id, ("mass", 2.0))
