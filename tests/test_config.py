"""Tests for configuration loading and saving."""

import json
import logging

import pytest

from nbody_sim.errors import InvalidParameterError
from nbody_sim.utils.config import Config, load_config, save_config
from nbody_sim.utils.logging_config import HANDLER_NAME, setup_logging
from nbody_sim.utils.reproducibility import get_seed_info, set_all_seeds


def test_save_load_json(tmp_path):
    config = Config(gravitational_constant=2.0, preset="random", seed=3)
    path = tmp_path / "config.json"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_save_load_yaml(tmp_path):
    config = Config(time_scale=0.5, max_trail_length=100, force_method="direct")
    path = tmp_path / "config.yaml"

    save_config(config, str(path))
    loaded = load_config(str(path))

    assert loaded == config


def test_unknown_keys_rejected(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"preset": "figure8", "particles": 1000}))

    with pytest.raises(InvalidParameterError):
        load_config(str(path))


def test_malformed_file_rejected(tmp_path):
    path = tmp_path / "config.yml"
    path.write_text("- just\n- a list\n")

    with pytest.raises(InvalidParameterError):
        load_config(str(path))


def test_seeding():
    set_all_seeds(123)
    info = get_seed_info(123)
    assert info["seed"] == 123
    assert "numpy_state" in info


@pytest.mark.parametrize("data", [
    {"steps": "10"},
    {"steps": 2.5},
    {"max_trail_length": True},
    {"min_distance": "x"},
    {"gravitational_constant": None},
    {"log_level": 5},
    {"force_method": ["direct"]},
    {"seed": "7"},
])
def test_wrong_value_types_rejected(data):
    with pytest.raises(InvalidParameterError):
        Config.from_dict(data)


def test_int_values_accepted_for_floats():
    config = Config.from_dict({"gravitational_constant": 2, "seed": 5})
    assert config.gravitational_constant == 2.0
    assert isinstance(config.gravitational_constant, float)
    assert config.seed == 5


def test_setup_logging_adds_one_handler():
    logger = setup_logging("DEBUG", name="nbody_sim.tests.logging")
    setup_logging("INFO", name="nbody_sim.tests.logging")

    named = [h for h in logger.handlers if h.get_name() == HANDLER_NAME]
    assert len(named) == 1
    assert logger.level == logging.INFO
