"""Configuration management."""

import json
from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Optional

import yaml

from nbody_sim.errors import InvalidParameterError


@dataclass
class Config:
    """Simulation configuration."""
    # Physics parameters
    gravitational_constant: float = 1.0
    time_scale: float = 1.0
    base_time_step: float = 1.0 / 60.0
    max_trail_length: int = 500
    min_distance: float = 0.1
    force_method: str = "vectorized"

    # Scenario
    preset: str = "figure8"
    steps: int = 600
    seed: Optional[int] = None

    log_level: str = "WARNING"

    def __post_init__(self):
        for name in ("gravitational_constant", "time_scale", "base_time_step", "min_distance"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise InvalidParameterError(f"{name} must be a number, got {value!r}")
            setattr(self, name, float(value))
        for name in ("max_trail_length", "steps"):
            _check_int(name, getattr(self, name))
        if self.steps < 0:
            raise InvalidParameterError(f"steps must be >= 0, got {self.steps}")
        if self.seed is not None:
            _check_int("seed", self.seed)
        for name in ("force_method", "preset", "log_level"):
            value = getattr(self, name)
            if not isinstance(value, str):
                raise InvalidParameterError(f"{name} must be a string, got {value!r}")

    @classmethod
    def from_dict(cls, data: dict) -> "Config":
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidParameterError(f"Unknown config keys: {unknown}")
        return cls(**data)


def _check_int(name: str, value):
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidParameterError(f"{name} must be an integer, got {value!r}")


def _is_yaml(path: Path) -> bool:
    return path.suffix in ('.yaml', '.yml')


def load_config(config_path: str) -> Config:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json or .yaml)

    Returns:
        Config object
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        try:
            if _is_yaml(config_path):
                data = yaml.safe_load(f)
            else:
                data = json.load(f)
        except (yaml.YAMLError, json.JSONDecodeError) as exc:
            raise InvalidParameterError(f"Cannot parse config file {config_path}: {exc}")

    if not isinstance(data, dict):
        raise InvalidParameterError(f"Config file {config_path} must contain a mapping")
    return Config.from_dict(data)


def save_config(config: Config, output_path: str):
    """Save configuration to file.

    Args:
        config: Config object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if _is_yaml(output_path):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
