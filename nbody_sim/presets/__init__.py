"""Preset scenario generators."""

from typing import List, Optional

from nbody_sim.errors import InvalidParameterError
from nbody_sim.presets.base import Preset
from nbody_sim.presets.figure8 import Figure8, FIGURE8_PERIOD
from nbody_sim.presets.triangle import Triangle
from nbody_sim.presets.random_three import RandomThreeBody

PRESETS = {
    "figure8": Figure8,
    "triangle": Triangle,
    "random": RandomThreeBody,
}


def list_presets() -> List[str]:
    """Names accepted by ``get_preset``."""
    return list(PRESETS.keys())


def get_preset(name: str, seed: Optional[int] = None) -> Preset:
    """Get preset by name."""
    preset_class = PRESETS.get(str(name).lower())
    if preset_class is None:
        raise InvalidParameterError(f"Unknown preset: {name}. Available: {list_presets()}")
    return preset_class(seed=seed)


__all__ = [
    "Preset",
    "Figure8",
    "Triangle",
    "RandomThreeBody",
    "FIGURE8_PERIOD",
    "PRESETS",
    "get_preset",
    "list_presets",
]
