"""Utility functions for reproducibility, configuration and logging."""

from nbody_sim.utils.reproducibility import set_all_seeds, get_seed_info
from nbody_sim.utils.config import load_config, save_config, Config
from nbody_sim.utils.logging_config import setup_logging

__all__ = ["set_all_seeds", "get_seed_info", "load_config", "save_config", "Config", "setup_logging"]
