"""Utility functions for reproducibility and configuration."""

from orbit_sandbox.utils.reproducibility import make_rng, set_all_seeds
from orbit_sandbox.utils.config import load_config, save_config, Config

__all__ = ["make_rng", "set_all_seeds", "load_config", "save_config", "Config"]
