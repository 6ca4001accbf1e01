"""Utility functions for configuration."""

from solar_sim.utils.config import load_config, save_config, config_from_dict, SimulationConfig

__all__ = ["load_config", "save_config", "config_from_dict", "SimulationConfig"]
