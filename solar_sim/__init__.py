"""
Solar Simulator - fixed-step N-body orbit integration.

Features:
- Semi-implicit Euler engine with interchangeable force kernels
- Sparse per-body trajectory sampling
- Pluggable step sinks (live matplotlib view, in-memory recorder)
- Solar system presets in 2D and 3D
- JSON/YAML configuration and a CLI
"""

__version__ = "0.1.0"

from solar_sim.errors import InvalidInputError, NumericalInstabilityError, SimulationError
from solar_sim.physics.simulator import Simulator, SimulationResult, run
from solar_sim.utils.config import SimulationConfig, load_config, save_config

__all__ = [
    "Simulator",
    "SimulationResult",
    "SimulationConfig",
    "run",
    "load_config",
    "save_config",
    "SimulationError",
    "InvalidInputError",
    "NumericalInstabilityError",
]
