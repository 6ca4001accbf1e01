"""Configuration management."""

import json
import math
import numbers
from dataclasses import dataclass, asdict, fields
from pathlib import Path
from typing import Any, Dict

import yaml

from solar_sim.errors import InvalidInputError

FORCE_METHODS = ("pairwise", "symmetric", "vectorized")


def _is_real(value) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


@dataclass
class SimulationConfig:
    """Engine configuration.

    Defaults: SI gravitational constant, a 1000 s timestep and a trajectory
    sample every 100 steps.
    """
    # Force-scale law (N m^2 / kg^2)
    G: float = 6.67430e-11
    # Integration granularity in simulated seconds
    dt: float = 1000.0
    # Record trajectories every N steps
    sample_interval: int = 100

    # Opt-in Plummer softening length (m); 0 disables it
    softening: float = 0.0
    force_method: str = "vectorized"
    # Raise NumericalInstabilityError instead of warning on non-finite state
    check_finite: bool = False

    def __post_init__(self):
        self.validate()
        # Store plain Python scalars so NumPy values serialize cleanly
        self.G = float(self.G)
        self.dt = float(self.dt)
        self.sample_interval = int(self.sample_interval)
        self.softening = float(self.softening)
        self.check_finite = bool(self.check_finite)

    def validate(self):
        """Check every field, raising InvalidInputError on the first violation."""
        if not _is_real(self.G) or not math.isfinite(self.G):
            raise InvalidInputError("G", f"must be a finite number, got {self.G!r}")
        if not _is_real(self.dt) or not math.isfinite(self.dt) or self.dt <= 0:
            raise InvalidInputError("dt", f"must be a finite number > 0, got {self.dt!r}")
        if isinstance(self.sample_interval, bool) \
                or not isinstance(self.sample_interval, numbers.Integral) \
                or self.sample_interval < 1:
            raise InvalidInputError(
                "sample_interval", f"must be an integer >= 1, got {self.sample_interval!r}"
            )
        if not _is_real(self.softening) or not math.isfinite(self.softening) \
                or self.softening < 0:
            raise InvalidInputError("softening", f"must be a finite number >= 0, got {self.softening!r}")
        if self.force_method not in FORCE_METHODS:
            raise InvalidInputError(
                "force_method", f"must be one of {list(FORCE_METHODS)}, got {self.force_method!r}"
            )

    def replace(self, **changes) -> "SimulationConfig":
        """Return a copy with the given fields overridden (``None`` values ignored)."""
        data = asdict(self)
        data.update({k: v for k, v in changes.items() if v is not None})
        return SimulationConfig(**data)


def config_from_dict(data: Dict[str, Any]) -> SimulationConfig:
    """Build a config from a plain mapping, rejecting unknown keys."""
    known = {f.name for f in fields(SimulationConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise InvalidInputError("config", f"unknown keys {unknown}")
    return SimulationConfig(**data)


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.
    
    Args:
        config_path: Path to config file (.json or .yaml)
        
    Returns:
        SimulationConfig object
    """
    config_path = Path(config_path)
    
    with open(config_path, 'r') as f:
        if config_path.suffix == '.yaml' or config_path.suffix == '.yml':
            data = yaml.safe_load(f)
        else:
            data = json.load(f)
    
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidInputError("config", f"{config_path} must contain a mapping")
    return config_from_dict(data)


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.
    
    Args:
        config: SimulationConfig object
        output_path: Output file path (.json or .yaml)
    """
    output_path = Path(output_path)
    data = asdict(config)
    
    with open(output_path, 'w') as f:
        if output_path.suffix == '.yaml' or output_path.suffix == '.yml':
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
