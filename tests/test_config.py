"""Tests for configuration handling."""

import json

import numpy as np
import pytest
from solar_sim import InvalidInputError, SimulationConfig
from solar_sim.utils.config import config_from_dict, load_config, save_config


@pytest.mark.parametrize("changes,field", [
    ({"dt": 0.0}, "dt"),
    ({"dt": -1.0}, "dt"),
    ({"dt": float("inf")}, "dt"),
    ({"sample_interval": 0}, "sample_interval"),
    ({"sample_interval": 2.5}, "sample_interval"),
    ({"softening": -1.0}, "softening"),
    ({"G": float("nan")}, "G"),
    ({"force_method": "tree"}, "force_method"),
])
def test_invalid_config_rejected(changes, field):
    """Bad configuration values raise InvalidInputError naming the field."""
    with pytest.raises(InvalidInputError) as exc_info:
        SimulationConfig(**changes)
    
    assert exc_info.value.field == field


def test_replace_ignores_none():
    """replace() overrides only the fields that were given."""
    config = SimulationConfig(dt=10.0)
    
    updated = config.replace(dt=None, sample_interval=5)
    
    assert updated.dt == 10.0
    assert updated.sample_interval == 5
    assert config.sample_interval == 100


def test_save_load_yaml(tmp_path):
    """Configuration survives a YAML round trip."""
    config = SimulationConfig(G=1.0, dt=0.5, sample_interval=3, softening=0.01, force_method="symmetric")
    path = tmp_path / "run.yaml"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded == config


def test_save_load_json(tmp_path):
    """Configuration survives a JSON round trip."""
    config = SimulationConfig(check_finite=True)
    path = tmp_path / "run.json"
    
    save_config(config, str(path))
    loaded = load_config(str(path))
    
    assert loaded == config


def test_partial_file_uses_defaults(tmp_path):
    """Keys missing from the file keep their defaults."""
    path = tmp_path / "partial.json"
    path.write_text(json.dumps({"dt": 250.0}))
    
    loaded = load_config(str(path))
    
    assert loaded.dt == 250.0
    assert loaded.G == SimulationConfig().G


def test_unknown_keys_rejected():
    """Typos in config files are reported rather than ignored."""
    with pytest.raises(InvalidInputError, match="time_step"):
        config_from_dict({"time_step": 10.0})


def test_numpy_scalars_accepted(tmp_path):
    """NumPy scalars validate and are stored as plain Python numbers."""
    config = SimulationConfig(G=np.float32(1.0), dt=np.float64(0.5), sample_interval=np.int64(2),
                              softening=np.float32(0.25))
    
    assert config.sample_interval == 2
    assert type(config.sample_interval) is int
    assert type(config.G) is float
    path = tmp_path / "numpy.json"
    save_config(config, str(path))
    assert load_config(str(path)) == config


def test_bool_is_not_an_interval():
    with pytest.raises(InvalidInputError):
        SimulationConfig(sample_interval=True)
