"""Tests for preset initial conditions."""

import numpy as np
import pytest
from solar_sim.presets import (
    AU,
    SOLAR_MASS,
    InnerSolarSystem,
    SunEarth,
    circular_orbit_speed,
    orbital_period,
)

G = 6.67430e-11


def test_sun_earth():
    """Sun at rest at the origin, Earth at 1 AU on a circular-orbit speed."""
    preset = SunEarth()
    
    positions, velocities, masses = preset.generate()
    
    assert positions.shape == (2, 2)
    assert np.allclose(positions[0], 0.0)
    assert np.allclose(velocities[0], 0.0)
    assert masses[0] == SOLAR_MASS
    assert np.allclose(positions[1], [AU, 0.0])
    assert np.isclose(velocities[1, 1], np.sqrt(G * SOLAR_MASS / AU))
    assert preset.name == "sun_earth"
    assert preset.body_names() == ["Sun", "Earth"]


def test_inner_solar_system_3d():
    """Inclined orbits tilt the velocity out of the ecliptic but keep its magnitude."""
    preset = InnerSolarSystem(dimensions=3)
    
    positions, velocities, masses = preset.generate()
    
    assert positions.shape == (5, 3)
    assert np.all(masses > 0)
    assert np.all(positions[:, 2] == 0.0)
    speeds = np.linalg.norm(velocities[1:], axis=1)
    expected = [circular_orbit_speed(G, SOLAR_MASS, r) for r in positions[1:, 0]]
    assert np.allclose(speeds, expected)
    # Mercury is inclined, Earth defines the ecliptic
    assert velocities[1, 2] > 0
    assert velocities[3, 2] == 0.0


def test_earth_orbital_period_is_a_year():
    """The circular-orbit period at 1 AU is close to one year."""
    period_days = orbital_period(G, SOLAR_MASS, AU) / 86400.0
    
    assert abs(period_days - 365.25) < 1.0


def test_invalid_dimensions():
    """Only 2-D and 3-D presets exist."""
    with pytest.raises(ValueError):
        SunEarth(dimensions=4)
    with pytest.raises(ValueError):
        circular_orbit_speed(G, SOLAR_MASS, 0.0)
