"""Preset initial conditions."""

from solar_sim.presets.base import Preset
from solar_sim.presets.solar import (
    SunEarth,
    InnerSolarSystem,
    circular_orbit_speed,
    orbital_period,
    SOLAR_MASS,
    AU,
    SIDEREAL_YEAR,
)

PRESETS = {
    "sun_earth": SunEarth,
    "inner": InnerSolarSystem,
}

__all__ = [
    "Preset",
    "SunEarth",
    "InnerSolarSystem",
    "circular_orbit_speed",
    "orbital_period",
    "SOLAR_MASS",
    "AU",
    "SIDEREAL_YEAR",
    "PRESETS",
]
