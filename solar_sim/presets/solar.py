"""Solar system presets on circular heliocentric orbits."""

from typing import List, Tuple

import numpy as np

from solar_sim.presets.base import Preset

SOLAR_MASS = 1.989e30  # kg
AU = 1.496e11  # m
SIDEREAL_YEAR = 365.256363004 * 86400.0  # s

# name, mass (kg), mean orbital radius (m), inclination to the ecliptic (deg)
PLANETS: List[Tuple[str, float, float, float]] = [
    ("Mercury", 3.3011e23, 5.791e10, 7.005),
    ("Venus", 4.8675e24, 1.0821e11, 3.39458),
    ("Earth", 5.972e24, AU, 0.0),
    ("Mars", 6.4171e23, 2.2794e11, 1.850),
]


def circular_orbit_speed(G: float, central_mass: float, radius: float) -> float:
    """Speed of a circular orbit of ``radius`` around ``central_mass``: sqrt(G M / r)."""
    if radius <= 0:
        raise ValueError(f"radius must be > 0, got {radius}")
    return float(np.sqrt(G * central_mass / radius))


def orbital_period(G: float, central_mass: float, radius: float) -> float:
    """Period of a circular orbit, 2 pi r / v."""
    return 2.0 * np.pi * radius / circular_orbit_speed(G, central_mass, radius)


class _HeliocentricPreset(Preset):
    """Sun at rest at the origin plus planets on circular orbits.

    Each planet starts on the +x axis of its orbital plane. In 3-D the plane
    is tilted about the x axis by the planet's inclination.
    """

    planets: List[Tuple[str, float, float, float]] = []

    def body_names(self) -> List[str]:
        return ["Sun"] + [p[0] for p in self.planets]

    def generate(self):
        n = len(self.planets) + 1
        positions = np.zeros((n, self.dimensions))
        velocities = np.zeros((n, self.dimensions))
        masses = np.empty(n)
        masses[0] = SOLAR_MASS

        for k, (_, mass, radius, inclination) in enumerate(self.planets, start=1):
            speed = circular_orbit_speed(self.G, SOLAR_MASS, radius)
            masses[k] = mass
            positions[k, 0] = radius
            if self.dimensions == 3:
                tilt = np.radians(inclination)
                velocities[k, 1] = speed * np.cos(tilt)
                velocities[k, 2] = speed * np.sin(tilt)
            else:
                velocities[k, 1] = speed

        return positions, velocities, masses


class SunEarth(_HeliocentricPreset):
    """Sun and Earth, the two-body Kepler check."""

    planets = [p for p in PLANETS if p[0] == "Earth"]

    @property
    def name(self) -> str:
        return "sun_earth"


class InnerSolarSystem(_HeliocentricPreset):
    """Sun with Mercury, Venus, Earth and Mars."""

    planets = PLANETS

    @property
    def name(self) -> str:
        return "inner"
