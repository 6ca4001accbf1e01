"""Tests for diagnostics."""

import numpy as np
import pytest
from solar_sim.physics.diagnostics import (
    center_of_mass,
    compute_energies,
    orbit_summary,
    radial_extent,
    total_momentum,
)


def test_energy_calculation():
    """K, U and E for a simple pair in unit G."""
    positions = np.array([[0.0, 0.0, 0.0], [2.0, 0.0, 0.0]])
    velocities = np.array([[0.0, 0.0, 0.0], [0.0, 1.0, 0.0]])
    masses = np.array([1.0, 3.0])
    
    K, U, E = compute_energies(positions, velocities, masses, G=1.0)
    
    assert np.isclose(K, 1.5)
    assert np.isclose(U, -1.5)
    assert np.isclose(E, K + U)


def test_softened_potential_is_shallower():
    """Softening raises the potential energy toward zero."""
    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    velocities = np.zeros((2, 2))
    masses = np.array([1.0, 1.0])
    
    _, bare, _ = compute_energies(positions, velocities, masses, G=1.0)
    _, soft, _ = compute_energies(positions, velocities, masses, G=1.0, softening=1.0)
    
    assert bare < soft < 0


def test_momentum_and_center_of_mass():
    """Mass-weighted sums of velocity and position."""
    positions = np.array([[0.0, 0.0], [4.0, 0.0]])
    velocities = np.array([[1.0, 0.0], [0.0, 2.0]])
    masses = np.array([3.0, 1.0])
    
    assert np.allclose(total_momentum(velocities, masses), [3.0, 2.0])
    assert np.allclose(center_of_mass(positions, masses), [1.0, 0.0])


def test_radial_extent_relative_to_moving_center():
    """Distances can be taken against a second trajectory."""
    orbit = np.array([[2.0, 0.0], [1.0, 3.0], [-1.0, 1.0]])
    center = np.array([[1.0, 0.0], [1.0, 1.0], [0.0, 1.0]])
    
    r_min, r_max = radial_extent(orbit, center)
    
    assert np.isclose(r_min, 1.0)
    assert np.isclose(r_max, 2.0)


def test_radial_extent_requires_samples():
    """An empty path has no extent."""
    with pytest.raises(ValueError):
        radial_extent(np.empty((0, 2)))


def test_orbit_summary_circle():
    """A sampled circle has zero eccentricity and closes on itself."""
    theta = np.linspace(0.0, 2 * np.pi, 73)
    circle = np.column_stack([np.cos(theta), np.sin(theta)]) * 5.0
    
    summary = orbit_summary(circle)
    
    assert np.isclose(summary["r_mean"], 5.0)
    assert summary["eccentricity"] < 1e-12
    assert summary["closure"] < 1e-12
