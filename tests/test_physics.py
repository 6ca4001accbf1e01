"""Tests for the gravitational acceleration kernels."""

import numpy as np
import pytest
from solar_sim.physics.force_calculator import (
    ForceCalculator,
    accelerations_pairwise,
    accelerations_symmetric,
    accelerations_vectorized,
)

KERNELS = [accelerations_pairwise, accelerations_symmetric, accelerations_vectorized]


@pytest.mark.parametrize("kernel", KERNELS)
def test_two_body_acceleration(kernel):
    """Each body is pulled toward the other with a = G m_other / d^2."""
    positions = np.array([[0.0, 0.0], [2.0, 0.0]])
    masses = np.array([1.0, 3.0])
    
    acc = kernel(positions, masses, G=1.0)
    
    assert np.allclose(acc[0], [3.0 / 4.0, 0.0])
    assert np.allclose(acc[1], [-1.0 / 4.0, 0.0])


@pytest.mark.parametrize("kernel", KERNELS)
def test_single_body_feels_nothing(kernel):
    """A lone body has no pairs and zero acceleration."""
    acc = kernel(np.array([[1.0, 2.0, 3.0]]), np.array([5.0]), G=1.0)
    
    assert acc.shape == (1, 3)
    assert np.all(acc == 0.0)


def test_kernels_agree():
    """Ordered-pair, unordered-pair and broadcast kernels match within rounding."""
    rng = np.random.default_rng(7)
    positions = rng.normal(0.0, 1e11, size=(6, 3))
    masses = rng.uniform(1e23, 1e30, size=6)
    
    reference = accelerations_pairwise(positions, masses, G=6.67430e-11)
    tol = 1e-12 * np.abs(reference).max()
    
    assert np.allclose(accelerations_symmetric(positions, masses, G=6.67430e-11), reference, rtol=1e-12, atol=tol)
    assert np.allclose(accelerations_vectorized(positions, masses, G=6.67430e-11), reference, rtol=1e-12, atol=tol)


def test_kernel_does_not_modify_positions():
    """Kernels read a snapshot and never write to it."""
    positions = np.array([[0.0, 0.0], [1.0, 0.0], [0.0, 1.0]])
    before = positions.copy()
    
    for kernel in KERNELS:
        kernel(positions, np.ones(3), G=1.0)
    
    assert np.array_equal(positions, before)


@pytest.mark.parametrize("kernel", KERNELS)
def test_coincident_bodies_give_non_finite_acceleration(kernel):
    """Zero separation yields NaN/inf, not an exception, and spares other bodies."""
    positions = np.array([[0.0, 0.0], [0.0, 0.0], [10.0, 0.0]])
    masses = np.array([1.0, 1.0, 1.0])
    
    acc = kernel(positions, masses, G=1.0)
    
    assert not np.all(np.isfinite(acc[0]))
    assert not np.all(np.isfinite(acc[1]))
    assert np.all(np.isfinite(acc[2]))


@pytest.mark.parametrize("kernel", KERNELS)
def test_softening_keeps_coincident_bodies_finite(kernel):
    """With softening enabled coincident bodies exert no force on each other."""
    positions = np.array([[0.0, 0.0], [0.0, 0.0]])
    
    acc = kernel(positions, np.array([1.0, 1.0]), G=1.0, softening=0.1)
    
    assert np.allclose(acc, 0.0)


def test_softening_weakens_close_encounters():
    """Softened acceleration is smaller than the bare inverse-square value."""
    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    masses = np.array([1.0, 1.0])
    
    bare = accelerations_vectorized(positions, masses, G=1.0)
    soft = accelerations_vectorized(positions, masses, G=1.0, softening=0.5)
    
    assert abs(soft[0, 0]) < abs(bare[0, 0])
    assert np.isclose(soft[0, 0], 1.0 / 1.25 ** 1.5)


def test_force_calculator_selects_kernel():
    """ForceCalculator dispatches by name and rejects unknown methods."""
    calc = ForceCalculator(method="pairwise", G=1.0)
    acc = calc.compute_accelerations(np.array([[0.0, 0.0], [1.0, 0.0]]), np.array([1.0, 1.0]))
    
    assert calc.method == "pairwise"
    assert np.allclose(acc, [[1.0, 0.0], [-1.0, 0.0]])
    
    with pytest.raises(ValueError):
        ForceCalculator(method="barnes_hut")


@pytest.mark.parametrize("kernel", KERNELS)
def test_softening_length_enters_direction_too(kernel):
    """Plummer softening divides by sqrt(r^2 + e^2) in both magnitude and direction."""
    positions = np.array([[0.0, 0.0], [1.0, 0.0]])
    masses = np.array([1.0, 1.0])
    
    acc = kernel(positions, masses, 1.0, 0.5)
    
    assert np.isclose(acc[0, 0], 0.7155417527999325)
    assert np.isclose(acc[1, 0], -0.7155417527999325)
    assert not np.isclose(acc[0, 0], 1.0 / 1.25)
