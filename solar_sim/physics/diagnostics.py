"""Diagnostics for judging physical plausibility of a run."""

from typing import Dict, Tuple

import numpy as np


def total_momentum(velocities: np.ndarray, masses: np.ndarray) -> np.ndarray:
    """Return the total linear momentum vector sum(m_i * v_i)."""
    masses = np.asarray(masses, dtype=np.float64).flatten()
    return np.sum(masses[:, np.newaxis] * np.asarray(velocities), axis=0)


def center_of_mass(positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
    masses = np.asarray(masses, dtype=np.float64).flatten()
    return np.sum(masses[:, np.newaxis] * np.asarray(positions), axis=0) / np.sum(masses)


def compute_energies(
    positions: np.ndarray,
    velocities: np.ndarray,
    masses: np.ndarray,
    G: float = 6.67430e-11,
    softening: float = 0.0,
) -> Tuple[float, float, float]:
    """Compute kinetic, potential, and total energy.

    Potential uses the same softening as the force law:
    U = -G * sum_{i<j} m_i * m_j / sqrt(r_ij^2 + eps^2)

    Args:
        positions: Body positions (n, dim)
        velocities: Body velocities (n, dim)
        masses: Body masses (n,)
        G: Gravitational constant
        softening: Softening length (0 for the unsoftened law)

    Returns:
        Tuple of (kinetic_energy, potential_energy, total_energy)
    """
    positions = np.asarray(positions, dtype=np.float64)
    velocities = np.asarray(velocities, dtype=np.float64)
    masses = np.asarray(masses, dtype=np.float64).flatten()
    n = len(masses)

    # K = 0.5 * sum m_i * v_i^2
    v_sq = np.sum(velocities ** 2, axis=1)
    K = 0.5 * np.sum(masses * v_sq)

    U = 0.0
    if n > 1:
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        r_sq = np.sum(r_diff ** 2, axis=2)
        i_idx, j_idx = np.triu_indices(n, k=1)
        with np.errstate(divide="ignore"):
            U = -G * np.sum(masses[i_idx] * masses[j_idx] / np.sqrt(r_sq[i_idx, j_idx] + softening ** 2))

    return float(K), float(U), float(K + U)


def radial_extent(trajectory: np.ndarray, center=None) -> Tuple[float, float]:
    """Return (min, max) distance of a sampled path from ``center``.

    ``center`` may be a fixed point or a second trajectory of the same length
    (distance is then measured sample by sample, e.g. planet relative to Sun).
    """
    trajectory = np.asarray(trajectory, dtype=np.float64)
    if trajectory.shape[0] == 0:
        raise ValueError("Trajectory has no samples")
    if center is None:
        center = np.zeros(trajectory.shape[1])
    radii = np.linalg.norm(trajectory - np.asarray(center, dtype=np.float64), axis=1)
    return float(np.min(radii)), float(np.max(radii))


def orbit_summary(trajectory: np.ndarray, center=None) -> Dict[str, float]:
    """Summarise a sampled orbit: radii, eccentricity estimate and how far the
    path ends from where it started relative to its mean radius."""
    r_min, r_max = radial_extent(trajectory, center)
    trajectory = np.asarray(trajectory, dtype=np.float64)
    if center is None:
        rel = trajectory
    else:
        rel = trajectory - np.asarray(center, dtype=np.float64)
    r_mean = float(np.mean(np.linalg.norm(rel, axis=1)))
    closure = float(np.linalg.norm(rel[-1] - rel[0]) / r_mean) if r_mean > 0 else 0.0
    eccentricity = (r_max - r_min) / (r_max + r_min) if (r_max + r_min) > 0 else 0.0
    return {
        "r_min": r_min,
        "r_max": r_max,
        "r_mean": r_mean,
        "eccentricity": eccentricity,
        "closure": closure,
    }
