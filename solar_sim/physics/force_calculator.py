"""Gravitational acceleration kernels.

Every kernel reads an immutable snapshot of positions and returns a fresh
(n, dim) acceleration array; nothing is written back into the state. Distances
are never guarded: without softening, coincident bodies yield inf/NaN under
IEEE semantics.
"""

from typing import Literal

import numpy as np


def accelerations_pairwise(
    positions: np.ndarray,
    masses: np.ndarray,
    G: float,
    softening: float = 0.0,
) -> np.ndarray:
    """Reference kernel: one force evaluation per ordered pair (i, j), i != j.

    For each pair: r = p_j - p_i, d = |r|, F = G m_i m_j / d^2 and
    a_i += (F / m_i) * (r / d). Newton's third law is not exploited.
    With softening e > 0, d is replaced by sqrt(|r|^2 + e^2) in both the
    magnitude and the direction, so coincident bodies feel no force.
    """
    n = positions.shape[0]
    acc = np.zeros_like(positions)
    eps_sq = softening ** 2
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            for j in range(n):
                if i == j:
                    continue
                r = positions[j] - positions[i]
                d = np.sqrt(np.dot(r, r) + eps_sq)
                force = G * masses[i] * masses[j] / (d * d)
                acc[i] += (force / masses[i]) * (r / d)
    return acc


def accelerations_symmetric(
    positions: np.ndarray,
    masses: np.ndarray,
    G: float,
    softening: float = 0.0,
) -> np.ndarray:
    """Unordered-pair kernel: each pair force is computed once and applied with opposite signs."""
    n = positions.shape[0]
    acc = np.zeros_like(positions)
    eps_sq = softening ** 2
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        for i in range(n):
            for j in range(i + 1, n):
                r = positions[j] - positions[i]
                d = np.sqrt(np.dot(r, r) + eps_sq)
                force_vec = (G * masses[i] * masses[j] / (d * d)) * (r / d)
                acc[i] += force_vec / masses[i]
                acc[j] -= force_vec / masses[j]
    return acc


def accelerations_vectorized(
    positions: np.ndarray,
    masses: np.ndarray,
    G: float,
    softening: float = 0.0,
) -> np.ndarray:
    """Broadcast kernel computing all ordered pairs at once.

    Same per-pair arithmetic as :func:`accelerations_pairwise`; only the
    self-interaction diagonal is masked.
    """
    n = positions.shape[0]
    dim = positions.shape[1]
    pos_i = np.reshape(positions, (n, 1, dim))
    pos_j = np.reshape(positions, (1, n, dim))
    r_diff = pos_j - pos_i
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        dist = np.sqrt(np.sum(r_diff ** 2, axis=2) + softening ** 2)
        m_i = np.reshape(masses, (n, 1))
        m_j = np.reshape(masses, (1, n))
        force_mag = G * m_i * m_j / (dist * dist)
        acc_mag = force_mag / m_i
        unit = r_diff / np.expand_dims(dist, axis=2)
        contrib = np.expand_dims(acc_mag, axis=2) * unit
    contrib = np.where(np.eye(n, dtype=bool)[:, :, np.newaxis], 0.0, contrib)
    return np.sum(contrib, axis=1)


_KERNELS = {
    "pairwise": accelerations_pairwise,
    "symmetric": accelerations_symmetric,
    "vectorized": accelerations_vectorized,
}


class ForceCalculator:
    """Selects an acceleration kernel by name."""

    def __init__(
        self,
        method: Literal["pairwise", "symmetric", "vectorized"] = "vectorized",
        G: float = 6.67430e-11,
        softening: float = 0.0,
    ):
        if method not in _KERNELS:
            raise ValueError(f"Unknown force method: {method}. Available: {list(_KERNELS)}")
        self.method = method
        self.G = G
        self.softening = softening
        self._kernel = _KERNELS[method]

    def compute_accelerations(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Return (n, dim) accelerations for the given position snapshot."""
        return self._kernel(positions, masses, self.G, self.softening)
