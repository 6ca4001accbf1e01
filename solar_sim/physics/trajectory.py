"""Sparse per-body trajectory recording."""

from typing import List

import numpy as np


class TrajectoryRecorder:
    """Append-only store of sampled positions, one path per body.

    Points are kept in a single growing list of (n, dim) snapshots so a body's
    path can never interleave with another's.
    """

    def __init__(self, n_bodies: int, dimensions: int):
        self.n_bodies = n_bodies
        self.dimensions = dimensions
        self._samples: List[np.ndarray] = []

    def record(self, positions: np.ndarray) -> np.ndarray:
        """Append a copy of the current positions and return it."""
        snapshot = np.array(positions, dtype=np.float64, copy=True)
        self._samples.append(snapshot)
        return snapshot

    def trajectories(self) -> List[np.ndarray]:
        """Return every body's path, indexed by body identity."""
        if not self._samples:
            return [np.empty((0, self.dimensions)) for _ in range(self.n_bodies)]
        stacked = np.stack(self._samples, axis=1)  # (n, k, dim)
        return [stacked[i].copy() for i in range(self.n_bodies)]
