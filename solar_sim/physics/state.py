"""Body and simulation state containers."""

from dataclasses import dataclass
from typing import List

import numpy as np

from solar_sim.errors import InvalidInputError


@dataclass(frozen=True)
class Body:
    """Read-only view of one point mass."""
    position: np.ndarray
    velocity: np.ndarray
    mass: float


def _as_matrix(name: str, data) -> np.ndarray:
    try:
        array = np.array(data, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError(name, f"must be numeric ({exc})") from exc
    if array.ndim != 2:
        raise InvalidInputError(name, f"must be an N x D array, got shape {array.shape}")
    if array.shape[0] < 1:
        raise InvalidInputError(name, "must contain at least one body")
    if array.shape[1] not in (2, 3):
        raise InvalidInputError(name, f"dimensionality must be 2 or 3, got {array.shape[1]}")
    if not np.all(np.isfinite(array)):
        raise InvalidInputError(name, "must contain only finite values")
    return array


def validate_inputs(positions, velocities, masses, stop_time):
    """Validate raw run inputs and return float64 copies.

    Raises:
        InvalidInputError: naming the first violated constraint

    Returns:
        Tuple of (positions (n, d), velocities (n, d), masses (n,), stop_time)
    """
    positions = _as_matrix("positions", positions)
    velocities = _as_matrix("velocities", velocities)
    if velocities.shape != positions.shape:
        raise InvalidInputError(
            "velocities",
            f"shape {velocities.shape} does not match positions shape {positions.shape}",
        )

    try:
        masses = np.array(masses, dtype=np.float64)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("masses", f"must be numeric ({exc})") from exc
    # Accept an (n, 1) column vector
    if masses.ndim == 2 and masses.shape[1] == 1:
        masses = masses[:, 0]
    if masses.ndim != 1 or masses.shape[0] != positions.shape[0]:
        raise InvalidInputError(
            "masses",
            f"must have length {positions.shape[0]} to match positions, got shape {masses.shape}",
        )
    if not np.all(np.isfinite(masses)):
        raise InvalidInputError("masses", "must contain only finite values")
    if np.any(masses <= 0):
        bad = int(np.flatnonzero(masses <= 0)[0])
        raise InvalidInputError("masses", f"must be > 0, body {bad} has mass {masses[bad]!r}")

    try:
        stop_time = float(stop_time)
    except (TypeError, ValueError) as exc:
        raise InvalidInputError("stop_time", f"must be a number ({exc})") from exc
    if not np.isfinite(stop_time) or stop_time <= 0:
        raise InvalidInputError("stop_time", f"must be a finite number > 0, got {stop_time!r}")

    return positions, velocities, masses, stop_time


class SimulationState:
    """Mutable state of one run: positions and velocities evolve in place, masses are frozen."""

    def __init__(self, positions: np.ndarray, velocities: np.ndarray, masses: np.ndarray):
        self.positions = positions
        self.velocities = velocities
        self.masses = masses
        self.masses.setflags(write=False)
        self.time = 0.0
        self.step_count = 0

    @classmethod
    def from_initial(cls, positions, velocities, masses, stop_time=1.0) -> "SimulationState":
        """Validate caller-supplied initial conditions and build a fresh state."""
        positions, velocities, masses, _ = validate_inputs(positions, velocities, masses, stop_time)
        return cls(positions, velocities, masses)

    @property
    def n_bodies(self) -> int:
        return self.positions.shape[0]

    @property
    def dimensions(self) -> int:
        return self.positions.shape[1]

    @property
    def bodies(self) -> List[Body]:
        """Snapshot of every body, indexed by body identity."""
        return [
            Body(self.positions[i].copy(), self.velocities[i].copy(), float(self.masses[i]))
            for i in range(self.n_bodies)
        ]

    def is_finite(self) -> bool:
        return bool(np.all(np.isfinite(self.positions)) and np.all(np.isfinite(self.velocities)))

    def __repr__(self):
        return (
            f"SimulationState(n_bodies={self.n_bodies}, dimensions={self.dimensions}, "
            f"time={self.time}, step_count={self.step_count})"
        )
