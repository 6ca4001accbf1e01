"""In-memory step sink."""

from typing import List, Optional, Tuple

import numpy as np

from solar_sim.render.base import Renderer


class FrameRecorder(Renderer):
    """Keep every observed snapshot, e.g. for offline plotting or inspection."""

    def __init__(self, every: int = 1):
        if every < 1:
            raise ValueError(f"every must be >= 1, got {every}")
        self.every = every
        self.frames: List[Tuple[int, np.ndarray]] = []
        self.samples: List[Tuple[int, np.ndarray]] = []

    def observe(self, step: int, positions: np.ndarray, sampled_points: Optional[np.ndarray] = None):
        if step % self.every == 0:
            self.frames.append((step, positions))
        if sampled_points is not None:
            self.samples.append((step, sampled_points))

    def positions_at(self, step: int) -> np.ndarray:
        """Return the positions recorded after ``step``."""
        for recorded_step, positions in self.frames:
            if recorded_step == step:
                return positions
        raise KeyError(f"Step {step} was not recorded")
