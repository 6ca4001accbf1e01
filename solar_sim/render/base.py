"""Base renderer interface."""

from abc import ABC, abstractmethod
from typing import Optional

import numpy as np


class Renderer(ABC):
    """Abstract step sink observing a running simulation.

    Renderers only receive copies of the engine's arrays and never feed
    anything back, so attaching one cannot change the simulated result.
    """
    
    @abstractmethod
    def observe(self, step: int, positions: np.ndarray, sampled_points: Optional[np.ndarray] = None):
        """Receive the state after a completed step.
        
        Args:
            step: 1-based index of the step just completed
            positions: Body positions (n, 2) or (n, 3)
            sampled_points: On sample steps, the (n, dim) block just appended
                to the trajectories; None otherwise
        """
        pass
    
    def close(self):
        """Release any resources held by the renderer."""
        pass
