"""Abstract base class for numerical integrators."""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class Integrator(ABC):
    """Abstract interface for numerical integrators."""
    
    @abstractmethod
    def step(
        self,
        positions: np.ndarray,
        velocities: np.ndarray,
        accelerations: np.ndarray,
        dt: float,
    ) -> Tuple[np.ndarray, np.ndarray]:
        """Advance positions and velocities in place by one step.
        
        Args:
            positions: Current positions (n, dim), updated in place
            velocities: Current velocities (n, dim), updated in place
            accelerations: Accelerations from the pre-step position snapshot
            dt: Time step
            
        Returns:
            Tuple of (positions, velocities)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass
    
    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy."""
        pass
