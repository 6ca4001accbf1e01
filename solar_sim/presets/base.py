"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Tuple

import numpy as np


class Preset(ABC):
    """Abstract base class for preset initial conditions."""
    
    def __init__(self, dimensions: int = 2, G: float = 6.67430e-11):
        """Initialize preset.
        
        Args:
            dimensions: 2 for planar output, 3 for spatial output
            G: Gravitational constant used to derive orbital speeds
        """
        if dimensions not in (2, 3):
            raise ValueError(f"dimensions must be 2 or 3, got {dimensions}")
        self.dimensions = dimensions
        self.G = G
    
    @abstractmethod
    def generate(self) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
        """Generate initial conditions.
        
        Returns:
            Tuple of (positions, velocities, masses)
        """
        pass
    
    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
