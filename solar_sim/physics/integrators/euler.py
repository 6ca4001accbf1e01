"""Semi-implicit (Euler-Cromer) integrator, O(h) accuracy."""

from typing import Tuple

import numpy as np

from solar_sim.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Euler-Cromer: velocity first, then position from the new velocity.
    
    Using the updated velocity for the position update is what separates this
    from plain explicit Euler and keeps orbits bounded over long runs.
    """
    
    @property
    def name(self) -> str:
        return "semi_implicit_euler"
    
    @property
    def order(self) -> int:
        return 1
    
    def step(self, positions, velocities, accelerations, dt: float) -> Tuple[np.ndarray, np.ndarray]:
        """v += a*dt, then p += v*dt, both applied to all bodies at once."""
        with np.errstate(invalid="ignore", over="ignore"):
            velocities += accelerations * dt
            positions += velocities * dt
        return positions, velocities
