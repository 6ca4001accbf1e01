"""Numerical integrators for N-body simulations."""

from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]
