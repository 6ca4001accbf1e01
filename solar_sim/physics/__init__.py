"""Physics engine for N-body simulations."""

from solar_sim.physics.state import Body, SimulationState
from solar_sim.physics.simulator import Simulator, SimulationResult, run

__all__ = ["Body", "SimulationState", "Simulator", "SimulationResult", "run"]
