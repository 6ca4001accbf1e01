"""Main simulator controller."""

import math
import warnings
from dataclasses import dataclass, field
from typing import Callable, List, Optional

import numpy as np

from solar_sim.errors import InvalidInputError, NumericalInstabilityError
from solar_sim.physics.diagnostics import compute_energies
from solar_sim.physics.force_calculator import ForceCalculator
from solar_sim.physics.integrators.base import Integrator
from solar_sim.physics.integrators.euler import SemiImplicitEulerIntegrator
from solar_sim.physics.state import SimulationState, validate_inputs
from solar_sim.physics.trajectory import TrajectoryRecorder
from solar_sim.render.base import Renderer
from solar_sim.utils.config import SimulationConfig


@dataclass
class SimulationResult:
    """Outcome of one run.

    Unpacks as ``final_positions, final_velocities, trajectories``.
    """
    final_positions: np.ndarray
    final_velocities: np.ndarray
    trajectories: List[np.ndarray]
    steps_completed: int
    total_steps: int
    elapsed_time: float
    cancelled: bool = False
    is_finite: bool = field(default=True)

    def __iter__(self):
        return iter((self.final_positions, self.final_velocities, self.trajectories))


def total_steps_for(stop_time: float, dt: float) -> int:
    """Number of whole steps in ``stop_time``; any partial final step is dropped."""
    return int(math.floor(stop_time / dt))


class Simulator:
    """Main simulation controller.

    Owns one SimulationState at a time and advances it with a fixed-step
    semi-implicit Euler scheme.
    """

    def __init__(
        self,
        config: Optional[SimulationConfig] = None,
        integrator: Optional[Integrator] = None,
    ):
        """Initialize simulator.

        Args:
            config: Engine configuration (defaults to SimulationConfig())
            integrator: Integrator to use (default: semi-implicit Euler)
        """
        self.config = config or SimulationConfig()
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.force_calculator = ForceCalculator(
            method=self.config.force_method,
            G=self.config.G,
            softening=self.config.softening,
        )
        self.state: Optional[SimulationState] = None

    @property
    def time(self) -> float:
        return self.state.time if self.state is not None else 0.0

    @property
    def step_count(self) -> int:
        return self.state.step_count if self.state is not None else 0

    def initialize(self, positions, velocities, masses) -> SimulationState:
        """Validate initial conditions and start a fresh state.

        Args:
            positions: Initial positions (n, 2) or (n, 3)
            velocities: Initial velocities, same shape as positions
            masses: Body masses (n,) or (n, 1)
        """
        self.state = SimulationState.from_initial(positions, velocities, masses)
        return self.state

    def step(self) -> np.ndarray:
        """Perform one simulation step and return the accelerations used."""
        state = self.state
        if state is None:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        # The kernel only reads positions; the integrator writes after it returns
        accelerations = self.force_calculator.compute_accelerations(state.positions, state.masses)
        self.integrator.step(state.positions, state.velocities, accelerations, self.config.dt)
        state.step_count += 1
        state.time = state.step_count * self.config.dt
        return accelerations

    def run(
        self,
        initial_positions,
        initial_velocities,
        masses,
        stop_time: float,
        sample_interval: Optional[int] = None,
        step_sink: Optional[Renderer] = None,
        should_stop: Optional[Callable[[], bool]] = None,
    ) -> SimulationResult:
        """Run a complete simulation.

        Args:
            initial_positions: (n, dim) initial positions
            initial_velocities: (n, dim) initial velocities
            masses: (n,) masses, all > 0
            stop_time: Simulated duration; floor(stop_time / dt) steps are run
            sample_interval: Override for config.sample_interval
            step_sink: Optional observer receiving per-step position snapshots
            should_stop: Optional zero-argument callable polled before each step;
                returning True ends the run early with a partial result

        Returns:
            SimulationResult (unpacks to final positions, velocities, trajectories)

        Raises:
            InvalidInputError: Malformed inputs, before any step runs
            NumericalInstabilityError: Non-finite final state with config.check_finite
        """
        positions, velocities, masses, stop_time = validate_inputs(
            initial_positions, initial_velocities, masses, stop_time
        )
        config = self.config
        if sample_interval is not None:
            config = config.replace(sample_interval=sample_interval)
        interval = config.sample_interval
        if not math.isfinite(stop_time / config.dt):
            raise InvalidInputError(
                "stop_time", f"step count stop_time / dt overflows ({stop_time!r} / {config.dt!r})"
            )

        state = SimulationState(positions, velocities, masses)
        self.state = state
        recorder = TrajectoryRecorder(state.n_bodies, state.dimensions)
        n_steps = total_steps_for(stop_time, config.dt)
        cancelled = False

        for step in range(1, n_steps + 1):
            if should_stop is not None and should_stop():
                cancelled = True
                break
            self.step()

            sampled = None
            if step % interval == 0:
                sampled = recorder.record(state.positions)

            if step_sink is not None:
                step_sink.observe(
                    step,
                    state.positions.copy(),
                    None if sampled is None else sampled.copy(),
                )

        result = SimulationResult(
            final_positions=state.positions.copy(),
            final_velocities=state.velocities.copy(),
            trajectories=recorder.trajectories(),
            steps_completed=state.step_count,
            total_steps=n_steps,
            elapsed_time=state.time,
            cancelled=cancelled,
            is_finite=state.is_finite(),
        )

        if not result.is_finite:
            message = (
                f"Non-finite positions or velocities after {state.step_count} steps; "
                "bodies may have coincided or approached too closely for dt"
            )
            if config.check_finite:
                raise NumericalInstabilityError(message, result=result)
            warnings.warn(message, RuntimeWarning)

        return result

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count)
        """
        if self.state is None:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        s = self.state
        return s.positions.copy(), s.velocities.copy(), s.masses.copy(), s.time, s.step_count

    def get_energy(self) -> float:
        """Get current total energy (kinetic + potential)."""
        if self.state is None:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        _, _, total = compute_energies(
            self.state.positions,
            self.state.velocities,
            self.state.masses,
            G=self.config.G,
            softening=self.config.softening,
        )
        return total


def run(
    initial_positions,
    initial_velocities,
    masses,
    stop_time: float,
    sample_interval: Optional[int] = None,
    step_sink: Optional[Renderer] = None,
    config: Optional[SimulationConfig] = None,
    should_stop: Optional[Callable[[], bool]] = None,
) -> SimulationResult:
    """Simulate N bodies for ``stop_time`` seconds with a fresh Simulator.

    See :meth:`Simulator.run` for argument details.
    """
    return Simulator(config).run(
        initial_positions,
        initial_velocities,
        masses,
        stop_time,
        sample_interval=sample_interval,
        step_sink=step_sink,
        should_stop=should_stop,
    )
