"""CLI main entry point."""

import argparse
import json
import sys
import time

import yaml

from solar_sim.errors import SimulationError
from solar_sim.physics.diagnostics import compute_energies, orbit_summary, total_momentum
from solar_sim.physics.simulator import Simulator
from solar_sim.presets import AU, PRESETS, SIDEREAL_YEAR
from solar_sim.render.base import Renderer
from solar_sim.render.orbit_renderer import OrbitRenderer
from solar_sim.utils.config import SimulationConfig, load_config


def get_preset(name: str, dimensions: int, G: float):
    """Get preset by name."""
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ValueError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(dimensions=dimensions, G=G)


class ProgressPrinter(Renderer):
    """Print a diagnostics row on every step that is a multiple of ``every``."""

    def __init__(self, simulator: Simulator, every: int):
        self.simulator = simulator
        self.every = every
        self.initial_energy = None

    def header(self):
        self.initial_energy = self.simulator.get_energy()
        print(f"{'Step':<10} {'Time (d)':<12} {'E (J)':<14} {'dE/E0':<10}")
        print("-" * 50)

    def observe(self, step, positions, sampled_points=None):
        if step % self.every != 0:
            return
        energy = self.simulator.get_energy()
        rel = (energy - self.initial_energy) / abs(self.initial_energy) * 100 if self.initial_energy else 0.0
        print(f"{step:<10} {self.simulator.time / 86400.0:<12.2f} {energy:<14.6e} {rel:<10.4f}%")


class FanOut(Renderer):
    """Forward every step to several sinks."""

    def __init__(self, *sinks):
        self.sinks = [s for s in sinks if s is not None]

    def observe(self, step, positions, sampled_points=None):
        for sink in self.sinks:
            sink.observe(step, positions, sampled_points)

    def close(self):
        for sink in self.sinks:
            sink.close()


def build_config(args) -> SimulationConfig:
    """Config file values first, then any explicit command-line overrides."""
    config = load_config(args.config) if args.config else SimulationConfig()
    return config.replace(
        G=args.G,
        dt=args.dt,
        sample_interval=args.sample_interval,
        softening=args.softening,
        force_method=args.force_method,
        check_finite=True if args.check_finite else None,
    )


def run_simulation(args) -> int:
    """Run a simulation and print a summary. Returns the process exit code."""
    config = build_config(args)
    preset = get_preset(args.preset, args.dimensions, config.G)
    positions, velocities, masses = preset.generate()
    names = preset.body_names()

    sim = Simulator(config)
    sim.initialize(positions, velocities, masses)

    printer = None
    if args.report_every:
        printer = ProgressPrinter(sim, args.report_every)

    renderer = None
    if args.render:
        renderer = OrbitRenderer(seed=args.seed)

    should_stop = None
    if args.max_wall_time is not None:
        deadline = time.monotonic() + args.max_wall_time

        def should_stop():
            return time.monotonic() >= deadline

    sink = FanOut(printer, renderer) if (printer or renderer) else None

    print(f"Running simulation: {preset.name} with {len(masses)} bodies in {args.dimensions}-D")
    print(f"G: {config.G:.5e}, dt: {config.dt} s, sample every {config.sample_interval} steps, "
          f"force: {config.force_method}, softening: {config.softening}")
    if printer:
        printer.header()

    try:
        result = sim.run(
            positions, velocities, masses, args.stop_time,
            step_sink=sink, should_stop=should_stop,
        )
        print_summary(result, names, masses, velocities, config)
        if renderer is not None:
            print("Close the plot window to exit.")
            renderer.wait()
    finally:
        if sink is not None:
            sink.close()
    return 0


def print_summary(result, names, masses, initial_velocities, config):
    """Print run status, conservation checks and a per-planet orbit table."""
    p0 = total_momentum(initial_velocities, masses)
    p1 = total_momentum(result.final_velocities, masses)
    _, _, e1 = compute_energies(result.final_positions, result.final_velocities, masses,
                                G=config.G, softening=config.softening)

    status = "cancelled" if result.cancelled else "complete"
    print(f"Simulation {status}: {result.steps_completed}/{result.total_steps} steps, "
          f"{result.elapsed_time / 86400.0:.2f} days")
    print(f"Final energy: {e1:.6e} J, momentum drift: {abs(p1 - p0).max():.3e} kg m/s")

    sun_track = result.trajectories[0]
    if len(sun_track) > 1:
        print(f"{'Body':<10} {'r_min (AU)':<12} {'r_max (AU)':<12} {'ecc':<8}")
        for name, track in zip(names[1:], result.trajectories[1:]):
            stats = orbit_summary(track, center=sun_track)
            print(f"{name:<10} {stats['r_min'] / AU:<12.4f} {stats['r_max'] / AU:<12.4f} "
                  f"{stats['eccentricity']:<8.4f}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Solar Simulator - N-body orbit integration")

    parser.add_argument('--preset', type=str, default='sun_earth',
                       choices=sorted(PRESETS.keys()),
                       help='Initial conditions')
    parser.add_argument('--dimensions', type=int, default=2, choices=[2, 3],
                       help='Spatial dimensions')
    parser.add_argument('--stop-time', type=float, default=SIDEREAL_YEAR,
                       help='Simulated duration in seconds (default: one sidereal year)')

    # Engine configuration (overrides --config values)
    parser.add_argument('--config', type=str, default=None,
                       help='JSON or YAML configuration file')
    parser.add_argument('--dt', type=float, default=None,
                       help='Time step in seconds (default: 1000)')
    parser.add_argument('--G', type=float, default=None,
                       help='Gravitational constant (default: 6.67430e-11)')
    parser.add_argument('--sample-interval', type=int, default=None,
                       help='Record trajectories every N steps (default: 100)')
    parser.add_argument('--softening', type=float, default=None,
                       help='Softening length in metres (default: 0, disabled)')
    parser.add_argument('--force-method', type=str, default=None,
                       choices=['pairwise', 'symmetric', 'vectorized'],
                       help='Acceleration kernel (default: vectorized)')
    parser.add_argument('--check-finite', action='store_true',
                       help='Fail if the final state contains non-finite values')

    # Run control
    parser.add_argument('--max-wall-time', type=float, default=None,
                       help='Stop early after this many wall-clock seconds')
    parser.add_argument('--report-every', type=int, default=0,
                       help='Print energy every N steps (0 disables)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                       help='Enable real-time rendering')
    parser.add_argument('--seed', type=int, default=None,
                       help='Seed for random body colors')

    args = parser.parse_args(argv)

    try:
        return run_simulation(args)
    except (SimulationError, OSError, json.JSONDecodeError, yaml.YAMLError) as exc:
        print(f"Error: {exc}")
        sys.exit(1)


if __name__ == '__main__':
    sys.exit(main())
