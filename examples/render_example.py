"""Example with real-time rendering."""

from solar_sim import SimulationConfig, run
from solar_sim.presets import SIDEREAL_YEAR, InnerSolarSystem
from solar_sim.render import OrbitRenderer

def main():
    """Run the inner planets in 3D with rendering."""
    preset = InnerSolarSystem(dimensions=3)
    positions, velocities, masses = preset.generate()
    
    renderer = OrbitRenderer(seed=123)
    
    print("Running simulation with rendering...")
    print("Close the matplotlib window to exit.")
    
    try:
        result = run(
            positions, velocities, masses, SIDEREAL_YEAR,
            step_sink=renderer,
            config=SimulationConfig(dt=2000.0, sample_interval=50),
        )
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    else:
        print(f"{result.steps_completed} steps, {len(result.trajectories[0])} samples per body")
        renderer.wait()
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()
