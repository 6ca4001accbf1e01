"""Basic example of using the solar simulator."""

from solar_sim import SimulationConfig, Simulator
from solar_sim.presets import AU, SIDEREAL_YEAR, SunEarth
from solar_sim.physics.diagnostics import radial_extent

def main():
    """Run one year of the Sun-Earth system."""
    preset = SunEarth()
    
    # Generate initial conditions
    positions, velocities, masses = preset.generate()
    
    # 1000 s steps, a trajectory sample every 100 steps
    sim = Simulator(SimulationConfig(dt=1000.0, sample_interval=100))
    
    # Initialize simulation
    sim.initialize(positions, velocities, masses)
    
    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6e}")
    
    for step in range(5000):
        sim.step()
        if step % 1000 == 0:
            energy = sim.get_energy()
            print(f"Step {step}: Time={sim.time / 86400.0:.2f} d, Energy={energy:.6e}")
    
    print(f"Final energy: {sim.get_energy():.6e}")
    
    # Full run through the batch interface
    result = sim.run(positions, velocities, masses, SIDEREAL_YEAR)
    r_min, r_max = radial_extent(result.trajectories[1], center=result.trajectories[0])
    print(f"{result.steps_completed} steps, Earth between {r_min / AU:.4f} and {r_max / AU:.4f} AU")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
