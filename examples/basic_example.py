"""Basic example of using the N-body simulator."""

from nbody_sim import Simulator
from nbody_sim.physics.integrators import LeapfrogIntegrator
from nbody_sim.presets import RandomCluster

def main():
    """Run a 100-body random cluster and watch its energy."""
    # Create a random cluster preset
    preset = RandomCluster(n_bodies=100, seed=42)

    # Generate initial conditions
    bodies = preset.generate()

    # Create simulator with leapfrog integrator
    sim = Simulator(LeapfrogIntegrator(), dt=0.01, G=1.0, softening=0.1)
    sim.initialize(bodies)

    print("Running simulation...")
    print(f"Initial energy: {sim.get_energy():.6f}")

    for step in range(500):
        sim.step()
        if step % 100 == 0:
            com = sim.center_of_mass()
            print(f"Step {step}: Time={sim.time:.2f}, Energy={sim.get_energy():.6f}, COM={com.round(4)}")

    print(f"Final energy: {sim.get_energy():.6f}")
    print("Simulation complete!")

if __name__ == "__main__":
    main()
