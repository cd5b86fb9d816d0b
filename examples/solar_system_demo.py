"""Real-time star system demo.

Keys: space pauses, c clears the trails, t toggles them.
"""

from nbody_sim import Simulator
from nbody_sim.physics.constants import G_VISUAL
from nbody_sim.physics.integrators import EulerIntegrator
from nbody_sim.presets import StarSystem
from nbody_sim.render import (
    BodyAppearance,
    CircularOrbitMotion,
    DecorativeBody,
    Renderer2D,
    TrailHistory,
    ViewState,
    run_frame_loop,
)

def main():
    """Run the Sun and four planets with trails and a decorative moon."""
    system = StarSystem(softening=1.0)
    bodies = system.generate()

    sim = Simulator(EulerIntegrator(), dt=1.0 / 600.0, G=G_VISUAL, softening=1.0)
    sim.initialize(bodies)

    # The moon circles a fixed point and is not part of the gravity calculation
    moon = DecorativeBody(
        BodyAppearance(radius=5.0, color="lightgray", label="Moon", show_trail=False),
        motion=CircularOrbitMotion(center=(300.0, 0.0), radius=30.0, angular_speed=3.0),
    )

    view_state = ViewState(steps_per_frame=10)
    trails = TrailHistory(len(bodies), capacity=600)
    renderer = Renderer2D(title="Star System")

    def on_key(event):
        if event.key == " ":
            view_state.toggle_pause()
        elif event.key == "c":
            view_state.request_clear_trails()
        elif event.key == "t":
            view_state.show_trails = not view_state.show_trails

    print("Running simulation with rendering...")
    print("Close the matplotlib window to stop.")

    try:
        # First frame creates the figure so the key handler has something to bind to
        run_frame_loop(sim, renderer, view_state, 1, appearances=system.appearances(),
                       trails=trails, decorations=[moon])
        if renderer.fig is not None:
            renderer.fig.canvas.mpl_connect("key_press_event", on_key)
        run_frame_loop(sim, renderer, view_state, 3000, appearances=system.appearances(),
                       trails=trails, decorations=[moon])
    except KeyboardInterrupt:
        print("\nSimulation interrupted by user")
    finally:
        renderer.close()
        print("Simulation complete!")

if __name__ == "__main__":
    main()
