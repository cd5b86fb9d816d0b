"""Kick-drift-kick leapfrog integrator (velocity Verlet, O(h^2) accuracy)."""

from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.integrators.base import Integrator, Accelerate


class LeapfrogIntegrator(Integrator):
    """Kick-drift-kick leapfrog - second-order, symplectic, time-reversible.

    1. v_half = v + 0.5*a_old*dt
    2. x_new = x + v_half*dt
    3. recompute a_new at x_new
    4. v_new = v_half + 0.5*a_new*dt

    The acceleration left in the body set after a step matches the new
    positions, so consecutive steps need one force evaluation each.
    Better energy conservation than Euler. Good default choice.
    """

    needs_current_accelerations = True

    @property
    def name(self) -> str:
        return "leapfrog"

    @property
    def order(self) -> int:
        return 2

    def step(self, bodies: BodySet, accelerate: Accelerate, dt: float) -> None:
        half_dt = 0.5 * dt
        bodies.kick(half_dt)
        bodies.drift(dt)
        accelerate(bodies)
        bodies.kick(half_dt)
