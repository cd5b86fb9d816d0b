"""Euler-like integrator for real-time, visually paced runs (O(h) accuracy)."""

from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.integrators.base import Integrator, Accelerate


class EulerIntegrator(Integrator):
    """Direct update: full kick with the current acceleration, then full drift.

    The drift uses the freshly kicked velocity. Cheap, but energy drifts
    visibly over long runs; fine for interactive demos.
    """

    @property
    def name(self) -> str:
        return "euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, bodies: BodySet, accelerate: Accelerate, dt: float) -> None:
        """Euler step: a = a(r), v_new = v + a*dt, r_new = r + v_new*dt."""
        accelerate(bodies)
        bodies.kick(dt)
        bodies.drift(dt)
