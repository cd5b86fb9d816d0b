"""Abstract base class for time-stepping schemes."""

from abc import ABC, abstractmethod
from typing import Callable
from nbody_sim.physics.bodies import BodySet


Accelerate = Callable[[BodySet], None]


class Integrator(ABC):
    """Abstract interface for numerical integrators.

    An integrator advances a BodySet in place by exactly one time step.
    It never computes gravity itself; it calls ``accelerate(bodies)``,
    which overwrites ``bodies.accelerations`` at the current positions.
    """

    #: Whether ``step`` expects accelerations computed at the current positions.
    needs_current_accelerations: bool = False

    @abstractmethod
    def step(self, bodies: BodySet, accelerate: Accelerate, dt: float) -> None:
        """Perform one integration step in place.

        Args:
            bodies: Body set to advance
            accelerate: Callback that refreshes ``bodies.accelerations``
            dt: Time step (> 0, validated by the caller)
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this integrator."""
        pass

    @property
    @abstractmethod
    def order(self) -> int:
        """Return the order of accuracy (1 for Euler, 2 for leapfrog)."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
