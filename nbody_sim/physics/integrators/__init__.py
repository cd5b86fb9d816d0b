"""Numerical integrators for N-body simulations."""

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.integrators.base import Integrator
from nbody_sim.physics.integrators.euler import EulerIntegrator
from nbody_sim.physics.integrators.leapfrog import LeapfrogIntegrator

INTEGRATORS = {
    'euler': EulerIntegrator,
    'leapfrog': LeapfrogIntegrator,
    'kdk': LeapfrogIntegrator,
    'verlet': LeapfrogIntegrator,
}


def get_integrator(name: str) -> Integrator:
    """Get an integrator instance by name ('euler', 'leapfrog', 'kdk', 'verlet').

    Raises:
        ConfigurationError: If the name is unknown
    """
    integrator_class = INTEGRATORS.get(name.lower())
    if integrator_class is None:
        raise ConfigurationError(f"Unknown integrator: {name}. Available: {sorted(INTEGRATORS)}")
    return integrator_class()


__all__ = [
    "Integrator",
    "EulerIntegrator",
    "LeapfrogIntegrator",
    "INTEGRATORS",
    "get_integrator",
]
