"""
N-Body Simulator - softened Newtonian gravity for small systems.

Features:
- Pairwise O(n^2) force accumulation with Plummer softening
- Kick-drift-kick leapfrog and Euler-like integrators
- Diagnostics (centre of mass, momentum, energy, angular momentum)
- Preset scenarios (random cluster, star with planets, circular binary)
- Batch reporting, state save/load, matplotlib frame loop
- CLI with named profiles
"""

__version__ = "0.1.0"

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import Body, BodySet
from nbody_sim.physics.simulator import Simulator
from nbody_sim.physics.integrators import get_integrator

__all__ = [
    "ConfigurationError",
    "Body",
    "BodySet",
    "Simulator",
    "get_integrator",
]
