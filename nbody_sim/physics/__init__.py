"""Physics engine for N-body simulations."""

from nbody_sim.physics.bodies import Body, BodySet
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.simulator import Simulator

__all__ = ["Body", "BodySet", "ForceCalculator", "Diagnostics", "Simulator"]
