"""Tests for numerical integrators."""

import numpy as np
import pytest
from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.integrators import (
    EulerIntegrator,
    LeapfrogIntegrator,
    get_integrator,
)


def constant_field(acceleration):
    """accelerate() stand-in applying the same acceleration to every body."""
    calls = []

    def accelerate(bodies):
        calls.append(bodies.positions.copy())
        bodies.set_accelerations(np.tile(acceleration, (bodies.n_bodies, 1)))

    return accelerate, calls


def test_euler_integrator():
    """Euler: kick with a(r), then drift with the kicked velocity."""
    bodies = BodySet([[0.0, 0.0]], [[1.0, 0.0]], [1.0])
    accelerate, calls = constant_field([0.0, 2.0])
    integrator = EulerIntegrator()

    integrator.step(bodies, accelerate, 0.1)

    assert len(calls) == 1
    assert np.allclose(bodies.velocities, [[1.0, 0.2]])
    assert np.allclose(bodies.positions, [[0.1, 0.02]])
    assert integrator.name == "euler"
    assert integrator.order == 1
    assert not integrator.needs_current_accelerations


def test_leapfrog_integrator():
    """Leapfrog: half kick, drift, recompute, half kick."""
    bodies = BodySet([[0.0, 0.0]], [[1.0, 0.0]], [1.0])
    accelerate, calls = constant_field([0.0, 2.0])
    accelerate(bodies)
    calls.clear()
    integrator = LeapfrogIntegrator()

    integrator.step(bodies, accelerate, 0.1)

    # Forces are evaluated once, at the drifted positions
    assert len(calls) == 1
    assert np.allclose(calls[0], [[0.1, 0.01]])
    assert np.allclose(bodies.velocities, [[1.0, 0.2]])
    # Exact for constant acceleration: x = x0 + v0*t + a*t^2/2
    assert np.allclose(bodies.positions, [[0.1, 0.01]])
    assert bodies.accelerations_current
    assert integrator.name == "leapfrog"
    assert integrator.order == 2
    assert integrator.needs_current_accelerations


def test_leapfrog_is_time_reversible():
    from nbody_sim.physics.force_calculator import ForceCalculator

    calc = ForceCalculator(G=1.0, softening=0.5)
    bodies = BodySet(
        [[0.0, 0.0], [1.0, 0.0], [0.0, 2.0]],
        [[0.0, 0.1], [0.0, -0.3], [0.2, 0.0]],
        [1.0, 0.5, 0.8],
    )
    start = bodies.copy()
    calc.accelerate(bodies)
    integrator = LeapfrogIntegrator()

    for _ in range(50):
        integrator.step(bodies, calc.accelerate, 0.01)
    bodies.velocities *= -1.0
    for _ in range(50):
        integrator.step(bodies, calc.accelerate, 0.01)

    assert np.allclose(bodies.positions, start.positions, atol=1e-10)
    assert np.allclose(-bodies.velocities, start.velocities, atol=1e-10)


@pytest.mark.parametrize("name,expected", [
    ("euler", EulerIntegrator),
    ("leapfrog", LeapfrogIntegrator),
    ("kdk", LeapfrogIntegrator),
    ("Verlet", LeapfrogIntegrator),
])
def test_get_integrator(name, expected):
    assert isinstance(get_integrator(name), expected)


def test_unknown_integrator_rejected():
    with pytest.raises(ConfigurationError):
        get_integrator("rk4")
