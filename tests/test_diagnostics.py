"""Tests for diagnostics."""

import numpy as np
import pytest
from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.presets import BinaryOrbit


def test_center_of_mass_is_mass_weighted():
    bodies = BodySet([[0.0, 0.0, 0.0], [4.0, 0.0, 0.0]], np.zeros((2, 3)), [1.0, 3.0])
    assert np.allclose(Diagnostics.center_of_mass(bodies), [3.0, 0.0, 0.0])
    assert Diagnostics.total_mass(bodies) == 4.0


def test_center_of_mass_is_read_only():
    bodies = BinaryOrbit().generate()
    before = bodies.positions.copy()
    Diagnostics.center_of_mass(bodies)
    Diagnostics().compute_energies(bodies)
    assert np.array_equal(bodies.positions, before)


def test_momentum_and_com_velocity():
    bodies = BodySet([[0.0, 0.0], [1.0, 0.0]], [[1.0, 0.0], [0.0, 2.0]], [2.0, 1.0])
    assert np.allclose(Diagnostics.total_momentum(bodies), [2.0, 2.0])
    assert np.allclose(Diagnostics.center_of_mass_velocity(bodies), [2.0 / 3.0, 2.0 / 3.0])


def test_potential_energy_consistency():
    """Potential energy uses the same softening as the force calculation."""
    bodies = BodySet([[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]], np.zeros((2, 3)), [100.0, 1.0])
    diagnostics = Diagnostics(G=1.0, softening=0.1)

    K, U, E = diagnostics.compute_energies(bodies)

    U_expected = -100.0 / np.sqrt(25.0 + 0.1 ** 2)
    assert U == pytest.approx(U_expected, abs=1e-12)
    assert K == 0.0
    assert E == pytest.approx(U)


def test_for_calculator_copies_constants():
    diagnostics = Diagnostics.for_calculator(ForceCalculator(G=4000.0, softening=1.0))
    assert diagnostics.G == 4000.0
    assert diagnostics.softening == 1.0


def test_circular_binary_is_virialized():
    """For a circular orbit 2K = |U| (virial ratio 1)."""
    bodies = BinaryOrbit(primary_mass=1000.0, secondary_mass=1.0, separation=10.0).generate()
    K, U, _ = Diagnostics(G=1.0, softening=1e-6).compute_energies(bodies)
    assert 2.0 * K / abs(U) == pytest.approx(1.0, rel=1e-6)


def test_angular_momentum_2d_and_3d():
    bodies_2d = BodySet([[1.0, 0.0]], [[0.0, 2.0]], [3.0])
    assert Diagnostics.angular_momentum(bodies_2d) == pytest.approx(6.0)

    bodies_3d = BodySet([[1.0, 0.0, 0.0]], [[0.0, 2.0, 0.0]], [3.0])
    assert np.allclose(Diagnostics.angular_momentum(bodies_3d), [0.0, 0.0, 6.0])


def test_is_finite():
    bodies = BinaryOrbit().generate()
    assert Diagnostics.is_finite(bodies)
    bodies.positions[0, 0] = np.nan
    assert not Diagnostics.is_finite(bodies)
