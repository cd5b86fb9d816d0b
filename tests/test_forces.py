"""Tests for the pairwise force accumulator."""

import numpy as np
import pytest
from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.force_calculator import ForceCalculator, pair_count
from nbody_sim.presets import RandomCluster


def brute_force_accelerations(positions, masses, G, eps):
    """Reference: evaluate every ordered pair independently."""
    n = len(masses)
    acc = np.zeros_like(positions)
    for i in range(n):
        for j in range(n):
            if i == j:
                continue
            d = positions[j] - positions[i]
            r2 = np.dot(d, d) + eps ** 2
            acc[i] += G * masses[j] * d / (r2 * np.sqrt(r2))
    return acc


def test_two_body_acceleration():
    """Test the softened force law on a single pair."""
    calc = ForceCalculator(G=1.0, softening=0.1)
    positions = np.array([[0.0, 0.0, 0.0], [1.0, 0.0, 0.0]])
    masses = np.array([2.0, 3.0])

    acc = calc.compute_accelerations(positions, masses)

    r2 = 1.0 + 0.1 ** 2
    f = 1.0 / (r2 * np.sqrt(r2))
    assert np.allclose(acc[0], [3.0 * f, 0.0, 0.0])
    assert np.allclose(acc[1], [-2.0 * f, 0.0, 0.0])


@pytest.mark.parametrize("method", ["pairwise", "vectorized"])
def test_matches_brute_force(method):
    bodies = RandomCluster(n_bodies=15, seed=3).generate()
    bodies.masses[:] = np.linspace(0.5, 2.0, 15)
    calc = ForceCalculator(G=2.5, softening=0.3, method=method)

    acc = calc.compute_accelerations(bodies.positions, bodies.masses)
    expected = brute_force_accelerations(bodies.positions, bodies.masses, 2.5, 0.3)

    assert np.allclose(acc, expected, rtol=1e-12, atol=1e-15)


def test_methods_agree_in_2d():
    bodies = RandomCluster(n_bodies=12, seed=5, dim=2).generate()
    pairwise = ForceCalculator(method="pairwise").compute_accelerations(bodies.positions, bodies.masses)
    vectorized = ForceCalculator(method="vectorized").compute_accelerations(bodies.positions, bodies.masses)
    assert pairwise.shape == (12, 2)
    assert np.allclose(pairwise, vectorized, rtol=1e-12, atol=1e-15)


def test_repeated_computation_is_identical():
    """Computing twice without moving bodies gives identical accelerations."""
    bodies = RandomCluster(n_bodies=20, seed=11).generate()
    calc = ForceCalculator()

    calc.accelerate(bodies)
    first = bodies.accelerations.copy()
    calc.accelerate(bodies)

    assert np.array_equal(first, bodies.accelerations)


def test_accelerations_overwritten_not_accumulated():
    bodies = RandomCluster(n_bodies=5, seed=1).generate()
    calc = ForceCalculator()
    expected = calc.compute_accelerations(bodies.positions, bodies.masses)

    bodies.accelerations[:] = 1e6
    calc.accelerate(bodies)

    assert np.allclose(bodies.accelerations, expected)
    assert bodies.accelerations_current


def test_accelerate_touches_only_accelerations():
    bodies = RandomCluster(n_bodies=6, seed=2).generate()
    positions = bodies.positions.copy()
    velocities = bodies.velocities.copy()
    masses = bodies.masses.copy()

    ForceCalculator().accelerate(bodies)

    assert np.array_equal(bodies.positions, positions)
    assert np.array_equal(bodies.velocities, velocities)
    assert np.array_equal(bodies.masses, masses)


def test_single_body_has_zero_acceleration():
    bodies = BodySet([[1.0, 2.0, 3.0]], [[0.1, 0.0, 0.0]], [5.0])
    ForceCalculator().accelerate(bodies)
    assert np.array_equal(bodies.accelerations, np.zeros((1, 3)))


def test_pairwise_contributions_cancel():
    """Newton's third law: sum of m_i * a_i vanishes."""
    bodies = RandomCluster(n_bodies=25, seed=8).generate()
    bodies.masses[:] = np.arange(1, 26, dtype=float)
    calc = ForceCalculator(G=1.0, softening=0.05)

    acc = calc.compute_accelerations(bodies.positions, bodies.masses)
    net_force = np.sum(bodies.masses[:, np.newaxis] * acc, axis=0)
    scale = np.sum(np.abs(bodies.masses[:, np.newaxis] * acc))

    assert np.all(np.abs(net_force) < 1e-12 * scale)


def test_coincident_bodies_stay_finite():
    calc = ForceCalculator(softening=0.1)
    acc = calc.compute_accelerations(np.zeros((2, 3)), np.array([1.0, 1.0]))
    assert np.all(np.isfinite(acc))
    assert np.allclose(acc, 0.0)


def test_pair_count():
    assert pair_count(1) == 0
    assert pair_count(2) == 1
    assert pair_count(100) == 4950


@pytest.mark.parametrize("kwargs", [
    {"softening": 0.0},
    {"softening": -0.1},
    {"softening": float("nan")},
    {"G": 0.0},
    {"G": -1.0},
    {"method": "barnes_hut"},
])
def test_invalid_configuration_rejected(kwargs):
    with pytest.raises(ConfigurationError):
        ForceCalculator(**kwargs)


def test_potential_energy_matches_softened_law():
    calc = ForceCalculator(G=1.0, softening=0.1)
    positions = np.array([[0.0, 0.0, 0.0], [5.0, 0.0, 0.0]])
    masses = np.array([100.0, 1.0])

    U = calc.potential_energy(positions, masses)

    assert U == pytest.approx(-100.0 / np.sqrt(25.0 + 0.01))
    assert calc.potential_energy(positions[:1], masses[:1]) == 0.0


@pytest.mark.parametrize("method", ["pairwise", "vectorized"])
@pytest.mark.parametrize("n", [1, 2, 7])
def test_one_evaluation_per_pair(monkeypatch, method, n):
    """Every pair distance goes through sqrt exactly once."""
    evaluated = []
    sqrt = np.sqrt

    def counting_sqrt(x, *args, **kwargs):
        evaluated.append(np.size(x))
        return sqrt(x, *args, **kwargs)

    bodies = RandomCluster(n_bodies=n, seed=5).generate()
    calc = ForceCalculator(method=method)
    monkeypatch.setattr(np, "sqrt", counting_sqrt)

    calc.compute_accelerations(bodies.positions, bodies.masses)

    assert sum(evaluated) == pair_count(n)
