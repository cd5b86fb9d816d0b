"""Diagnostics for N-body simulations."""

from typing import Tuple, Union
import numpy as np
from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.force_calculator import ForceCalculator


class Diagnostics:
    """Read-only aggregate quantities over a BodySet.

    Energies use the same softening as the force law so that the total
    energy is the quantity the leapfrog scheme approximately conserves.
    None of the methods modify the body set.
    """

    def __init__(self, G: float = 1.0, softening: float = 0.1):
        """Initialize diagnostics.

        Args:
            G: Gravitational constant
            softening: Softening length (must match the force calculation)
        """
        self._forces = ForceCalculator(G=G, softening=softening)

    @classmethod
    def for_calculator(cls, force_calculator: ForceCalculator) -> "Diagnostics":
        """Diagnostics consistent with an existing force calculator."""
        return cls(G=force_calculator.G, softening=force_calculator.softening)

    @property
    def G(self) -> float:
        return self._forces.G

    @property
    def softening(self) -> float:
        return self._forces.softening

    @staticmethod
    def total_mass(bodies: BodySet) -> float:
        return float(np.sum(bodies.masses))

    @staticmethod
    def center_of_mass(bodies: BodySet) -> np.ndarray:
        """Mass-weighted mean position, shape (dim,)."""
        m = bodies.masses
        return np.sum(m[:, np.newaxis] * bodies.positions, axis=0) / np.sum(m)

    @staticmethod
    def center_of_mass_velocity(bodies: BodySet) -> np.ndarray:
        """Mass-weighted mean velocity, shape (dim,)."""
        m = bodies.masses
        return np.sum(m[:, np.newaxis] * bodies.velocities, axis=0) / np.sum(m)

    @staticmethod
    def total_momentum(bodies: BodySet) -> np.ndarray:
        """Total linear momentum sum(m_i * v_i), shape (dim,)."""
        return np.sum(bodies.masses[:, np.newaxis] * bodies.velocities, axis=0)

    @staticmethod
    def kinetic_energy(bodies: BodySet) -> float:
        """Total kinetic energy: 0.5 * sum(m_i * v_i^2)."""
        v_sq = np.sum(bodies.velocities ** 2, axis=1)
        return float(0.5 * np.sum(bodies.masses * v_sq))

    def potential_energy(self, bodies: BodySet) -> float:
        """Softened potential energy: -G * sum_{i<j} m_i m_j / sqrt(r_ij^2 + eps^2)."""
        return self._forces.potential_energy(bodies.positions, bodies.masses)

    def compute_energies(self, bodies: BodySet) -> Tuple[float, float, float]:
        """Compute kinetic, potential, and total energy.

        Returns:
            Tuple of (kinetic_energy, potential_energy, total_energy)
        """
        K = self.kinetic_energy(bodies)
        U = self.potential_energy(bodies)
        return K, U, K + U

    def total_energy(self, bodies: BodySet) -> float:
        return self.compute_energies(bodies)[2]

    @staticmethod
    def angular_momentum(bodies: BodySet) -> Union[float, np.ndarray]:
        """Total angular momentum about the origin.

        Returns:
            L_z as a float for 2D body sets, the (3,) vector for 3D
        """
        m = bodies.masses
        r = bodies.positions
        v = bodies.velocities
        if bodies.dim == 2:
            return float(np.sum(m * (r[:, 0] * v[:, 1] - r[:, 1] * v[:, 0])))
        return np.sum(m[:, np.newaxis] * np.cross(r, v), axis=0)

    @staticmethod
    def is_finite(bodies: BodySet) -> bool:
        """False once any position, velocity or acceleration is NaN or infinite."""
        return bool(
            np.all(np.isfinite(bodies.positions))
            and np.all(np.isfinite(bodies.velocities))
            and np.all(np.isfinite(bodies.accelerations))
        )
