"""Softened pairwise gravity with one force evaluation per body pair.

For every unordered pair (i, j) with i < j:

    d   = r_j - r_i
    r2  = |d|^2 + eps^2
    f   = G / (r2 * sqrt(r2))
    a_i += m_j * f * d
    a_j -= m_i * f * d

Newton's third law means each pair is evaluated once, n(n-1)/2 times per
call. Direct summation is O(n^2), which is fine for tens to a few hundred
bodies.
"""

import math
from typing import Literal
import numpy as np

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import BodySet


METHODS = ("pairwise", "vectorized")


def pair_count(n: int) -> int:
    """Number of unordered body pairs evaluated per force computation."""
    return n * (n - 1) // 2


def _check_positive(label: str, value: float) -> float:
    value = float(value)
    if not math.isfinite(value) or value <= 0.0:
        raise ConfigurationError(f"{label} must be a finite value > 0, got {value}")
    return value


class ForceCalculator:
    """Computes net gravitational acceleration on every body of a BodySet."""

    def __init__(
        self,
        G: float = 1.0,
        softening: float = 0.1,
        method: Literal["pairwise", "vectorized"] = "pairwise",
    ):
        """Initialize the force accumulator.

        Args:
            G: Gravitational constant (physical or scaled for visual pacing)
            softening: Softening length eps, must be > 0
            method: 'pairwise' loops over i and vectorizes over j > i;
                'vectorized' evaluates all upper-triangle pairs at once

        Raises:
            ConfigurationError: If G or softening is not > 0, or method is unknown
        """
        self.G = _check_positive("G", G)
        self.softening = _check_positive("softening", softening)
        if method not in METHODS:
            raise ConfigurationError(f"Unknown force method '{method}'. Available: {list(METHODS)}")
        self.method = method

    def compute_accelerations(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        """Return the (n, dim) acceleration array for the given state.

        Pure function of its inputs: positions and masses are not modified.
        """
        if self.method == "vectorized":
            return self._accelerations_vectorized(positions, masses)
        return self._accelerations_pairwise(positions, masses)

    def accelerate(self, bodies: BodySet) -> None:
        """Overwrite ``bodies.accelerations`` with the current net acceleration.

        Positions, velocities and masses are left untouched.
        """
        bodies.set_accelerations(self.compute_accelerations(bodies.positions, bodies.masses))

    def _accelerations_pairwise(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        n = positions.shape[0]
        eps_sq = self.softening ** 2
        acc = np.zeros_like(positions, dtype=np.float64)

        for i in range(n - 1):
            # Displacements to every later body: d = r_j - r_i
            d = positions[i + 1:] - positions[i]
            r2 = np.sum(d * d, axis=1) + eps_sq
            f = self.G / (r2 * np.sqrt(r2))
            fd = f[:, np.newaxis] * d

            acc[i] += np.sum(masses[i + 1:, np.newaxis] * fd, axis=0)
            acc[i + 1:] -= masses[i] * fd

        return acc

    def _accelerations_vectorized(self, positions: np.ndarray, masses: np.ndarray) -> np.ndarray:
        n = positions.shape[0]
        acc = np.zeros_like(positions, dtype=np.float64)
        if n < 2:
            return acc

        i_idx, j_idx = np.triu_indices(n, k=1)
        d = positions[j_idx] - positions[i_idx]
        r2 = np.sum(d * d, axis=1) + self.softening ** 2
        f = self.G / (r2 * np.sqrt(r2))
        fd = f[:, np.newaxis] * d

        # Unbuffered scatter-add: a body appears in many pairs
        np.add.at(acc, i_idx, masses[j_idx, np.newaxis] * fd)
        np.add.at(acc, j_idx, -masses[i_idx, np.newaxis] * fd)
        return acc

    def potential_energy(self, positions: np.ndarray, masses: np.ndarray) -> float:
        """Softened potential energy consistent with the force law.

        U = -G * sum_{i<j} m_i * m_j / sqrt(r_ij^2 + eps^2)
        """
        n = positions.shape[0]
        if n < 2:
            return 0.0
        i_idx, j_idx = np.triu_indices(n, k=1)
        d = positions[j_idx] - positions[i_idx]
        r_soft = np.sqrt(np.sum(d * d, axis=1) + self.softening ** 2)
        return float(-self.G * np.sum(masses[i_idx] * masses[j_idx] / r_soft))
