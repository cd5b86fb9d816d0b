"""Uniformly sampled cluster of equal-mass bodies."""

from typing import Optional, Tuple
import numpy as np
from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import BodySet
from nbody_sim.presets.base import Preset


class RandomCluster(Preset):
    """Bodies scattered uniformly in a box with small random velocities.

    Positions and velocities are drawn component-wise from uniform ranges
    with a dedicated ``numpy.random.Generator``, so the same seed and
    parameters always give a bit-for-bit identical body set.
    """

    def __init__(
        self,
        n_bodies: int = 100,
        seed: Optional[int] = 42,
        position_range: Tuple[float, float] = (-10.0, 10.0),
        velocity_range: Tuple[float, float] = (-0.1, 0.1),
        mass: float = 1.0,
        dim: int = 3,
    ):
        """Initialize random cluster preset.

        Args:
            n_bodies: Number of bodies
            seed: Random seed
            position_range: (low, high) for every position component
            velocity_range: (low, high) for every velocity component
            mass: Mass of every body (> 0)
            dim: 2 or 3
        """
        super().__init__(seed)
        if n_bodies < 1:
            raise ConfigurationError(f"n_bodies must be >= 1, got {n_bodies}")
        if dim not in (2, 3):
            raise ConfigurationError(f"dim must be 2 or 3, got {dim}")
        for label, (low, high) in (("position_range", position_range), ("velocity_range", velocity_range)):
            if not low <= high:
                raise ConfigurationError(f"{label} low must not exceed high, got ({low}, {high})")
        self.n_bodies = n_bodies
        self.position_range = tuple(position_range)
        self.velocity_range = tuple(velocity_range)
        self.mass = mass
        self.dim = dim

    @property
    def name(self) -> str:
        return "random_cluster"

    def generate(self) -> BodySet:
        """Generate random cluster initial conditions."""
        rng = np.random.default_rng(self.seed)
        shape = (self.n_bodies, self.dim)
        positions = rng.uniform(self.position_range[0], self.position_range[1], shape)
        velocities = rng.uniform(self.velocity_range[0], self.velocity_range[1], shape)
        masses = np.full(self.n_bodies, self.mass)
        return BodySet(positions, velocities, masses)
