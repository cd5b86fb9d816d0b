"""Base class for preset scenarios."""

from abc import ABC, abstractmethod
from typing import Optional
from nbody_sim.physics.bodies import BodySet


class Preset(ABC):
    """Abstract base class for preset scenarios."""

    def __init__(self, seed: Optional[int] = None):
        """Initialize preset.

        Args:
            seed: Random seed for reproducibility (ignored by literal scenarios)
        """
        self.seed = seed

    @abstractmethod
    def generate(self) -> BodySet:
        """Generate initial conditions.

        Returns:
            A new BodySet; repeated calls return independent copies
        """
        pass

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this preset."""
        pass
