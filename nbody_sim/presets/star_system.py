"""Star with planets on prescribed circular orbits, and a circular binary."""

from dataclasses import dataclass
from typing import List, Optional, Sequence
import numpy as np
from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.bodies import Body, BodySet
from nbody_sim.physics.constants import G_NORMALIZED, G_VISUAL
from nbody_sim.presets.base import Preset
from nbody_sim.render.appearance import BodyAppearance


def circular_speed(G: float, central_mass: float, r: float, softening: float = 0.0) -> float:
    """Speed of a circular orbit of radius r around a point mass.

    With softening the central attraction is G*M*r / (r^2 + eps^2)^(3/2), so
    v = sqrt(G*M*r^2 / (r^2 + eps^2)^(3/2)). With eps = 0 this is sqrt(G*M/r).
    """
    if r <= 0.0:
        raise ConfigurationError(f"orbit radius must be > 0, got {r}")
    return float(np.sqrt(G * central_mass * r ** 2 / (r ** 2 + softening ** 2) ** 1.5))


@dataclass
class PlanetSpec:
    """Planet placed on the +x axis at ``distance`` from the star."""
    name: str
    distance: float
    mass: float
    radius: float = 10.0
    color: str = "gray"


DEFAULT_PLANETS = (
    PlanetSpec("Mercury", 120.0, 8.0, radius=10.0, color="gray"),
    PlanetSpec("Venus", 200.0, 15.0, radius=16.0, color="orange"),
    PlanetSpec("Earth", 300.0, 18.0, radius=16.0, color="blue"),
    PlanetSpec("Mars", 420.0, 10.0, radius=12.0, color="red"),
)


class StarSystem(Preset):
    """A central star at the origin with planets on circular orbits.

    Each planet starts at (distance, 0[, 0]) moving in +y with the circular
    speed around the star alone; planet-planet attraction perturbs the
    orbits slightly over time.
    """

    def __init__(
        self,
        star_mass: float = 30000.0,
        planets: Optional[Sequence[PlanetSpec]] = None,
        G: float = G_VISUAL,
        softening: float = 0.0,
        dim: int = 2,
        star_name: str = "Sun",
        star_radius: float = 40.0,
        star_color: str = "yellow",
    ):
        """Initialize star system preset.

        Args:
            star_mass: Mass of the central star
            planets: Planet specifications (default: four inner planets)
            G: Gravitational constant used for the orbital speeds
            softening: Softening length the simulation will use
            dim: 2 or 3
            star_name: Label of the star
            star_radius: Visual radius of the star
            star_color: Color of the star
        """
        super().__init__(seed=None)
        if dim not in (2, 3):
            raise ConfigurationError(f"dim must be 2 or 3, got {dim}")
        self.star_mass = star_mass
        self.planets: List[PlanetSpec] = list(DEFAULT_PLANETS if planets is None else planets)
        self.G = G
        self.softening = softening
        self.dim = dim
        self.star_name = star_name
        self.star_radius = star_radius
        self.star_color = star_color

    @property
    def name(self) -> str:
        return "star_system"

    def generate(self) -> BodySet:
        zero = [0.0] * self.dim
        bodies = [Body(position=zero, velocity=zero, mass=self.star_mass, name=self.star_name)]
        for planet in self.planets:
            v = circular_speed(self.G, self.star_mass, planet.distance, self.softening)
            position = [planet.distance, 0.0, 0.0][:self.dim]
            velocity = [0.0, v, 0.0][:self.dim]
            bodies.append(Body(position=position, velocity=velocity, mass=planet.mass, name=planet.name))
        return BodySet.from_bodies(bodies)

    def appearances(self) -> List[BodyAppearance]:
        """Presentation metadata in the same order as the generated bodies."""
        appearances = [BodyAppearance(radius=self.star_radius, color=self.star_color, label=self.star_name)]
        for planet in self.planets:
            appearances.append(BodyAppearance(radius=planet.radius, color=planet.color, label=planet.name))
        return appearances


class BinaryOrbit(Preset):
    """Two bodies on a circular orbit about their common centre of mass.

    The centre of mass sits at the origin and the total momentum is zero.
    """

    def __init__(
        self,
        primary_mass: float = 1000.0,
        secondary_mass: float = 1.0,
        separation: float = 10.0,
        G: float = G_NORMALIZED,
        softening: float = 0.0,
        dim: int = 3,
    ):
        super().__init__(seed=None)
        if separation <= 0.0:
            raise ConfigurationError(f"separation must be > 0, got {separation}")
        if dim not in (2, 3):
            raise ConfigurationError(f"dim must be 2 or 3, got {dim}")
        self.primary_mass = primary_mass
        self.secondary_mass = secondary_mass
        self.separation = separation
        self.G = G
        self.softening = softening
        self.dim = dim

    @property
    def name(self) -> str:
        return "binary"

    def period(self) -> float:
        """Orbital period 2*pi*r / v_rel."""
        v_rel = circular_speed(self.G, self.primary_mass + self.secondary_mass, self.separation, self.softening)
        return float(2.0 * np.pi * self.separation / v_rel)

    def generate(self) -> BodySet:
        m1, m2 = self.primary_mass, self.secondary_mass
        total = m1 + m2
        r = self.separation
        v_rel = circular_speed(self.G, total, r, self.softening)

        # Each body orbits the COM with radius and speed scaled by the other's mass fraction
        positions = np.zeros((2, self.dim))
        velocities = np.zeros((2, self.dim))
        positions[0, 0] = -r * m2 / total
        positions[1, 0] = r * m1 / total
        velocities[0, 1] = -v_rel * m2 / total
        velocities[1, 1] = v_rel * m1 / total
        return BodySet(positions, velocities, [m1, m2], names=["primary", "secondary"])
