"""Point masses and the ordered body set advanced by the integrators."""

from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Sequence
import numpy as np

from nbody_sim.errors import ConfigurationError


SUPPORTED_DIMENSIONS = (2, 3)


@dataclass
class Body:
    """A single point mass.

    Used to describe literal scenarios and as a read-only snapshot of one
    entry of a BodySet. Presentation data (radius, color, trails) is not
    part of the physical body.
    """
    position: Sequence[float]
    velocity: Sequence[float]
    mass: float
    name: str = ""
    acceleration: Optional[Sequence[float]] = field(default=None, repr=False)


def _check_masses(masses: np.ndarray) -> None:
    if masses.ndim != 1:
        raise ConfigurationError(f"masses must be 1D, got shape {masses.shape}")
    if not np.all(np.isfinite(masses)):
        raise ConfigurationError("masses must be finite")
    if np.any(masses <= 0.0):
        bad = np.flatnonzero(masses <= 0.0).tolist()
        raise ConfigurationError(f"masses must be > 0 (invalid at indices {bad})")


def _check_vectors(label: str, values: np.ndarray, n: int) -> None:
    if values.ndim != 2 or values.shape[0] != n:
        raise ConfigurationError(
            f"{label} must have shape (n, dim) with n={n}, got {values.shape}"
        )
    if values.shape[1] not in SUPPORTED_DIMENSIONS:
        raise ConfigurationError(
            f"{label} must be 2D or 3D vectors, got dimension {values.shape[1]}"
        )
    if not np.all(np.isfinite(values)):
        raise ConfigurationError(f"{label} must be finite")


class BodySet:
    """Ordered collection of point masses stored as parallel arrays.

    Attributes:
        positions: (n, dim) array
        velocities: (n, dim) array
        accelerations: (n, dim) array, overwritten by every force computation
        masses: (n,) array, strictly positive
        names: Optional label per body (kept in the same order)

    Order is stable: index i always refers to the same body until a
    ``remove`` call. Bodies may be added or removed between steps.
    """

    def __init__(self, positions, velocities, masses, names: Optional[List[str]] = None):
        """Create a body set, validating every invariant.

        Args:
            positions: Array-like of shape (n, 2) or (n, 3)
            velocities: Array-like, same shape as positions
            masses: Array-like of shape (n,), every entry > 0
            names: Optional list of n labels

        Raises:
            ConfigurationError: If shapes disagree, values are not finite,
                or any mass is not strictly positive
        """
        masses = np.array(masses, dtype=np.float64).reshape(-1)
        n = masses.shape[0]
        if n == 0:
            raise ConfigurationError("a body set needs at least one body")
        positions = np.array(positions, dtype=np.float64)
        velocities = np.array(velocities, dtype=np.float64)

        _check_masses(masses)
        _check_vectors("positions", positions, n)
        _check_vectors("velocities", velocities, n)
        if velocities.shape != positions.shape:
            raise ConfigurationError(
                f"velocities shape {velocities.shape} does not match positions {positions.shape}"
            )

        if names is None:
            names = [""] * n
        elif len(names) != n:
            raise ConfigurationError(f"expected {n} names, got {len(names)}")

        self.positions = positions
        self.velocities = velocities
        self.accelerations = np.zeros_like(positions)
        self.masses = masses
        self.names = list(names)
        self._accelerations_current = False

    @classmethod
    def from_bodies(cls, bodies: Iterable[Body]) -> "BodySet":
        """Build a body set from Body records, preserving their order."""
        bodies = list(bodies)
        if not bodies:
            raise ConfigurationError("a body set needs at least one body")
        return cls(
            [b.position for b in bodies],
            [b.velocity for b in bodies],
            [b.mass for b in bodies],
            names=[b.name for b in bodies],
        )

    @classmethod
    def from_arrays_unchecked(cls, positions, velocities, masses, names=None) -> "BodySet":
        """Build a body set from trusted arrays without validating them.

        Used for snapshots of a running simulation, which may hold
        non-finite values after a numerical blow-up.
        """
        bodies = object.__new__(cls)
        bodies.positions = np.array(positions, dtype=np.float64)
        bodies.velocities = np.array(velocities, dtype=np.float64)
        bodies.accelerations = np.zeros_like(bodies.positions)
        bodies.masses = np.array(masses, dtype=np.float64).reshape(-1)
        bodies.names = list(names) if names is not None else [""] * bodies.masses.shape[0]
        bodies._accelerations_current = False
        return bodies

    @property
    def n_bodies(self) -> int:
        return self.masses.shape[0]

    @property
    def dim(self) -> int:
        return self.positions.shape[1]

    @property
    def accelerations_current(self) -> bool:
        """True if accelerations were computed at the current positions."""
        return self._accelerations_current

    def __len__(self) -> int:
        return self.n_bodies

    def __iter__(self) -> Iterator[Body]:
        for i in range(self.n_bodies):
            yield self.body(i)

    def body(self, index: int) -> Body:
        """Return a copy of body ``index`` as a Body record."""
        return Body(
            position=self.positions[index].copy(),
            velocity=self.velocities[index].copy(),
            mass=float(self.masses[index]),
            name=self.names[index],
            acceleration=self.accelerations[index].copy(),
        )

    def add(self, body: Body) -> int:
        """Append a body and return its index.

        Raises:
            ConfigurationError: If the body has a non-positive mass or a
                dimension different from the set
        """
        position = np.array(body.position, dtype=np.float64).reshape(1, -1)
        velocity = np.array(body.velocity, dtype=np.float64).reshape(1, -1)
        mass = np.array([body.mass], dtype=np.float64)
        _check_masses(mass)
        _check_vectors("position", position, 1)
        _check_vectors("velocity", velocity, 1)
        if position.shape[1] != self.dim or velocity.shape[1] != self.dim:
            raise ConfigurationError(
                f"body dimension does not match body set dimension {self.dim}"
            )

        self.positions = np.vstack([self.positions, position])
        self.velocities = np.vstack([self.velocities, velocity])
        self.accelerations = np.vstack([self.accelerations, np.zeros((1, self.dim))])
        self.masses = np.concatenate([self.masses, mass])
        self.names.append(body.name)
        self._accelerations_current = False
        return self.n_bodies - 1

    def remove(self, index: int) -> Body:
        """Remove body ``index`` and return it. Later indices shift down by one."""
        if self.n_bodies == 1:
            raise ConfigurationError("cannot remove the last body of a body set")
        removed = self.body(index)
        self.positions = np.delete(self.positions, index, axis=0)
        self.velocities = np.delete(self.velocities, index, axis=0)
        self.accelerations = np.delete(self.accelerations, index, axis=0)
        self.masses = np.delete(self.masses, index)
        del self.names[index]
        self._accelerations_current = False
        return removed

    def set_accelerations(self, accelerations: np.ndarray) -> None:
        """Overwrite every acceleration row (called by the force accumulator)."""
        self.accelerations[...] = accelerations
        self._accelerations_current = True

    def kick(self, dt: float) -> None:
        """Velocity update in place: v += a * dt."""
        self.velocities += self.accelerations * dt

    def drift(self, dt: float) -> None:
        """Position update in place: x += v * dt."""
        self.positions += self.velocities * dt
        self._accelerations_current = False

    def shift(self, position_offset=None, velocity_offset=None) -> None:
        """Subtract a constant position and/or velocity offset from every body.

        Passing the centre of mass and its velocity moves the set into the
        centre-of-mass frame.
        """
        if position_offset is not None:
            self.positions -= np.asarray(position_offset, dtype=np.float64)
            self._accelerations_current = False
        if velocity_offset is not None:
            self.velocities -= np.asarray(velocity_offset, dtype=np.float64)

    def copy(self) -> "BodySet":
        """Return an independent copy (arrays and names are duplicated).

        The state is copied as is, without validation, so a diverged
        (non-finite) set can still be snapshotted.
        """
        clone = BodySet.from_arrays_unchecked(self.positions, self.velocities, self.masses, self.names)
        clone.accelerations = self.accelerations.copy()
        clone._accelerations_current = self._accelerations_current
        return clone

    def __repr__(self) -> str:
        return f"BodySet(n_bodies={self.n_bodies}, dim={self.dim})"
