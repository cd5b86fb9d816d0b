"""Presentation metadata for bodies (owned by the render layer, not physics)."""

from dataclasses import dataclass
from typing import Optional, Sequence, Tuple, Union
import math

Color = Union[str, Tuple[float, float, float]]


@dataclass
class BodyAppearance:
    """How one body is drawn.

    Attributes:
        radius: Visual radius in screen/world units
        color: Any matplotlib color specification
        label: Display name (may be empty)
        show_trail: Whether the renderer draws this body's trail
    """
    radius: float = 5.0
    color: Color = "white"
    label: str = ""
    show_trail: bool = True


@dataclass
class CircularOrbitMotion:
    """Non-physical motion rule: a fixed circular orbit around a centre.

    Used for decorative bodies that should move without taking part in
    the gravity calculation.
    """
    center: Sequence[float]
    radius: float
    angular_speed: float
    angle: float = 0.0

    def update(self, dt: float) -> None:
        self.angle = (self.angle + self.angular_speed * dt) % (2.0 * math.pi)

    @property
    def position(self) -> Tuple[float, float]:
        cx, cy = self.center[0], self.center[1]
        return (cx + self.radius * math.cos(self.angle), cy + self.radius * math.sin(self.angle))


@dataclass
class DecorativeBody:
    """A drawable body whose position comes from a motion rule, not from gravity."""
    appearance: BodyAppearance
    motion: Optional[CircularOrbitMotion] = None
    fixed_position: Tuple[float, float] = (0.0, 0.0)

    def update(self, dt: float) -> None:
        if self.motion is not None:
            self.motion.update(dt)

    @property
    def position(self) -> Tuple[float, float]:
        if self.motion is not None:
            return self.motion.position
        return self.fixed_position


def default_appearances(n_bodies: int, radius: float = 3.0, color: Color = "white"):
    """Uniform appearance for bodies with no preset-specific metadata."""
    return [BodyAppearance(radius=radius, color=color) for _ in range(n_bodies)]
