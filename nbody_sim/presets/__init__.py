"""Preset scenario generators for N-body simulations."""

from nbody_sim.errors import ConfigurationError
from nbody_sim.presets.base import Preset
from nbody_sim.presets.random_cluster import RandomCluster
from nbody_sim.presets.star_system import (
    StarSystem,
    BinaryOrbit,
    PlanetSpec,
    DEFAULT_PLANETS,
    circular_speed,
)

PRESETS = {
    'random_cluster': RandomCluster,
    'star_system': StarSystem,
    'binary': BinaryOrbit,
}


def get_preset(name: str, **kwargs) -> Preset:
    """Get a preset instance by name.

    Raises:
        ConfigurationError: If the preset name is unknown
    """
    preset_class = PRESETS.get(name.lower())
    if preset_class is None:
        raise ConfigurationError(f"Unknown preset: {name}. Available: {list(PRESETS.keys())}")
    return preset_class(**kwargs)


__all__ = [
    "Preset",
    "RandomCluster",
    "StarSystem",
    "BinaryOrbit",
    "PlanetSpec",
    "DEFAULT_PLANETS",
    "circular_speed",
    "PRESETS",
    "get_preset",
]
