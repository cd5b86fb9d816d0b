"""Configuration utilities."""

from nbody_sim.utils.config import (
    SimulationConfig,
    PROFILES,
    get_profile,
    load_config,
    save_config,
)

__all__ = ["SimulationConfig", "PROFILES", "get_profile", "load_config", "save_config"]
