"""Configuration management."""

import json
import math
from dataclasses import dataclass, asdict, field, replace
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.constants import G_NORMALIZED, G_VISUAL
from nbody_sim.physics.force_calculator import METHODS
from nbody_sim.physics.integrators import INTEGRATORS


@dataclass
class SimulationConfig:
    """Simulation configuration."""
    # Scenario
    preset: str = "random_cluster"
    n_bodies: int = 100
    dim: int = 3
    seed: Optional[int] = 42
    preset_params: Dict[str, Any] = field(default_factory=dict)

    # Physics
    dt: float = 0.01
    integrator: str = "leapfrog"
    G: float = G_NORMALIZED
    softening: float = 0.1
    method: str = "pairwise"

    # Run / reporting
    steps: int = 100
    report_every: int = 20
    show_energy: bool = False

    # Rendering
    render: bool = False
    show_trails: bool = True
    trail_length: int = 600
    target_fps: float = 60.0
    steps_per_frame: int = 1

    def validate(self) -> "SimulationConfig":
        """Check every value that would make a run meaningless.

        Raises:
            ConfigurationError: On the first invalid value found
        """
        for label in ("dt", "G", "softening"):
            value = getattr(self, label)
            if not isinstance(value, (int, float)) or not math.isfinite(value) or value <= 0:
                raise ConfigurationError(f"{label} must be a finite value > 0, got {value!r}")
        if self.integrator.lower() not in INTEGRATORS:
            raise ConfigurationError(f"Unknown integrator: {self.integrator}. Available: {sorted(INTEGRATORS)}")
        if self.method not in METHODS:
            raise ConfigurationError(f"Unknown force method '{self.method}'. Available: {list(METHODS)}")
        if self.n_bodies < 1:
            raise ConfigurationError(f"n_bodies must be >= 1, got {self.n_bodies}")
        if self.dim not in (2, 3):
            raise ConfigurationError(f"dim must be 2 or 3, got {self.dim}")
        if self.steps < 0:
            raise ConfigurationError(f"steps must be >= 0, got {self.steps}")
        if self.report_every < 1:
            raise ConfigurationError(f"report_every must be >= 1, got {self.report_every}")
        if self.steps_per_frame < 1:
            raise ConfigurationError(f"steps_per_frame must be >= 1, got {self.steps_per_frame}")
        if self.trail_length < 1:
            raise ConfigurationError(f"trail_length must be >= 1, got {self.trail_length}")
        return self

    def with_overrides(self, **overrides) -> "SimulationConfig":
        """Copy with the given fields replaced; None values are ignored."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})


# Batch runs use normalized units and the energy-conserving scheme; the
# interactive demo uses a scaled G and the cheaper Euler update.
PROFILES: Dict[str, SimulationConfig] = {
    "batch": SimulationConfig(
        preset="random_cluster",
        n_bodies=100,
        dim=3,
        seed=42,
        dt=0.01,
        integrator="leapfrog",
        G=G_NORMALIZED,
        softening=0.1,
        steps=100,
        report_every=20,
    ),
    "interactive": SimulationConfig(
        preset="star_system",
        n_bodies=5,
        dim=2,
        seed=None,
        dt=1.0 / 600.0,
        integrator="euler",
        G=G_VISUAL,
        softening=1.0,
        steps=6000,
        report_every=600,
        render=True,
        show_trails=True,
        trail_length=600,
        target_fps=60.0,
        steps_per_frame=10,
    ),
}


def get_profile(name: str) -> SimulationConfig:
    """Return a fresh copy of a named profile ('batch' or 'interactive').

    Raises:
        ConfigurationError: If the profile name is unknown
    """
    profile = PROFILES.get(name.lower())
    if profile is None:
        raise ConfigurationError(f"Unknown profile: {name}. Available: {list(PROFILES)}")
    return replace(profile, preset_params=dict(profile.preset_params))


def load_config(config_path: str) -> SimulationConfig:
    """Load configuration from file.

    Args:
        config_path: Path to config file (.json, .yaml or .yml)

    Returns:
        Validated SimulationConfig. A ``profile`` key selects the base
        profile that the remaining keys override.

    Raises:
        ConfigurationError: On unknown keys or invalid values
    """
    config_path = Path(config_path)

    with open(config_path, 'r') as f:
        if config_path.suffix in ('.yaml', '.yml'):
            data = yaml.safe_load(f) or {}
        else:
            data = json.load(f)

    base = get_profile(data.pop("profile")) if "profile" in data else SimulationConfig()
    try:
        config = replace(base, **data)
    except TypeError as exc:
        raise ConfigurationError(f"Invalid configuration in {config_path}: {exc}") from exc
    return config.validate()


def save_config(config: SimulationConfig, output_path: str):
    """Save configuration to file.

    Args:
        config: SimulationConfig object
        output_path: Output file path (.json, .yaml or .yml)
    """
    output_path = Path(output_path)
    data = asdict(config)

    with open(output_path, 'w') as f:
        if output_path.suffix in ('.yaml', '.yml'):
            yaml.safe_dump(data, f, default_flow_style=False)
        else:
            json.dump(data, f, indent=2)
