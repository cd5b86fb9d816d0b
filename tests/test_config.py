"""Tests for configuration and named profiles."""

import json
import pytest
from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.integrators import EulerIntegrator, LeapfrogIntegrator
from nbody_sim.physics.simulator import Simulator
from nbody_sim.utils.config import (
    PROFILES,
    SimulationConfig,
    get_profile,
    load_config,
    save_config,
)


def test_profiles():
    batch = get_profile("batch")
    interactive = get_profile("interactive")

    assert batch.integrator == "leapfrog"
    assert batch.G == 1.0
    assert batch.softening == 0.1
    assert batch.dt == 0.01
    assert interactive.integrator == "euler"
    assert interactive.G == 4000.0
    assert interactive.render


def test_get_profile_returns_copy():
    profile = get_profile("batch")
    profile.dt = 0.5
    profile.preset_params["x"] = 1
    assert PROFILES["batch"].dt == 0.01
    assert PROFILES["batch"].preset_params == {}


def test_unknown_profile():
    with pytest.raises(ConfigurationError):
        get_profile("realtime")


@pytest.mark.parametrize("overrides", [
    {"dt": 0.0},
    {"dt": -1.0},
    {"softening": 0.0},
    {"G": -1.0},
    {"integrator": "rk4"},
    {"method": "tree"},
    {"dim": 1},
    {"n_bodies": 0},
    {"report_every": 0},
    {"trail_length": 0},
])
def test_validate_rejects_invalid_values(overrides):
    with pytest.raises(ConfigurationError):
        SimulationConfig(**overrides).validate()


def test_with_overrides_ignores_none():
    config = SimulationConfig().with_overrides(dt=None, steps=5)
    assert config.dt == 0.01
    assert config.steps == 5


def test_simulator_from_config():
    sim = Simulator.from_config(get_profile("interactive"))
    assert isinstance(sim.integrator, EulerIntegrator)
    assert sim.G == 4000.0
    assert sim.softening == 1.0

    sim = Simulator.from_config(get_profile("batch"))
    assert isinstance(sim.integrator, LeapfrogIntegrator)


def test_from_config_rejects_invalid():
    with pytest.raises(ConfigurationError):
        Simulator.from_config(SimulationConfig(dt=0.0))


def test_load_yaml_with_profile(tmp_path):
    path = tmp_path / "run.yaml"
    path.write_text("profile: interactive\nsteps: 120\nsoftening: 2.5\n")

    config = load_config(str(path))

    assert config.integrator == "euler"
    assert config.steps == 120
    assert config.softening == 2.5


def test_load_rejects_unknown_keys_and_bad_values(tmp_path):
    unknown = tmp_path / "unknown.json"
    unknown.write_text(json.dumps({"temperature": 5772}))
    with pytest.raises(ConfigurationError):
        load_config(str(unknown))

    bad = tmp_path / "bad.json"
    bad.write_text(json.dumps({"dt": -0.1}))
    with pytest.raises(ConfigurationError):
        load_config(str(bad))


@pytest.mark.parametrize("suffix", [".json", ".yml"])
def test_save_then_load(tmp_path, suffix):
    config = get_profile("batch").with_overrides(steps=7, seed=3)
    path = tmp_path / f"config{suffix}"

    save_config(config, str(path))

    assert load_config(str(path)) == config
