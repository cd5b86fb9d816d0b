"""Tests for the command-line entry point."""

import json
import matplotlib.pyplot as plt
from nbody_sim.cli.main import main


def test_batch_run(capsys):
    exit_code = main(["--steps", "40", "--report-every", "20", "--bodies", "10"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "N-Body Simulation (N=10)" in out
    assert "Step 0 | Center of Mass: (" in out
    assert "Step 20 | Center of Mass: (" in out
    assert "Step 40" not in out


def test_invalid_dt(capsys):
    exit_code = main(["--dt", "0", "--steps", "5"])
    err = capsys.readouterr().err

    assert exit_code == 1
    assert "Configuration error" in err


def test_list_presets(capsys):
    assert main(["--list-presets"]) == 0
    out = capsys.readouterr().out
    for name in ("binary", "random_cluster", "star_system"):
        assert f"  - {name}" in out


def test_save_state(tmp_path, capsys):
    path = tmp_path / "final.json"
    assert main(["--preset", "binary", "--steps", "10", "--save-state", str(path)]) == 0

    state = json.loads(path.read_text())
    assert state["names"] == ["primary", "secondary"]
    assert state["metadata"]["steps"] == 10
    assert "State saved to" in capsys.readouterr().out


def test_interactive_profile_without_window(capsys):
    exit_code = main(["--profile", "interactive", "--no-render", "--steps", "20", "--energy"])
    out = capsys.readouterr().out

    assert exit_code == 0
    assert "N-Body Simulation (N=5)" in out
    assert "Integrator: euler" in out
    assert "Step 0 | Center of Mass: (" in out


def test_config_file(tmp_path, capsys):
    path = tmp_path / "run.yaml"
    path.write_text("preset: random_cluster\nn_bodies: 4\nsteps: 3\nreport_every: 1\ndim: 2\n")

    assert main(["--config", str(path)]) == 0
    out = capsys.readouterr().out
    assert "Step 2 | Center of Mass: (" in out
    assert out.splitlines()[1].count(",") == 1


def test_interactive_render_path(tmp_path):
    path = tmp_path / "final.json"
    exit_code = main(["--profile", "interactive", "--steps", "20", "--save-state", str(path)])

    assert exit_code == 0
    assert plt.get_fignums() == []
    assert json.loads(path.read_text())["metadata"]["steps"] == 20
