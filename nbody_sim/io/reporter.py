"""Periodic text reports for batch runs."""

import sys
from typing import Optional, TextIO

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.simulator import Simulator


def format_center_of_mass(step: int, com) -> str:
    """``Step 20 | Center of Mass: (0.1234, -0.5678, 0.0000)``"""
    coords = ", ".join(f"{c:.4f}" for c in com)
    return f"Step {step} | Center of Mass: ({coords})"


class BatchReporter:
    """Prints the centre of mass (and optionally energy) every N steps.

    Attach with ``reporter.attach(sim)`` to report from the simulator's
    step callback, or call ``report(sim)`` yourself. Step indices are
    zero-based: the report for the first step is ``Step 0``.
    """

    def __init__(self, every: int = 20, show_energy: bool = False, stream: Optional[TextIO] = None):
        """Initialize reporter.

        Args:
            every: Report interval in steps (>= 1)
            show_energy: Append total energy and relative drift to each line
            stream: Output stream (default: stdout at report time)
        """
        if every < 1:
            raise ConfigurationError(f"report interval must be >= 1, got {every}")
        self.every = every
        self.show_energy = show_energy
        self.stream = stream
        self.initial_energy: Optional[float] = None
        self.lines_written = 0

    def _write(self, line: str):
        print(line, file=self.stream if self.stream is not None else sys.stdout)
        self.lines_written += 1

    def header(self, sim: Simulator, title: str = "N-Body Simulation"):
        """Print the run banner and remember the initial energy."""
        self.initial_energy = sim.get_energy()
        self._write(f"{title} (N={sim.bodies.n_bodies})")
        if self.show_energy:
            self._write(
                f"Integrator: {sim.integrator.name}, dt: {sim.dt}, G: {sim.G}, "
                f"eps: {sim.softening}, E0: {self.initial_energy:.6e}"
            )

    def report(self, sim: Simulator):
        """Print one line if the step just taken falls on the report interval."""
        step = sim.step_count - 1
        if step % self.every != 0:
            return
        line = format_center_of_mass(step, Diagnostics.center_of_mass(sim.bodies))
        if self.show_energy:
            energy = sim.get_energy()
            if self.initial_energy is None:
                self.initial_energy = energy
            drift = (energy - self.initial_energy) / abs(self.initial_energy) if self.initial_energy else 0.0
            line += f" | E: {energy:.6e} | dE/E0: {drift * 100:.4f}%"
        self._write(line)

    def attach(self, sim: Simulator):
        """Report from ``sim.on_step_callback``."""
        sim.on_step_callback = self.report
