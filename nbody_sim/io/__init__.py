"""I/O utilities for reporting and state management."""

from nbody_sim.io.reporter import BatchReporter, format_center_of_mass
from nbody_sim.io.state_io import save_state, load_state

__all__ = ["BatchReporter", "format_center_of_mass", "save_state", "load_state"]
