"""Gravitational constants for the supported unit systems."""

G_SI = 6.6743e-11  # m^3 kg^-1 s^-2
G_NORMALIZED = 1.0  # N-body units for batch runs
G_VISUAL = 4000.0  # Scaled constant that paces the interactive demo at 60 FPS

DEFAULT_SOFTENING = 0.1
DEFAULT_DT = 0.01
