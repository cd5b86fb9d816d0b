"""Main simulator controller."""

from typing import Callable, Optional, TYPE_CHECKING
import math
import warnings
import numpy as np

from nbody_sim.errors import ConfigurationError
from nbody_sim.physics.constants import DEFAULT_DT, DEFAULT_SOFTENING, G_NORMALIZED
from nbody_sim.physics.bodies import BodySet
from nbody_sim.physics.diagnostics import Diagnostics
from nbody_sim.physics.force_calculator import ForceCalculator
from nbody_sim.physics.integrators import Integrator, LeapfrogIntegrator, get_integrator

if TYPE_CHECKING:
    from nbody_sim.utils.config import SimulationConfig


def _check_timestep(dt: float) -> float:
    dt = float(dt)
    if not math.isfinite(dt) or dt <= 0.0:
        raise ConfigurationError(f"time step dt must be a finite value > 0, got {dt}")
    return dt


class Simulator:
    """Main simulation controller.

    Owns one BodySet and advances it one force-then-integrate step at a
    time. A step is atomic from the caller's point of view: callbacks and
    readers only ever see a fully updated state.
    """

    def __init__(
        self,
        integrator: Optional[Integrator] = None,
        dt: float = DEFAULT_DT,
        G: float = G_NORMALIZED,
        softening: float = DEFAULT_SOFTENING,
        method: str = "pairwise",
    ):
        """Initialize simulator.

        Args:
            integrator: Integrator to use (default: kick-drift-kick leapfrog)
            dt: Time step, must be > 0
            G: Gravitational constant
            softening: Softening length, must be > 0
            method: Force evaluation method ('pairwise' or 'vectorized')

        Raises:
            ConfigurationError: If dt, G or softening is invalid
        """
        self.integrator = integrator or LeapfrogIntegrator()
        self.dt = _check_timestep(dt)
        self.force_calculator = ForceCalculator(G=G, softening=softening, method=method)
        self.diagnostics = Diagnostics.for_calculator(self.force_calculator)

        self.bodies: Optional[BodySet] = None
        self.time = 0.0
        self.step_count = 0
        self._warned_non_finite = False

        # Callbacks
        self.on_step_callback: Optional[Callable[["Simulator"], None]] = None

    @classmethod
    def from_config(cls, config: "SimulationConfig") -> "Simulator":
        """Build a simulator from a validated SimulationConfig."""
        config.validate()
        return cls(
            integrator=get_integrator(config.integrator),
            dt=config.dt,
            G=config.G,
            softening=config.softening,
            method=config.method,
        )

    @property
    def G(self) -> float:
        return self.force_calculator.G

    @property
    def softening(self) -> float:
        return self.force_calculator.softening

    def initialize(self, bodies: BodySet, center: bool = False):
        """Adopt a body set and compute its initial accelerations.

        Args:
            bodies: Body set to simulate (mutated in place by every step)
            center: If True, shift to the centre-of-mass frame first
                (COM at the origin, zero total momentum)
        """
        if center:
            bodies.shift(
                position_offset=Diagnostics.center_of_mass(bodies),
                velocity_offset=Diagnostics.center_of_mass_velocity(bodies),
            )
        self.bodies = bodies
        self.force_calculator.accelerate(bodies)
        self.time = 0.0
        self.step_count = 0
        self._warned_non_finite = False

    def _require_bodies(self) -> BodySet:
        if self.bodies is None:
            raise RuntimeError("Simulator not initialized. Call initialize() first.")
        return self.bodies

    def step(self):
        """Perform one simulation step."""
        bodies = self._require_bodies()
        if self.integrator.needs_current_accelerations and not bodies.accelerations_current:
            # State was changed outside the integrator (add/remove, scheme switch)
            self.force_calculator.accelerate(bodies)

        self.integrator.step(bodies, self.force_calculator.accelerate, self.dt)
        self.time += self.dt
        self.step_count += 1

        if not self._warned_non_finite and not Diagnostics.is_finite(bodies):
            self._warned_non_finite = True
            warnings.warn(
                f"Non-finite body state at step {self.step_count}; "
                "consider a smaller dt or a larger softening length",
                RuntimeWarning,
                stacklevel=2,
            )

        if self.on_step_callback:
            self.on_step_callback(self)

    def run(self, n_steps: int):
        """Run simulation for specified number of steps.

        Args:
            n_steps: Number of steps to run
        """
        for _ in range(n_steps):
            self.step()

    def set_timestep(self, dt: float):
        """Set time step.

        Raises:
            ConfigurationError: If dt is not > 0
        """
        self.dt = _check_timestep(dt)

    def set_integrator(self, integrator: Integrator):
        """Switch the integration scheme between steps."""
        self.integrator = integrator

    def get_state(self):
        """Get current simulation state.

        Returns:
            Tuple of (positions, velocities, masses, time, step_count); arrays are copies
        """
        bodies = self._require_bodies()
        return (
            bodies.positions.copy(),
            bodies.velocities.copy(),
            bodies.masses.copy(),
            self.time,
            self.step_count,
        )

    def center_of_mass(self) -> np.ndarray:
        return Diagnostics.center_of_mass(self._require_bodies())

    def get_energy(self) -> float:
        """Get current total energy (kinetic + softened potential)."""
        return self.diagnostics.total_energy(self._require_bodies())

    def get_kinetic_energy(self) -> float:
        return Diagnostics.kinetic_energy(self._require_bodies())

    def get_potential_energy(self) -> float:
        return self.diagnostics.potential_energy(self._require_bodies())
