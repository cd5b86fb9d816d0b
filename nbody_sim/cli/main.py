"""CLI main entry point."""

import argparse
import sys
from typing import Optional

from nbody_sim.errors import ConfigurationError
from nbody_sim.io.reporter import BatchReporter
from nbody_sim.io.state_io import save_state
from nbody_sim.physics.integrators import INTEGRATORS
from nbody_sim.physics.force_calculator import METHODS
from nbody_sim.physics.simulator import Simulator
from nbody_sim.presets import PRESETS, StarSystem, get_preset
from nbody_sim.utils.config import PROFILES, SimulationConfig, get_profile, load_config


def build_preset(config: SimulationConfig):
    """Instantiate the configured preset with the arguments it understands."""
    name = config.preset.lower()
    preset_kwargs = {}
    if name == 'random_cluster':
        preset_kwargs.update(n_bodies=config.n_bodies, seed=config.seed, dim=config.dim)
    elif name in ('star_system', 'binary'):
        preset_kwargs.update(G=config.G, softening=config.softening, dim=config.dim)
    preset_kwargs.update(config.preset_params)
    return get_preset(name, **preset_kwargs)


def build_config(args) -> SimulationConfig:
    """Resolve profile, config file and flag overrides (flags win)."""
    if args.config is not None:
        config = load_config(args.config)
    else:
        config = get_profile(args.profile)

    config = config.with_overrides(
        preset=args.preset,
        n_bodies=args.bodies,
        steps=args.steps,
        dt=args.dt,
        integrator=args.integrator,
        G=args.G,
        softening=args.softening,
        method=args.method,
        seed=args.seed,
        report_every=args.report_every,
        dim=args.dim,
        trail_length=args.trail_length,
    )
    if args.energy:
        config.show_energy = True
    if args.render:
        config.render = True
    if args.no_render:
        config.render = False
    if args.trails:
        config.show_trails = True
    return config.validate()


def run_batch(sim: Simulator, config: SimulationConfig) -> None:
    """Step the simulator and print the centre of mass every N steps."""
    reporter = BatchReporter(every=config.report_every, show_energy=config.show_energy)
    reporter.header(sim)
    reporter.attach(sim)
    sim.run(config.steps)


def run_interactive(sim: Simulator, config: SimulationConfig, preset) -> None:
    """Open a matplotlib window and advance the simulator once per frame."""
    # Imported here so batch runs never touch a GUI backend
    from nbody_sim.render import Renderer2D, TrailHistory, ViewState, run_frame_loop
    from nbody_sim.render.appearance import default_appearances

    if isinstance(preset, StarSystem):
        appearances = preset.appearances()
    else:
        appearances = default_appearances(sim.bodies.n_bodies)

    view_state = ViewState(
        show_trails=config.show_trails,
        target_fps=config.target_fps,
        steps_per_frame=config.steps_per_frame,
    )
    trails = TrailHistory(sim.bodies.n_bodies, capacity=config.trail_length)
    renderer = Renderer2D(target_fps=config.target_fps)
    frames = max(1, config.steps // config.steps_per_frame)
    try:
        run_frame_loop(sim, renderer, view_state, frames, appearances=appearances, trails=trails)
    finally:
        renderer.close()


def run_simulation(config: SimulationConfig, save_path: Optional[str] = None) -> Simulator:
    """Run a simulation described by ``config``."""
    preset = build_preset(config)
    bodies = preset.generate()

    sim = Simulator.from_config(config)
    sim.initialize(bodies)

    if config.render:
        run_interactive(sim, config, preset)
    else:
        run_batch(sim, config)

    if save_path:
        save_state(sim.bodies, save_path, metadata={
            'time': sim.time,
            'steps': sim.step_count,
            'preset': config.preset,
            'integrator': sim.integrator.name,
            'G': sim.G,
            'softening': sim.softening,
        })
        print(f"State saved to {save_path}")

    return sim


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="N-Body Simulator - softened Newtonian gravity")

    # Configuration sources
    parser.add_argument('--profile', type=str, default='batch', choices=sorted(PROFILES),
                        help='Named configuration profile (default: batch)')
    parser.add_argument('--config', type=str, default=None,
                        help='JSON or YAML config file (overrides --profile)')

    # Scenario
    parser.add_argument('--preset', type=str, default=None, choices=sorted(PRESETS),
                        help='Preset scenario')
    parser.add_argument('--bodies', type=int, default=None,
                        help='Number of bodies (random_cluster preset)')
    parser.add_argument('--dim', type=int, default=None, choices=[2, 3],
                        help='Spatial dimension')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed for reproducibility')

    # Physics
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of simulation steps')
    parser.add_argument('--dt', type=float, default=None,
                        help='Time step (> 0)')
    parser.add_argument('--integrator', type=str, default=None, choices=sorted(INTEGRATORS),
                        help='Integration scheme')
    parser.add_argument('--G', type=float, default=None,
                        help='Gravitational constant')
    parser.add_argument('--softening', type=float, default=None,
                        help='Softening length (> 0)')
    parser.add_argument('--method', type=str, default=None, choices=list(METHODS),
                        help='Force evaluation method')

    # Output
    parser.add_argument('--report-every', type=int, default=None,
                        help='Print the centre of mass every N steps')
    parser.add_argument('--energy', action='store_true',
                        help='Include total energy and drift in reports')
    parser.add_argument('--save-state', type=str, default=None,
                        help='Save final state to file (.npz or .json)')

    # Rendering
    parser.add_argument('--render', action='store_true',
                        help='Enable real-time rendering')
    parser.add_argument('--no-render', action='store_true',
                        help='Disable rendering even if the profile enables it')
    parser.add_argument('--trails', action='store_true',
                        help='Show body trails')
    parser.add_argument('--trail-length', type=int, default=None,
                        help='Maximum number of points per trail')

    # Info
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')
    return parser


def main(argv=None):
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in sorted(PRESETS):
            print(f"  - {name}")
        return 0

    try:
        config = build_config(args)
        run_simulation(config, save_path=args.save_state)
    except ConfigurationError as exc:
        print(f"Configuration error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == '__main__':
    sys.exit(main())
