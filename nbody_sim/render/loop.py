"""Real-time frame loop: one physics step per frame, then draw."""

from typing import List, Optional, Sequence

from nbody_sim.physics.simulator import Simulator
from nbody_sim.render.appearance import BodyAppearance, DecorativeBody
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.trails import TrailHistory
from nbody_sim.render.view_state import ViewState


def run_frame_loop(
    sim: Simulator,
    renderer: Renderer2D,
    view_state: ViewState,
    frames: int,
    appearances: Optional[Sequence[BodyAppearance]] = None,
    trails: Optional[TrailHistory] = None,
    decorations: Optional[List[DecorativeBody]] = None,
) -> int:
    """Drive the simulator from a presentation loop.

    Each frame: apply one-shot view requests, advance the simulator by
    ``view_state.steps_per_frame`` steps unless paused, record trails,
    render. The view state is read every frame, so callers may change it
    between frames (e.g. from a key handler or an ``on_step_callback``).

    Args:
        sim: Initialized simulator
        renderer: Renderer to draw with
        view_state: Caller-owned UI state
        frames: Number of frames to run
        appearances: Presentation metadata per body
        trails: Trail history updated after every frame's steps
        decorations: Decorative bodies advanced with the frame time step

    Returns:
        Number of physics steps taken (the loop ends early once the
        renderer window is closed)
    """
    steps = 0
    for _ in range(frames):
        if renderer.window_closed:
            break

        if view_state.clear_trails:
            if trails is not None:
                trails.clear()
            view_state.clear_trails = False

        if not view_state.paused:
            for _ in range(view_state.steps_per_frame):
                sim.step()
                steps += 1
            if decorations:
                for decoration in decorations:
                    decoration.update(sim.dt * view_state.steps_per_frame)
            if trails is not None:
                trails.record(sim.bodies.positions)

        renderer.render(
            sim.bodies.positions,
            appearances=appearances,
            trails=trails if view_state.show_trails else None,
            decorations=decorations,
        )
    return steps
