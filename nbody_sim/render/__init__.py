"""Presentation layer: appearance metadata, trails, view state and drawing."""

from nbody_sim.render.appearance import BodyAppearance, CircularOrbitMotion, DecorativeBody
from nbody_sim.render.trails import TrailBuffer, TrailHistory
from nbody_sim.render.view_state import ViewState
from nbody_sim.render.renderer_2d import Renderer2D
from nbody_sim.render.loop import run_frame_loop

__all__ = [
    "BodyAppearance",
    "CircularOrbitMotion",
    "DecorativeBody",
    "TrailBuffer",
    "TrailHistory",
    "ViewState",
    "Renderer2D",
    "run_frame_loop",
]
