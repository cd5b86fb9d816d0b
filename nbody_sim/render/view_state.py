"""Caller-owned UI state for the interactive frame loop."""

from dataclasses import dataclass


@dataclass
class ViewState:
    """Mutable presentation state passed into the frame loop every frame.

    Attributes:
        paused: Skip physics steps while True (rendering continues)
        show_trails: Draw trails
        clear_trails: One-shot request; the loop clears trails and resets it
        target_fps: Frame pacing used by the renderer
        steps_per_frame: Physics steps taken per rendered frame
    """
    paused: bool = False
    show_trails: bool = True
    clear_trails: bool = False
    target_fps: float = 60.0
    steps_per_frame: int = 1

    def toggle_pause(self) -> None:
        self.paused = not self.paused

    def request_clear_trails(self) -> None:
        self.clear_trails = True
