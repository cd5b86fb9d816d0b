"""2D renderer using matplotlib."""

from typing import List, Optional, Sequence, Tuple
import time
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from nbody_sim.render.appearance import BodyAppearance, DecorativeBody, default_appearances
from nbody_sim.render.trails import TrailHistory


class Renderer2D:
    """2D renderer drawing bodies and their trails with matplotlib.

    Only the x and y components of 3D positions are drawn. The renderer
    reads positions; it never modifies the body set.
    """

    def __init__(
        self,
        figsize: Tuple[int, int] = (10, 10),
        dpi: int = 100,
        target_fps: float = 60.0,
        interactive: bool = True,
        background: str = "black",
        title: str = "N-Body Simulation",
    ):
        """Initialize 2D renderer.

        Args:
            figsize: Figure size (width, height)
            dpi: Dots per inch
            target_fps: Frames faster than this are skipped
            interactive: Show a window and pump its event loop; False for
                off-screen rendering (frame capture, tests)
            background: Axes background color
            title: Axes title
        """
        self.figsize = figsize
        self.dpi = dpi
        self.interactive = interactive
        self.background = background
        self.title = title

        self.fig: Optional[Figure] = None
        self.ax = None
        self.initialized = False
        # Set once the user closes the window; no new figure is opened afterwards
        self.closed = False

        # Frame rate limiting
        self.frame_time = 1.0 / target_fps if target_fps > 0 else 0.0
        self.last_render_time = 0.0

    def _initialize(self):
        """Initialize plot if not already done."""
        if self.initialized:
            return
        self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
        self.fig.patch.set_facecolor(self.background)
        if self.interactive:
            plt.show(block=False)
        self.initialized = True

    def _is_figure_open(self) -> bool:
        """Check if the figure window is still open."""
        if self.fig is None:
            return False
        if not plt.fignum_exists(self.fig.number):
            self.initialized = False
            self.closed = True
            self.fig = None
            self.ax = None
            return False
        return True

    @property
    def window_closed(self) -> bool:
        """True once the figure window was closed by the user."""
        if not self.closed and self.initialized:
            self._is_figure_open()
        return self.closed

    def _set_limits(self, pos_2d: np.ndarray, margin: float = 0.15):
        x_min, x_max = pos_2d[:, 0].min(), pos_2d[:, 0].max()
        y_min, y_max = pos_2d[:, 1].min(), pos_2d[:, 1].max()
        max_range = max(x_max - x_min, y_max - y_min, 10.0) * (1 + margin)
        x_center = (x_max + x_min) / 2
        y_center = (y_max + y_min) / 2
        self.ax.set_xlim(x_center - max_range / 2, x_center + max_range / 2)
        self.ax.set_ylim(y_center - max_range / 2, y_center + max_range / 2)

    def render(
        self,
        positions: np.ndarray,
        appearances: Optional[Sequence[BodyAppearance]] = None,
        trails: Optional[TrailHistory] = None,
        decorations: Optional[List[DecorativeBody]] = None,
        force: bool = False,
    ) -> bool:
        """Render one frame.

        Args:
            positions: Body positions (n, 2) or (n, 3)
            appearances: One BodyAppearance per body (default: uniform dots)
            trails: Trail history to draw, if any
            decorations: Decorative bodies drawn on top of the physical ones
            force: Ignore frame rate limiting

        Returns:
            True if a frame was drawn, False if it was skipped
        """
        # Stop rendering once the user closed the window
        if self.window_closed:
            return False

        current_time = time.time()
        if not force and self.initialized and (current_time - self.last_render_time) < self.frame_time:
            return False
        self.last_render_time = current_time
        self._initialize()

        pos_2d = np.asarray(positions)[:, :2]
        if appearances is None:
            appearances = default_appearances(len(pos_2d))

        self.ax.clear()
        self.ax.set_facecolor(self.background)
        self.ax.set_aspect('equal')
        self.ax.set_title(self.title)
        self.ax.set_xticks([])
        self.ax.set_yticks([])

        if trails is not None:
            for appearance, buffer in zip(appearances, trails.buffers):
                if not appearance.show_trail or len(buffer) < 2:
                    continue
                trail = buffer.as_array()
                self.ax.plot(trail[:, 0], trail[:, 1], '-', color=appearance.color, alpha=0.3, linewidth=0.8)

        colors = [a.color for a in appearances]
        sizes = np.array([a.radius for a in appearances], dtype=float) ** 2
        self.ax.scatter(pos_2d[:, 0], pos_2d[:, 1], c=colors, s=sizes, zorder=3)

        if decorations:
            deco_pos = np.array([d.position for d in decorations])
            self.ax.scatter(
                deco_pos[:, 0], deco_pos[:, 1],
                c=[d.appearance.color for d in decorations],
                s=np.array([d.appearance.radius for d in decorations], dtype=float) ** 2,
                zorder=2,
            )
            pos_2d = np.vstack([pos_2d, deco_pos])

        self._set_limits(pos_2d)

        if self.interactive:
            self.fig.canvas.draw_idle()
            plt.pause(0.001)
        else:
            self.fig.canvas.draw()
        return True

    def capture_frame(self) -> np.ndarray:
        """Capture current frame as an (H, W, 3) uint8 array."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.canvas.draw()
        rgba = np.asarray(self.fig.canvas.buffer_rgba())
        return rgba[:, :, :3].copy()

    def close(self):
        """Close the renderer."""
        if self.fig is not None:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
            self.initialized = False
