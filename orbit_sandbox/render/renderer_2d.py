"""2D renderer using matplotlib."""

import matplotlib.pyplot as plt
from matplotlib.axes import Axes
from matplotlib.figure import Figure
from matplotlib.patches import Circle
from typing import Optional, Tuple
from orbit_sandbox.physics.body_store import BodyState
from orbit_sandbox.render.base import Renderer


class Renderer2D(Renderer):
    """Draws faded trails and filled disks in screen coordinates.

    The y axis points down, matching click coordinates from a canvas.
    Either draws into a caller-owned Axes (GUI embedding) or opens its own
    pyplot window on the first frame.
    """

    def __init__(
        self,
        ax: Optional[Axes] = None,
        width: float = 800,
        height: float = 600,
        figsize: Tuple[int, int] = (8, 6),
        dpi: int = 100,
        trail_alpha: float = 0.25,
        trail_width: float = 2.0,
        background: str = "#111827",
        interactive: bool = True
    ):
        """Initialize 2D renderer.

        Args:
            ax: Existing axes to draw into; a pyplot figure is created if None
            width: Viewport width
            height: Viewport height
            figsize: Figure size when the renderer owns the window
            dpi: Dots per inch
            trail_alpha: Opacity of trail lines
            trail_width: Trail line width in points
            background: Axes face colour
            interactive: Show (and keep pumping) the window it opens itself
        """
        self.ax = ax
        self.fig: Optional[Figure] = ax.figure if ax is not None else None
        self.owns_figure = ax is None
        self.width = width
        self.height = height
        self.figsize = figsize
        self.dpi = dpi
        self.trail_alpha = trail_alpha
        self.trail_width = trail_width
        self.background = background
        self.interactive = interactive

    def set_viewport(self, width: float, height: float):
        """Change the visible region (0, width) x (0, height)."""
        self.width = width
        self.height = height

    def _initialize(self):
        """Open a pyplot window if the renderer has no axes yet."""
        if self.ax is None:
            self.fig, self.ax = plt.subplots(figsize=self.figsize, dpi=self.dpi)
            self.fig.canvas.manager.set_window_title('Orbit Sandbox')
            if self.interactive:
                # Show the window (non-blocking)
                plt.show(block=False)
                plt.pause(0.1)

    def _style_axes(self):
        self.ax.set_facecolor(self.background)
        self.ax.set_xlim(0, self.width)
        self.ax.set_ylim(self.height, 0)
        self.ax.set_aspect('equal')
        self.ax.set_xticks([])
        self.ax.set_yticks([])

    def render(self, state: BodyState):
        """Render current frame."""
        self._initialize()

        self.ax.clear()
        self._style_axes()

        for body in state:
            if len(body.trail) > 1:
                xs = [p[0] for p in body.trail]
                ys = [p[1] for p in body.trail]
                self.ax.plot(xs, ys, '-', color=body.color,
                             alpha=self.trail_alpha, linewidth=self.trail_width)

        for body in state:
            self.ax.add_patch(Circle(body.position, body.radius, color=body.color))

        self.fig.canvas.draw_idle()
        if self.owns_figure and self.interactive:
            plt.pause(0.001)

    def save_frame(self, output_path: str):
        """Save the current frame (PNG, SVG, ... by extension)."""
        if self.fig is None:
            raise RuntimeError("Renderer not initialized. Call render() first.")
        self.fig.savefig(output_path, facecolor=self.background)

    def clear(self):
        """Clear the renderer."""
        if self.ax is not None:
            self.ax.clear()

    def close(self):
        """Close the renderer (only closes windows it opened itself)."""
        if self.fig is not None and self.owns_figure:
            plt.close(self.fig)
            self.fig = None
            self.ax = None
