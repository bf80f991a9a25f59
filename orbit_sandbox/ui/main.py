"""GUI application using tkinter."""

import tkinter as tk
from tkinter import ttk
from typing import Optional
from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from orbit_sandbox.physics.body_store import BodyState
from orbit_sandbox.physics.simulator import Simulator
from orbit_sandbox.render.renderer_2d import Renderer2D
from orbit_sandbox.utils.config import Config

FRAME_INTERVAL_MS = 16


class OrbitSandboxGUI:
    """Main GUI application.

    Owns the driving loop: while running it calls Simulator.step once per
    tick and hands the finished snapshot to the renderer.
    """

    def __init__(self, root, config: Optional[Config] = None):
        self.root = root
        self.root.title("N-Body Gravity Simulation")

        self.simulator = Simulator(config)
        self.width = self.simulator.config.width
        self.height = self.simulator.config.height
        self.state: BodyState = self.simulator.initialize(self.width, self.height)
        self.running = False

        self._create_widgets()
        self._setup_layout()
        self._draw()
        self.root.after(FRAME_INTERVAL_MS, self._tick)

    def _create_widgets(self):
        """Create GUI widgets."""
        self.canvas_frame = ttk.Frame(self.root, padding=10)

        dpi = 100
        self.figure = Figure(figsize=(self.width / dpi, self.height / dpi), dpi=dpi)
        self.figure.subplots_adjust(left=0, right=1, top=1, bottom=0)
        ax = self.figure.add_subplot(111)
        self.renderer = Renderer2D(ax=ax, width=self.width, height=self.height)

        self.canvas = FigureCanvasTkAgg(self.figure, master=self.canvas_frame)
        self.canvas.mpl_connect('button_press_event', self._on_click)
        # add='+' keeps matplotlib's own resize binding
        self.canvas.get_tk_widget().bind('<Configure>', self._on_resize, add='+')

        self.control_frame = ttk.Frame(self.root, padding=10)

        self.play_button = ttk.Button(self.control_frame, text="Start", command=self.toggle_play)
        self.play_button.grid(row=0, column=0, padx=5)

        self.reset_button = ttk.Button(self.control_frame, text="Reset", command=self.reset)
        self.reset_button.grid(row=0, column=1, padx=5)

        config = self.simulator.config
        self.time_scale_var = tk.DoubleVar(value=config.time_scale)
        self.time_scale_label = ttk.Label(self.control_frame)
        self.time_scale_label.grid(row=1, column=0, columnspan=2, pady=(10, 0))
        time_scale = ttk.Scale(self.control_frame, from_=config.min_time_scale,
                               to=config.max_time_scale, variable=self.time_scale_var,
                               orient='horizontal', length=240,
                               command=self._on_time_scale)
        time_scale.grid(row=2, column=0, columnspan=2)
        self._on_time_scale(config.time_scale)

        ttk.Label(self.control_frame, text="Click on the canvas to add new bodies").grid(
            row=3, column=0, columnspan=2, pady=(10, 0))
        self.count_label = ttk.Label(self.control_frame, text="Bodies: 1")
        self.count_label.grid(row=4, column=0, columnspan=2)

    def _setup_layout(self):
        """Setup window layout."""
        self.canvas_frame.pack(side='top', fill='both', expand=True)
        self.canvas.get_tk_widget().pack(fill='both', expand=True)
        self.control_frame.pack(side='top')

    def _on_time_scale(self, value):
        # Snap to the slider's 0.1 steps
        scale = self.simulator.clamp_time_scale(round(float(value), 1))
        self.time_scale_var.set(scale)
        self.time_scale_label.config(text=f"Time Scale: {scale:.2f}x")

    def _on_click(self, event):
        """Spawn a body at the clicked point (axes data coords == simulation coords)."""
        if event.inaxes is None or event.xdata is None:
            return
        self.state = self.simulator.spawn_at(self.state, event.xdata, event.ydata)
        self._draw()

    def _on_resize(self, event):
        """A new viewport restarts the run with the anchor at its center."""
        if event.width <= 1 or event.height <= 1:
            return
        if (event.width, event.height) == (self.width, self.height):
            return
        self.width, self.height = event.width, event.height
        self.renderer.set_viewport(self.width, self.height)
        self.state = self.simulator.reset(self.width, self.height)
        self._draw()

    def toggle_play(self):
        """Toggle play/pause."""
        self.running = not self.running
        self.play_button.config(text="Pause" if self.running else "Start")

    def reset(self):
        """Back to the anchor alone, paused, at the default time scale."""
        self.state = self.simulator.reset(self.width, self.height)
        self.running = False
        self.play_button.config(text="Start")
        self.time_scale_var.set(self.simulator.config.time_scale)
        self._on_time_scale(self.simulator.config.time_scale)
        self._draw()

    def _tick(self):
        """One display refresh: step if running, then draw."""
        if self.running:
            self.state = self.simulator.step(self.state, self.time_scale_var.get())
            self._draw()
        self.root.after(FRAME_INTERVAL_MS, self._tick)

    def _draw(self):
        self.renderer.render(self.state)
        self.canvas.draw_idle()
        self.count_label.config(text=f"Bodies: {len(self.state)}")


def run_gui():
    """Run GUI application."""
    root = tk.Tk()
    app = OrbitSandboxGUI(root)
    root.mainloop()


if __name__ == '__main__':
    run_gui()
