"""Tests for the matplotlib renderer."""

import pytest
from matplotlib.figure import Figure
from orbit_sandbox.physics.simulator import Simulator
from orbit_sandbox.render.renderer_2d import Renderer2D
from orbit_sandbox.utils.config import Config


def _running_state(steps=3):
    sim = Simulator(Config(seed=12))
    state = sim.initialize(800, 600)
    state = sim.spawn_at(state, 500.0, 300.0)
    state = sim.spawn_at(state, 400.0, 120.0)
    return sim.run_steps(state, steps)


def test_render_draws_trails_and_disks():
    """One disk per body, one trail line per body with more than one trail point."""
    ax = Figure().add_subplot(111)
    renderer = Renderer2D(ax=ax, width=800, height=600)

    state = _running_state(steps=3)
    renderer.render(state)

    assert len(ax.patches) == len(state)
    assert len(ax.lines) == len(state)
    assert ax.get_xlim() == (0.0, 800.0)
    # Screen coordinates: y grows downward
    assert ax.get_ylim() == (600.0, 0.0)
    for line, body in zip(ax.lines, state):
        assert len(line.get_xdata()) == len(body.trail)
        assert line.get_alpha() == 0.25


def test_render_skips_single_point_trails():
    ax = Figure().add_subplot(111)
    renderer = Renderer2D(ax=ax)

    renderer.render(_running_state(steps=1))

    assert len(ax.lines) == 0
    assert len(ax.patches) == 3


def test_viewport_follows_resize():
    ax = Figure().add_subplot(111)
    renderer = Renderer2D(ax=ax)
    renderer.set_viewport(1024, 512)
    renderer.render(_running_state())
    assert ax.get_xlim() == (0.0, 1024.0)
    assert ax.get_ylim() == (512.0, 0.0)


def test_save_frame(tmp_path):
    """Frames can be written once something has been rendered."""
    renderer = Renderer2D(interactive=False)
    with pytest.raises(RuntimeError):
        renderer.save_frame(str(tmp_path / "early.png"))

    renderer.render(_running_state())
    output = tmp_path / "frame.png"
    renderer.save_frame(str(output))
    renderer.close()

    assert output.exists()
    assert output.stat().st_size > 0
    assert renderer.fig is None


def test_close_keeps_borrowed_axes():
    """Embedded renderers never close the caller's figure."""
    ax = Figure().add_subplot(111)
    renderer = Renderer2D(ax=ax)
    renderer.close()
    assert renderer.ax is ax
