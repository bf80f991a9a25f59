"""Tests for the body store."""

import numpy as np
import pytest
from orbit_sandbox.physics.body_store import Body, BodyState


def _satellite(x=100.0, y=0.0, **kwargs):
    params = dict(x=x, y=y, vx=0.0, vy=1.0, mass=2.0, radius=4.0, color="#ff0000")
    params.update(kwargs)
    return Body(**params)


def test_reset_creates_single_anchor():
    """Reset yields the anchor alone, at rest, with an empty trail."""
    state = BodyState.reset(anchor_mass=1000.0, anchor_radius=15.0, center=(400.0, 300.0))

    assert len(state) == 1
    anchor = state.anchor
    assert anchor.is_anchor
    assert anchor.position == (400.0, 300.0)
    assert anchor.velocity == (0.0, 0.0)
    assert anchor.mass == 1000.0
    assert anchor.radius == 15.0
    assert anchor.color == "yellow"
    assert anchor.trail == ()
    assert state.tail_length == 100


def test_spawn_appends_without_mutating():
    """Spawning returns a new snapshot and leaves the old one alone."""
    state = BodyState.reset(1000.0, 15.0, (0.0, 0.0))
    new_state = state.spawn(_satellite())

    assert len(state) == 1
    assert len(new_state) == 2
    assert new_state[1].position == (100.0, 0.0)
    assert new_state.anchor_index == 0


def test_spawn_rejects_second_anchor():
    """Exactly one anchor per state."""
    state = BodyState.reset(1000.0, 15.0, (0.0, 0.0))
    with pytest.raises(ValueError):
        state.spawn(_satellite(is_anchor=True))


def test_state_requires_exactly_one_anchor():
    """States with zero or two anchors are rejected."""
    with pytest.raises(ValueError):
        BodyState([_satellite()])

    anchor = Body(0.0, 0.0, 0.0, 0.0, mass=10.0, radius=1.0, is_anchor=True)
    with pytest.raises(ValueError):
        BodyState([anchor, anchor])


def test_body_validation():
    """Mass and radius must be positive, coordinates finite."""
    with pytest.raises(ValueError):
        _satellite(mass=0.0)
    with pytest.raises(ValueError):
        _satellite(radius=-1.0)
    with pytest.raises(ValueError):
        _satellite(vx=float("nan"))
    with pytest.raises(ValueError):
        _satellite(x=float("inf"))


def test_append_trail_evicts_oldest():
    """Trail keeps only the most recent tail_length points, oldest first."""
    state = BodyState.reset(1000.0, 15.0, (0.0, 0.0), tail_length=3)
    state = state.spawn(_satellite())

    for k in range(5):
        state = state.append_trail(1, (float(k), float(-k)))

    assert state[1].trail == ((2.0, -2.0), (3.0, -3.0), (4.0, -4.0))
    # Other bodies untouched
    assert state.anchor.trail == ()


def test_array_views():
    """Array accessors line up with body order."""
    state = BodyState.reset(1000.0, 15.0, (1.0, 2.0))
    state = state.spawn(_satellite(x=5.0, y=6.0, vx=-1.0, vy=3.0))

    assert np.allclose(state.positions(), [[1.0, 2.0], [5.0, 6.0]])
    assert np.allclose(state.velocities(), [[0.0, 0.0], [-1.0, 3.0]])
    assert np.allclose(state.masses(), [1000.0, 2.0])
    assert np.allclose(state.radii(), [15.0, 4.0])
    assert state.anchor_mask().tolist() == [True, False]
