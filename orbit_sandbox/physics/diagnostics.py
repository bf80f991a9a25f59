"""Read-only diagnostics for reporting on a running simulation."""

import numpy as np
from orbit_sandbox.physics.body_store import BodyState


def compute_kinetic_energy(state: BodyState) -> float:
    """Total kinetic energy of the satellites: 0.5 * sum(m_i * v_i^2).

    The anchor is at rest by construction and contributes nothing.
    """
    v_sq = np.sum(np.square(state.velocities()), axis=1)
    return float(0.5 * np.sum(state.masses() * v_sq))


def compute_angular_momentum(state: BodyState) -> float:
    """Total angular momentum L_z of the satellites about the anchor.

    L_z = sum(m_i * (x_i * v_y_i - y_i * v_x_i)) in anchor-relative coordinates.
    Positive values mean clockwise motion on screen (y axis points down).
    """
    relative = state.positions() - np.asarray(state.anchor.position)
    velocities = state.velocities()
    L_z = np.sum(state.masses() * (relative[:, 0] * velocities[:, 1] -
                                   relative[:, 1] * velocities[:, 0]))
    return float(L_z)
