"""Semi-implicit (symplectic) Euler integrator."""

from typing import Tuple
import numpy as np
from orbit_sandbox.physics.integrators.base import Integrator


class SemiImplicitEulerIntegrator(Integrator):
    """Semi-implicit Euler: the velocity is updated first and the position
    advances with the new velocity.

    First order, one force evaluation per step.
    """

    @property
    def name(self) -> str:
        return "semi_implicit_euler"

    @property
    def order(self) -> int:
        return 1

    def step(self, positions, velocities, accelerations, dt: float) -> Tuple:
        """v_new = v + a*dt, r_new = r + v_new*dt."""
        positions = np.asarray(positions, dtype=np.float64)
        velocities = np.asarray(velocities, dtype=np.float64)
        accelerations = np.asarray(accelerations, dtype=np.float64)

        new_velocities = velocities + accelerations * dt
        new_positions = positions + new_velocities * dt

        return new_positions, new_velocities
