"""Numerical integrators for the orbit sandbox."""

from orbit_sandbox.physics.integrators.base import Integrator
from orbit_sandbox.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator

__all__ = ["Integrator", "SemiImplicitEulerIntegrator"]
