"""Physics engine for the orbit sandbox."""

from orbit_sandbox.physics.body_store import Body, BodyState
from orbit_sandbox.physics.engine import PhysicsEngine, OrbitSeed
from orbit_sandbox.physics.simulator import Simulator

__all__ = ["Body", "BodyState", "PhysicsEngine", "OrbitSeed", "Simulator"]
