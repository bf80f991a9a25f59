"""
Orbit Sandbox - a real-time gravitational n-body toy.

Features:
- One immovable anchor mass plus click-spawned satellites
- Pairwise Newtonian gravity with a contact guard
- Semi-implicit Euler integration with an adjustable time scale
- Bounded per-body trails for rendering
- matplotlib renderer, tkinter GUI and headless CLI
"""

__version__ = "0.1.0"

from orbit_sandbox.physics.body_store import Body, BodyState
from orbit_sandbox.physics.simulator import Simulator
from orbit_sandbox.utils.config import Config

__all__ = [
    "Body",
    "BodyState",
    "Simulator",
    "Config",
]
