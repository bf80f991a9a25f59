"""Simulation controller: the interface used by drivers (CLI, GUI, tests)."""

import warnings
from typing import Optional
import numpy as np
from orbit_sandbox.physics.body_store import Body, BodyState
from orbit_sandbox.physics.engine import PhysicsEngine
from orbit_sandbox.physics.force_calculator import ForceCalculator
from orbit_sandbox.utils.config import Config
from orbit_sandbox.utils.reproducibility import make_rng


class Simulator:
    """Main simulation controller.

    Holds configuration, the physics engine and the injected random source,
    but never the body state: every operation takes a BodyState and returns
    the next one. Running/paused, the current time scale and the viewport
    belong to the driver.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        rng: Optional[np.random.Generator] = None,
        engine: Optional[PhysicsEngine] = None,
    ):
        """Initialize simulator.

        Args:
            config: Simulation configuration (defaults if None)
            rng: Random source for spawned bodies (seeded from config.seed if None)
            engine: Physics engine (built from config if None)
        """
        self.config = config or Config()
        self.rng = rng if rng is not None else make_rng(self.config.seed)
        self.engine = engine or PhysicsEngine(
            G=self.config.G,
            force_calculator=ForceCalculator(method=self.config.force_method),
            orbit_speed_factor=self.config.orbit_speed_factor,
            mass_range=self.config.mass_range,
            radius_range=self.config.radius_range,
        )

    def initialize(self, width: float, height: float) -> BodyState:
        """Create the initial state: the anchor alone at the viewport center.

        Args:
            width: Viewport width
            height: Viewport height
        """
        return BodyState.reset(
            anchor_mass=self.config.anchor_mass,
            anchor_radius=self.config.anchor_radius,
            center=(width / 2, height / 2),
            tail_length=self.config.tail_length,
            anchor_color=self.config.anchor_color,
        )

    def reset(self, width: float, height: float) -> BodyState:
        """Discard every body and start over with the anchor alone."""
        return self.initialize(width, height)

    def step(self, state: BodyState, time_scale: float = 1.0) -> BodyState:
        """Advance `state` by one tick of `base_time_step * time_scale`.

        Args:
            state: Current snapshot
            time_scale: Multiplier on the base time step

        Returns:
            Next snapshot
        """
        dt = self.config.base_time_step * time_scale
        return self.engine.step(state, dt)

    def run_steps(self, state: BodyState, k: int, time_scale: float = 1.0) -> BodyState:
        """Run k steps and return the final snapshot."""
        for _ in range(k):
            state = self.step(state, time_scale)
        return state

    def spawn_at(self, state: BodyState, click_x: float, click_y: float) -> BodyState:
        """Add a satellite at the click point on a near-circular orbit around the anchor.

        Returns `state` itself (unchanged) when the spawn is rejected: the
        click is exactly on the anchor's center, or `max_bodies` is reached.
        """
        max_bodies = self.config.max_bodies
        if max_bodies is not None and len(state) >= max_bodies:
            warnings.warn(
                f"Body limit reached ({max_bodies}); spawn at ({click_x}, {click_y}) ignored.",
                UserWarning
            )
            return state

        seed = self.engine.seed_orbit(state.anchor, (click_x, click_y), self.rng)
        if seed is None:
            warnings.warn(
                f"Cannot seed an orbit at ({click_x}, {click_y}): point coincides with the anchor.",
                UserWarning
            )
            return state

        body = Body(
            x=float(click_x), y=float(click_y),
            vx=seed.velocity[0], vy=seed.velocity[1],
            mass=seed.mass, radius=seed.radius, color=seed.color,
        )
        return state.spawn(body)

    def clamp_time_scale(self, value: float) -> float:
        """Clamp a time scale into the configured slider range."""
        return float(np.clip(value, self.config.min_time_scale, self.config.max_time_scale))
