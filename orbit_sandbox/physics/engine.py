"""Physics engine: advances a BodyState by one tick and seeds new orbits."""

import colorsys
import math
from typing import NamedTuple, Optional, Tuple
import numpy as np
from orbit_sandbox.physics.body_store import Body, BodyState, Point
from orbit_sandbox.physics.force_calculator import ForceCalculator
from orbit_sandbox.physics.integrators.base import Integrator
from orbit_sandbox.physics.integrators.semi_implicit_euler import SemiImplicitEulerIntegrator


class OrbitSeed(NamedTuple):
    """Initial conditions for a newly spawned satellite."""
    velocity: Point
    mass: float
    radius: float
    color: str


def hue_to_hex(hue: float) -> str:
    """Fully saturated, mid-lightness colour for `hue` in degrees, as '#rrggbb'."""
    r, g, b = colorsys.hls_to_rgb((hue % 360.0) / 360.0, 0.5, 1.0)
    return "#{:02x}{:02x}{:02x}".format(round(r * 255), round(g * 255), round(b * 255))


class PhysicsEngine:
    """Gravitational engine around a single immovable anchor.

    Satellites feel every other body (anchor included). The anchor's own
    acceleration is never applied: it keeps its position and velocity and only
    accrues trail points.
    """

    G = 100.0  # Tuned for pleasant orbital periods at pixel scale, not SI

    def __init__(
        self,
        G: float = None,
        force_calculator: Optional[ForceCalculator] = None,
        integrator: Optional[Integrator] = None,
        orbit_speed_factor: float = 0.8,
        mass_range: Tuple[float, float] = (1.0, 10.0),
        radius_range: Tuple[float, float] = (3.0, 8.0),
    ):
        """Initialize engine.

        Args:
            G: Gravitational constant (class default if None)
            force_calculator: Pairwise force law (vectorized by default)
            integrator: Time integrator (semi-implicit Euler by default)
            orbit_speed_factor: Fraction of circular speed given to new bodies
            mass_range: [low, high) range for satellite masses
            radius_range: [low, high) range for satellite radii
        """
        if G is not None:
            self.G = float(G)
        self.force_calculator = force_calculator or ForceCalculator()
        self.integrator = integrator or SemiImplicitEulerIntegrator()
        self.orbit_speed_factor = orbit_speed_factor
        self.mass_range = mass_range
        self.radius_range = radius_range

    def compute_accelerations(self, state: BodyState) -> np.ndarray:
        """Accelerations of every body in `state`, shape (n, 2)."""
        return self.force_calculator.compute_accelerations(
            state.positions(), state.masses(), state.radii(), self.G
        )

    def step(self, state: BodyState, dt: float) -> BodyState:
        """Advance every satellite by `dt` and record one trail point per body.

        Args:
            state: Current snapshot
            dt: Effective time step (base step times time scale)

        Returns:
            A new snapshot; `state` is left untouched
        """
        positions = state.positions()
        velocities = state.velocities()
        accelerations = self.compute_accelerations(state)

        new_positions, new_velocities = self.integrator.step(
            positions, velocities, accelerations, dt
        )

        # Anchor is exempt from integration
        anchor = state.anchor_mask()
        new_positions[anchor] = positions[anchor]
        new_velocities[anchor] = velocities[anchor]

        bodies = []
        for i, body in enumerate(state):
            if not body.is_anchor:
                body = body.moved_to(new_positions[i], new_velocities[i])
            bodies.append(body.with_trail_point(body.position, state.tail_length))

        return state.replace(bodies)

    def seed_orbit(
        self,
        anchor: Body,
        click_position: Point,
        rng: np.random.Generator,
    ) -> Optional[OrbitSeed]:
        """Initial conditions for an approximately circular orbit around `anchor`.

        The velocity is tangential (radius vector rotated by +90 degrees) with
        `orbit_speed_factor` times the circular speed sqrt(G*M/d). Mass,
        radius and colour are drawn from `rng`.

        Returns:
            OrbitSeed, or None when the click sits exactly on the anchor's
            center (speed undefined) or the speed is not finite
        """
        dx = float(click_position[0]) - anchor.x
        dy = float(click_position[1]) - anchor.y
        distance = math.hypot(dx, dy)
        if distance == 0.0:
            return None

        speed = math.sqrt(self.G * anchor.mass / distance) * self.orbit_speed_factor
        if not math.isfinite(speed):
            return None

        angle = math.atan2(dy, dx) + math.pi / 2
        velocity = (speed * math.cos(angle), speed * math.sin(angle))

        mass = float(rng.uniform(*self.mass_range))
        radius = float(rng.uniform(*self.radius_range))
        color = hue_to_hex(float(rng.uniform(0.0, 360.0)))

        return OrbitSeed(velocity=velocity, mass=mass, radius=radius, color=color)
