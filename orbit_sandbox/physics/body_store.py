"""Body store: immutable snapshots of the simulated bodies and their trails."""

import math
from dataclasses import dataclass, field, replace as _replace
from typing import Iterator, Sequence, Tuple
import numpy as np

Point = Tuple[float, float]

DEFAULT_TAIL_LENGTH = 100


@dataclass(frozen=True)
class Body:
    """A point mass drawn as a disk.

    The radius doubles as the contact distance for the overlap guard.
    `trail` holds recent positions, oldest first.
    """
    x: float
    y: float
    vx: float
    vy: float
    mass: float
    radius: float
    color: str = "white"
    is_anchor: bool = False
    trail: Tuple[Point, ...] = field(default_factory=tuple)

    def __post_init__(self):
        if not self.mass > 0:
            raise ValueError(f"Body mass must be positive, got {self.mass}")
        if not self.radius > 0:
            raise ValueError(f"Body radius must be positive, got {self.radius}")
        if not all(math.isfinite(v) for v in (self.x, self.y, self.vx, self.vy)):
            raise ValueError(
                f"Body position/velocity must be finite, got "
                f"({self.x}, {self.y}) / ({self.vx}, {self.vy})"
            )

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def velocity(self) -> Point:
        return (self.vx, self.vy)

    def moved_to(self, position: Point, velocity: Point) -> "Body":
        """Return a copy at a new position/velocity (trail untouched)."""
        return _replace(
            self,
            x=float(position[0]), y=float(position[1]),
            vx=float(velocity[0]), vy=float(velocity[1]),
        )

    def with_trail_point(self, position: Point, tail_length: int) -> "Body":
        """Return a copy with `position` pushed onto the trail.

        The oldest entries are evicted once the trail exceeds `tail_length`.
        """
        point = (float(position[0]), float(position[1]))
        trail = (self.trail + (point,))[-tail_length:] if tail_length > 0 else ()
        return _replace(self, trail=trail)


class BodyState:
    """Ordered, immutable snapshot of every body in a run.

    Exactly one body is the anchor. Every mutating operation returns a new
    snapshot, so a reader holding a state never observes a half-applied step.
    """

    def __init__(self, bodies: Sequence[Body], tail_length: int = DEFAULT_TAIL_LENGTH):
        """Initialize snapshot.

        Args:
            bodies: Bodies in draw order; exactly one must be the anchor
            tail_length: Maximum number of trail points kept per body
        """
        if tail_length < 0:
            raise ValueError(f"tail_length must be non-negative, got {tail_length}")
        self._bodies: Tuple[Body, ...] = tuple(bodies)
        self.tail_length = int(tail_length)

        anchors = [i for i, body in enumerate(self._bodies) if body.is_anchor]
        if len(anchors) != 1:
            raise ValueError(f"Expected exactly one anchor body, found {len(anchors)}")
        self._anchor_index = anchors[0]

    @classmethod
    def reset(
        cls,
        anchor_mass: float,
        anchor_radius: float,
        center: Point,
        tail_length: int = DEFAULT_TAIL_LENGTH,
        anchor_color: str = "yellow",
    ) -> "BodyState":
        """Create a state holding only the anchor at `center`, at rest, with no trail."""
        anchor = Body(
            x=float(center[0]), y=float(center[1]), vx=0.0, vy=0.0,
            mass=anchor_mass, radius=anchor_radius,
            color=anchor_color, is_anchor=True,
        )
        return cls([anchor], tail_length=tail_length)

    def spawn(self, body: Body) -> "BodyState":
        """Append a satellite body."""
        if body.is_anchor:
            raise ValueError("Cannot spawn a second anchor body")
        return self.replace(self._bodies + (body,))

    def append_trail(self, index: int, position: Point) -> "BodyState":
        """Push `position` onto the trail of the body at `index`."""
        bodies = list(self._bodies)
        bodies[index] = bodies[index].with_trail_point(position, self.tail_length)
        return self.replace(bodies)

    def replace(self, bodies: Sequence[Body]) -> "BodyState":
        """Build a sibling snapshot with the same trail cap."""
        return BodyState(bodies, tail_length=self.tail_length)

    @property
    def bodies(self) -> Tuple[Body, ...]:
        return self._bodies

    @property
    def anchor(self) -> Body:
        return self._bodies[self._anchor_index]

    @property
    def anchor_index(self) -> int:
        return self._anchor_index

    def __len__(self) -> int:
        return len(self._bodies)

    def __iter__(self) -> Iterator[Body]:
        return iter(self._bodies)

    def __getitem__(self, index: int) -> Body:
        return self._bodies[index]

    def __repr__(self) -> str:
        return f"BodyState(n_bodies={len(self)}, tail_length={self.tail_length})"

    # Array views for the vectorized physics

    def positions(self) -> np.ndarray:
        """Positions as an (n, 2) float array."""
        return np.array([[b.x, b.y] for b in self._bodies], dtype=np.float64).reshape(-1, 2)

    def velocities(self) -> np.ndarray:
        """Velocities as an (n, 2) float array."""
        return np.array([[b.vx, b.vy] for b in self._bodies], dtype=np.float64).reshape(-1, 2)

    def masses(self) -> np.ndarray:
        return np.array([b.mass for b in self._bodies], dtype=np.float64)

    def radii(self) -> np.ndarray:
        return np.array([b.radius for b in self._bodies], dtype=np.float64)

    def anchor_mask(self) -> np.ndarray:
        """Boolean (n,) array, True only at the anchor."""
        mask = np.zeros(len(self._bodies), dtype=bool)
        mask[self._anchor_index] = True
        return mask
