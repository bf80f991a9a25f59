"""Pairwise gravitational accelerations with a contact (overlap) guard.

A pair (i, j) only attracts while the distance between centers is strictly
greater than r_i + r_j. Inside that distance the contribution is dropped,
not clamped or softened, so touching bodies simply stop pulling on each
other. Direct summation, O(N^2) per call.
"""

from typing import Literal
import numpy as np


class ForceCalculator:
    """Computes the acceleration of every body due to all others."""

    METHODS = ("vectorized", "direct")

    def __init__(self, method: Literal["vectorized", "direct"] = "vectorized"):
        if method not in self.METHODS:
            raise ValueError(f"Unknown force method '{method}'. Available: {list(self.METHODS)}")
        self.method = method

    def compute_accelerations(
        self,
        positions: np.ndarray,
        masses: np.ndarray,
        radii: np.ndarray,
        G: float,
    ) -> np.ndarray:
        """Compute gravitational accelerations.

        Args:
            positions: (n, 2) positions
            masses: (n,) masses, all positive
            radii: (n,) radii used by the overlap guard
            G: Gravitational constant

        Returns:
            (n, 2) accelerations
        """
        positions = np.asarray(positions, dtype=np.float64).reshape(-1, 2)
        masses = np.asarray(masses, dtype=np.float64).reshape(-1)
        radii = np.asarray(radii, dtype=np.float64).reshape(-1)

        if positions.shape[0] < 2:
            return np.zeros_like(positions)

        if self.method == "direct":
            return self._compute_direct(positions, masses, radii, G)
        return self._compute_vectorized(positions, masses, radii, G)

    def _compute_vectorized(self, positions, masses, radii, G) -> np.ndarray:
        n = positions.shape[0]
        # r_diff[i, j] = p_j - p_i
        r_diff = positions[np.newaxis, :, :] - positions[:, np.newaxis, :]
        distance = np.sqrt(np.sum(r_diff ** 2, axis=2))

        contact = radii[:, np.newaxis] + radii[np.newaxis, :]
        interacting = distance > contact
        interacting[np.arange(n), np.arange(n)] = False

        # Excluded pairs get a dummy distance so nothing divides by zero
        safe_distance = np.where(interacting, distance, 1.0)

        m_i = masses[:, np.newaxis]
        m_j = masses[np.newaxis, :]
        force_magnitude = np.where(interacting, G * m_i * m_j / safe_distance ** 2, 0.0)

        scale = force_magnitude / (safe_distance * m_i)
        return np.sum(scale[:, :, np.newaxis] * r_diff, axis=1)

    def _compute_direct(self, positions, masses, radii, G) -> np.ndarray:
        """Loop-based reference implementation."""
        n = positions.shape[0]
        accelerations = np.zeros((n, 2))

        for i in range(n):
            ax = 0.0
            ay = 0.0
            for j in range(n):
                if i == j:
                    continue
                dx = positions[j, 0] - positions[i, 0]
                dy = positions[j, 1] - positions[i, 1]
                distance = np.hypot(dx, dy)

                if distance > radii[i] + radii[j]:
                    force = G * masses[i] * masses[j] / (distance * distance)
                    ax += force * dx / (distance * masses[i])
                    ay += force * dy / (distance * masses[i])
            accelerations[i] = (ax, ay)

        return accelerations
