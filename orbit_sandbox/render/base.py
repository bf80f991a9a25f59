"""Base renderer interface."""

from abc import ABC, abstractmethod
from orbit_sandbox.physics.body_store import BodyState


class Renderer(ABC):
    """Abstract base class for renderers."""

    @abstractmethod
    def render(self, state: BodyState):
        """Render one completed snapshot.

        Args:
            state: Bodies to draw (trails first, then disks)
        """
        pass

    @abstractmethod
    def save_frame(self, output_path: str):
        """Write the current frame to an image file."""
        pass

    @abstractmethod
    def clear(self):
        """Clear the renderer."""
        pass

    @abstractmethod
    def close(self):
        """Close the renderer."""
        pass
