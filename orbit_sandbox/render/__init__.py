"""Rendering for the orbit sandbox."""

from orbit_sandbox.render.base import Renderer
from orbit_sandbox.render.renderer_2d import Renderer2D

__all__ = ["Renderer", "Renderer2D"]
