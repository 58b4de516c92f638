"""Pygame viewer for polyraster."""

from .window import PolygonWindow, WindowConfig, WindowDisplay

__all__ = ["PolygonWindow", "WindowConfig", "WindowDisplay"]
