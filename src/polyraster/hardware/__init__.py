"""Presentation sinks for polyraster."""

from .base import Display
from .display import BufferDisplay

__all__ = [
    "Display",
    "BufferDisplay",
]
