"""
Core abstractions for Invaders.

Provides the geometry value types shared by every module and the
interface all renderers implement.
"""

from .geometry import Position, ScreenBounds
from .renderer_interface import RendererInterface

__all__ = [
    'Position',
    'ScreenBounds',
    'RendererInterface',
]
