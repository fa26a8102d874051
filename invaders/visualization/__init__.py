"""Renderers for game snapshots: a rich terminal view and a pygame view."""

from .terminal_display import TerminalGameDisplay
from .renderer import SpaceInvadersRenderer

__all__ = ["TerminalGameDisplay", "SpaceInvadersRenderer"]
