"""Screens for quick-pick."""

from quick_pick.screens.command_palette import CommandPalette
from quick_pick.screens.main import MainScreen

__all__ = ["CommandPalette", "MainScreen"]
