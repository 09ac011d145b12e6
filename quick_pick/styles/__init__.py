"""Shared styles for quick-pick."""

from .base import BASE_CSS

__all__ = ["BASE_CSS"]
