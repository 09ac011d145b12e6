"""Data models for quick-pick."""

from .score import Score, ScoreWeights, EMPTY_SCORE, NOT_FOUND_SCORE, DEFAULT_WEIGHTS
from .exceptions import (
    QuickPickError,
    ScoringError,
    CursorBoundsError,
    ConfigError,
    ConfigValidationError,
)

__all__ = [
    # Scores
    "Score",
    "ScoreWeights",
    "EMPTY_SCORE",
    "NOT_FOUND_SCORE",
    "DEFAULT_WEIGHTS",
    # Exceptions
    "QuickPickError",
    "ScoringError",
    "CursorBoundsError",
    "ConfigError",
    "ConfigValidationError",
]
