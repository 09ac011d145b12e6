"""Services for quick-pick."""

from quick_pick.services.stringscore import (
    score_query,
    score_substring,
    score_as_acronym,
    score_simple,
)
from quick_pick.services.ranking import RankedItem, get_scorer, rank_items
from quick_pick.services.config import ConfigManager, ScoringStrategy

__all__ = [
    "score_query",
    "score_substring",
    "score_as_acronym",
    "score_simple",
    "RankedItem",
    "get_scorer",
    "rank_items",
    "ConfigManager",
    "ScoringStrategy",
]
