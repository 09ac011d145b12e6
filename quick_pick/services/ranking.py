"""Rank palette candidates against a query.

Each candidate is scored on its own; the scorer keeps no state between
calls, so ranking order never depends on candidate order except for ties
on both rank and label.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import partial
from typing import Callable

from ..models.score import EMPTY_SCORE, Score
from .config import ScoringSettings, ScoringStrategy
from .stringscore import score_query, score_simple

logger = logging.getLogger(__name__)

Scorer = Callable[[str, str], Score]


@dataclass
class RankedItem:
    """A candidate that survived ranking."""

    id: str
    label: str
    score: Score

    @property
    def matches(self) -> tuple[int, ...]:
        return self.score.matches


def get_scorer(settings: ScoringSettings | None = None) -> Scorer:
    """Build the scorer described by settings.

    Raises:
        ConfigValidationError: If the configured ranks are out of order
    """
    settings = settings or ScoringSettings()
    if settings.strategy == ScoringStrategy.SIMPLE:
        return score_simple
    return partial(
        score_query,
        weights=settings.weights,
        allow_empty_acronym=settings.empty_query_acronym_match,
    )


def rank_items(
    query: str,
    items: list[tuple[str, str]],
    scorer: Scorer = score_query,
    limit: int | None = None,
) -> list[RankedItem]:
    """Rank (id, label) items by how well their label matches query.

    Args:
        query: Raw query as typed
        items: List of (id, label) tuples
        scorer: Scoring function, score_query unless configured otherwise
        limit: Keep at most this many results

    Returns:
        Matching items sorted by rank descending, then label.
        A blank query returns every item unranked, in input order.
    """
    if not query.strip():
        ranked = [RankedItem(id_, label, EMPTY_SCORE) for id_, label in items]
        return ranked[:limit] if limit is not None else ranked

    results: list[RankedItem] = []
    for id_, label in items:
        score = scorer(query, label)
        if score.found:
            results.append(RankedItem(id_, label, score))

    results.sort(key=lambda item: (-item.score.rank, item.label.lower()))
    logger.debug("Ranked %d/%d items for query %r", len(results), len(items), query)

    if limit is not None:
        return results[:limit]
    return results
