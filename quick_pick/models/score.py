"""Score model shared by every scoring strategy."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Score:
    """Result of scoring one query against one candidate.

    Attributes:
        rank: Relative figure of merit. Higher is better; <= 0 means exclude.
        matches: Indices into the candidate that were matched, in discovery order.
    """

    rank: int
    matches: tuple[int, ...] = ()

    @property
    def found(self) -> bool:
        """True when the candidate should be shown."""
        return self.rank > 0


# Query was empty or otherwise had nothing to search for
EMPTY_SCORE = Score(0)

# Searched and failed
NOT_FOUND_SCORE = Score(-1)


@dataclass(frozen=True)
class ScoreWeights:
    """Rank awarded by each matching strategy.

    The numbers are tunable; the ordering is not. A whole-word match must
    outrank a partial one, and both must be positive.
    """

    whole_word: int = 2
    partial: int = 1
    acronym: int = 100

    @property
    def is_ordered(self) -> bool:
        return self.whole_word > self.partial > 0 and self.acronym > 0


DEFAULT_WEIGHTS = ScoreWeights()
