"""String scoring for incremental command filtering.

Scoring strategies:
- whole word found in the candidate: rank 2
- part of a word found in the candidate: rank 1
- several query words: every word must be found, ranks are summed
- query matches the first letters of the candidate's words: rank 100

The best of the multi-word total and the acronym rank wins. Word orderings
are not permuted; "bar foo" and "foo bar" are scored word by word in the
order typed, each against whatever the previous words left unmatched.
"""

from __future__ import annotations

from typing import Iterable

from ..models.score import DEFAULT_WEIGHTS, EMPTY_SCORE, NOT_FOUND_SCORE, Score, ScoreWeights
from .cursor import StringCursor

# Stands in for already matched characters; never part of a query word
MASK_CHAR = " "

# score_simple ranks a match at index i as SIMPLE_BASE_RANK - i
SIMPLE_BASE_RANK = 100


def score_query(
    query: str,
    target: str,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    allow_empty_acronym: bool = False,
) -> Score:
    """Score a possibly multi-word query against target.

    Args:
        query: Raw query as typed (not lowercased)
        target: Candidate label
        weights: Rank awarded per strategy
        allow_empty_acronym: Let an empty query win as an acronym match.
            Off by default; kept for parity with older rankings.

    Returns:
        The word-match total or the acronym score, whichever ranks strictly
        higher. Ties go to the word match.
    """
    if not query and not allow_empty_acronym:
        return EMPTY_SCORE

    total = 0
    matches: list[int] = []
    for word in split_words(query):
        score = score_substring(word, mask_regions(target, matches), weights)
        if score.rank <= 0:
            # All words must be found
            total = 0
            matches = []
            break
        total += score.rank
        matches.extend(score.matches)

    acronym = score_as_acronym(query, target, weights, allow_empty=allow_empty_acronym)
    if acronym.rank > total:
        return acronym

    if total <= 0:
        return EMPTY_SCORE
    return Score(total, tuple(matches))


def score_substring(
    word: str | None,
    target: str,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
) -> Score:
    """Score a single word by its first case-insensitive occurrence in target."""
    if not word:
        return EMPTY_SCORE

    word = fold_case(word)
    cursor = StringCursor(fold_case(target)).seek_to_substring(word)
    if cursor.is_terminal:
        return NOT_FOUND_SCORE

    if cursor.word_at_cursor() == word:
        rank = weights.whole_word
    else:
        rank = weights.partial
    return Score(rank, cursor.mark_range_forward(len(word)).markers)


def score_as_acronym(
    query: str,
    target: str,
    weights: ScoreWeights = DEFAULT_WEIGHTS,
    allow_empty: bool = False,
) -> Score:
    """Match query, in order, against the first letters of target's words.

    Every query character must be consumed before the initials run out.
    Initials are visited once each and never revisited.
    """
    if not query:
        return Score(weights.acronym) if allow_empty else EMPTY_SCORE

    remaining = StringCursor(fold_case(query))
    initials = StringCursor(fold_case(target)).word_initials()
    matched = StringCursor(target)

    while not initials.marker_read_terminal and not remaining.is_terminal:
        if initials.current_marker() == remaining.current_char():
            matched = matched.add_marker(initials.index_of_marker())
            remaining = remaining.move_forward()
        initials = initials.advance_marker()

    if remaining.is_terminal:
        return Score(weights.acronym, matched.markers)
    return EMPTY_SCORE


def score_simple(query: str, target: str) -> Score:
    """Rank by how early query first appears in target.

    A match starting at index 100 or later ranks <= 0 and is dropped by
    callers like any other miss.
    """
    if not query:
        return EMPTY_SCORE

    cursor = StringCursor(fold_case(target)).seek_to_substring(fold_case(query))
    if cursor.is_terminal:
        return NOT_FOUND_SCORE
    return Score(
        SIMPLE_BASE_RANK - cursor.position,
        cursor.mark_range_forward(len(query)).markers,
    )


def mask_regions(text: str, indexes: Iterable[int]) -> str:
    """Return a copy of text with the given positions replaced by MASK_CHAR."""
    masked = set(indexes)
    if not masked:
        return text
    return "".join(MASK_CHAR if i in masked else char for i, char in enumerate(text))


def split_words(query: str) -> list[str]:
    """Split on single spaces; repeated spaces yield empty words."""
    return query.split(" ")


def fold_case(text: str) -> str:
    """Lowercase text without changing its length.

    Characters whose lowercase form is longer than one character (such as
    a dotted capital I) are left as they are so indices stay aligned.
    """
    return "".join(_fold_char(char) for char in text)


def _fold_char(char: str) -> str:
    lowered = char.lower()
    return lowered if len(lowered) == 1 else char
