"""StringCursor: bounds-aware traversal of a single candidate string.

The cursor never mutates. Every step returns a new cursor, so a scoring pass
can hold on to earlier positions without copying anything by hand.

Two streams are tracked:
- the scan position over the text, and
- a read position over recorded markers (matched indices), which lets a
  caller walk, say, the first letter of every word as if it were a string.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum
from typing import Iterable

from ..models.exceptions import CursorBoundsError

# Returned for reads outside the text. Never alphabetic, never equal to a char.
NO_CHAR = ""


class CursorState(Enum):
    """Where the scan position sits relative to the text."""

    BEFORE_START = "before_start"  # Stepped back past index 0, or seek failed
    IN_BOUNDS = "in_bounds"
    TERMINAL = "terminal"  # Past the last character


@dataclass(frozen=True)
class StringCursor:
    """Immutable cursor over ``text``.

    Attributes:
        text: The buffer being scanned
        position: Scan position; -1 and len(text) are the sentinels
        markers: Recorded indices, in the order they were found
        marker_index: Read position into ``markers``
    """

    text: str
    position: int = 0
    markers: tuple[int, ...] = ()
    marker_index: int = 0

    # --- scan position ---

    @property
    def state(self) -> CursorState:
        if self.position < 0:
            return CursorState.BEFORE_START
        if self.position >= len(self.text):
            return CursorState.TERMINAL
        return CursorState.IN_BOUNDS

    @property
    def is_terminal(self) -> bool:
        """True when there is nothing under the cursor."""
        return self.state is not CursorState.IN_BOUNDS

    def current_char(self) -> str:
        return self._char_at(self.position)

    def peek_previous(self) -> str:
        return self._char_at(self.position - 1)

    def peek_next(self) -> str:
        return self._char_at(self.position + 1)

    def move_forward(self) -> StringCursor:
        return replace(self, position=self.position + 1)

    def move_backward(self) -> StringCursor:
        return replace(self, position=self.position - 1)

    def seek_to_substring(self, needle: str) -> StringCursor:
        """Move to the first literal occurrence of needle (-1 if absent)."""
        return replace(self, position=self.text.find(needle))

    def word_at_cursor(self) -> str:
        """Return the alphabetic run around the cursor without moving it.

        A digit or punctuation position sits in no run, so the word is empty.
        """
        if not self.current_char().isalpha():
            return ""
        start = self._previous_alpha_boundary().position
        end = self._next_alpha_boundary().position
        return self.text[start:end + 1]

    def _previous_alpha_boundary(self) -> StringCursor:
        cursor = self
        while cursor.peek_previous().isalpha():
            cursor = cursor.move_backward()
        return cursor

    def _next_alpha_boundary(self) -> StringCursor:
        cursor = self
        while cursor.peek_next().isalpha():
            cursor = cursor.move_forward()
        return cursor

    def _char_at(self, index: int) -> str:
        if 0 <= index < len(self.text):
            return self.text[index]
        return NO_CHAR

    # --- markers ---

    def add_marker(self, index: int) -> StringCursor:
        if not 0 <= index < len(self.text):
            raise CursorBoundsError(
                f"Marker {index} is outside text of length {len(self.text)}"
            )
        return replace(self, markers=self.markers + (index,))

    def mark_range_forward(self, count: int) -> StringCursor:
        """Record ``count`` consecutive indices starting at the cursor."""
        end = self.position + count
        if self.is_terminal or end > len(self.text):
            raise CursorBoundsError(
                f"Range {self.position}..{end} exceeds text of length {len(self.text)}",
                suggestion="check is_terminal before marking",
            )
        return replace(self, markers=self.markers + tuple(range(self.position, end)))

    def with_markers(self, markers: Iterable[int]) -> StringCursor:
        """Replace the marker sequence and rewind the marker read position."""
        return replace(self, markers=tuple(markers), marker_index=0)

    def word_initials(self) -> StringCursor:
        """Return a cursor whose markers are the first letter of every word.

        A word starts at an alphabetic character that is not preceded by one.
        """
        cursor = replace(self, position=0, markers=())
        while not cursor.is_terminal:
            if cursor.current_char().isalpha() and not cursor.peek_previous().isalpha():
                cursor = cursor.add_marker(cursor.position)
            cursor = cursor.move_forward()
        return replace(cursor, position=self.position, marker_index=0)

    def text_of_markers(self) -> str:
        return "".join(self.text[index] for index in self.markers)

    # --- marker replay ---

    @property
    def marker_read_terminal(self) -> bool:
        return not 0 <= self.marker_index < len(self.markers)

    def current_marker(self) -> str:
        """Character under the current marker, or NO_CHAR."""
        if self.marker_read_terminal:
            return NO_CHAR
        return self.text[self.markers[self.marker_index]]

    def previous_marker(self) -> str:
        if 0 < self.marker_index <= len(self.markers):
            return self.text[self.markers[self.marker_index - 1]]
        return NO_CHAR

    def index_of_marker(self) -> int:
        """Text index recorded by the current marker."""
        if self.marker_read_terminal:
            raise CursorBoundsError(
                f"Marker read position {self.marker_index} is past {len(self.markers)} markers"
            )
        return self.markers[self.marker_index]

    def advance_marker(self) -> StringCursor:
        return replace(self, marker_index=self.marker_index + 1)
