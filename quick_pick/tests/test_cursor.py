"""Tests for StringCursor."""

import pytest

from quick_pick.models.exceptions import CursorBoundsError, ScoringError
from quick_pick.services.cursor import NO_CHAR, CursorState, StringCursor


class TestScanPosition:
    """Tests for stepping and reading characters."""

    def test_starts_in_bounds(self):
        """A cursor over text starts on the first character."""
        cursor = StringCursor("abc")
        assert cursor.state == CursorState.IN_BOUNDS
        assert cursor.current_char() == "a"
        assert not cursor.is_terminal

    def test_empty_text_is_terminal(self):
        """Nothing to read in an empty buffer."""
        cursor = StringCursor("")
        assert cursor.state == CursorState.TERMINAL
        assert cursor.is_terminal
        assert cursor.current_char() == NO_CHAR

    def test_move_past_end(self):
        """Stepping off the end reaches the terminal state."""
        cursor = StringCursor("ab").move_forward().move_forward()
        assert cursor.position == 2
        assert cursor.state == CursorState.TERMINAL
        assert cursor.current_char() == NO_CHAR

    def test_move_before_start(self):
        """Stepping back from index 0 is also terminal."""
        cursor = StringCursor("ab").move_backward()
        assert cursor.position == -1
        assert cursor.state == CursorState.BEFORE_START
        assert cursor.is_terminal

    def test_steps_do_not_mutate(self):
        """Stepping returns a new cursor."""
        cursor = StringCursor("ab")
        moved = cursor.move_forward()
        assert cursor.position == 0
        assert moved.position == 1

    def test_peek_at_boundaries(self):
        """Peeking outside the text yields NO_CHAR."""
        first = StringCursor("ab")
        assert first.peek_previous() == NO_CHAR
        assert first.peek_next() == "b"
        last = first.move_forward()
        assert last.peek_previous() == "a"
        assert last.peek_next() == NO_CHAR

    def test_seek_to_substring_found(self):
        """Seek lands on the first occurrence."""
        cursor = StringCursor("hello hello").seek_to_substring("lo")
        assert cursor.position == 3

    def test_seek_to_substring_missing(self):
        """Failed seek leaves the cursor before the start."""
        cursor = StringCursor("hello").seek_to_substring("z")
        assert cursor.position == -1
        assert cursor.is_terminal

    def test_seek_to_substring_is_case_sensitive(self):
        """Seek is a literal search."""
        assert StringCursor("Hello").seek_to_substring("h").is_terminal


class TestWordAtCursor:
    """Tests for word_at_cursor."""

    def test_word_from_middle(self):
        """Expands to the whole alphabetic run."""
        cursor = StringCursor("foo bar-baz").seek_to_substring("ar")
        assert cursor.word_at_cursor() == "bar"

    def test_word_after_punctuation(self):
        """Non-alphabetic characters bound the word."""
        cursor = StringCursor("foo bar-baz").seek_to_substring("baz")
        assert cursor.word_at_cursor() == "baz"

    def test_word_whole_text(self):
        """A single word spans the whole buffer."""
        assert StringCursor("foo").word_at_cursor() == "foo"

    def test_cursor_not_moved(self):
        """Position is unchanged after computing the word."""
        cursor = StringCursor("foo bar").seek_to_substring("ar")
        cursor.word_at_cursor()
        assert cursor.position == 5

    def test_terminal_cursor_has_no_word(self):
        """Terminal cursors return an empty word."""
        assert StringCursor("foo").seek_to_substring("x").word_at_cursor() == ""

    def test_non_alphabetic_position_has_no_word(self):
        """Digits and punctuation belong to no word, even next to letters."""
        assert StringCursor("line 1").seek_to_substring("1").word_at_cursor() == ""
        assert StringCursor("a-b").seek_to_substring("-").word_at_cursor() == ""
        assert StringCursor("f1").seek_to_substring("1").word_at_cursor() == ""


class TestMarkers:
    """Tests for recording markers."""

    def test_mark_range_forward(self):
        """Marks consecutive indices from the cursor."""
        cursor = StringCursor("foo bar").seek_to_substring("bar").mark_range_forward(3)
        assert cursor.markers == (4, 5, 6)

    def test_mark_range_past_end_fails(self):
        """A range beyond the text is a precondition failure."""
        cursor = StringCursor("foo bar").seek_to_substring("ar")
        with pytest.raises(CursorBoundsError):
            cursor.mark_range_forward(3)

    def test_mark_range_on_terminal_fails(self):
        """A terminal cursor has nothing to mark."""
        with pytest.raises(CursorBoundsError):
            StringCursor("foo").seek_to_substring("x").mark_range_forward(1)

    def test_add_marker_out_of_bounds(self):
        """Marker indices must be inside the text."""
        cursor = StringCursor("foo bar")
        with pytest.raises(CursorBoundsError):
            cursor.add_marker(7)
        with pytest.raises(CursorBoundsError):
            cursor.add_marker(-1)

    def test_bounds_error_hierarchy(self):
        """Bounds errors are scoring errors and index errors."""
        with pytest.raises(ScoringError):
            StringCursor("a").add_marker(1)
        with pytest.raises(IndexError):
            StringCursor("a").add_marker(1)

    def test_add_marker_keeps_order(self):
        """Markers are kept in insertion order."""
        cursor = StringCursor("abcd").add_marker(3).add_marker(1)
        assert cursor.markers == (3, 1)
        assert cursor.text_of_markers() == "db"

    def test_word_initials(self):
        """First letters of each word are marked."""
        cursor = StringCursor("alpha beta-gamma").word_initials()
        assert cursor.markers == (0, 6, 11)
        assert cursor.text_of_markers() == "abg"

    def test_word_initials_after_digits(self):
        """Digits separate words like any non-alphabetic character."""
        cursor = StringCursor("  x1y").word_initials()
        assert cursor.markers == (2, 4)

    def test_word_initials_keeps_position(self):
        """Collecting initials does not move the scan position."""
        cursor = StringCursor("alpha beta").move_forward().word_initials()
        assert cursor.position == 1


class TestMarkerReplay:
    """Tests for walking markers as a second stream."""

    def test_walk_initials(self):
        """Replay reads each marked character in turn."""
        cursor = StringCursor("alpha beta").word_initials()
        assert cursor.current_marker() == "a"
        assert cursor.previous_marker() == NO_CHAR
        assert cursor.index_of_marker() == 0

        cursor = cursor.advance_marker()
        assert cursor.current_marker() == "b"
        assert cursor.previous_marker() == "a"
        assert cursor.index_of_marker() == 6

        cursor = cursor.advance_marker()
        assert cursor.marker_read_terminal
        assert cursor.current_marker() == NO_CHAR
        assert cursor.previous_marker() == "b"

    def test_index_of_marker_when_exhausted(self):
        """Reading an index past the markers is a precondition failure."""
        with pytest.raises(CursorBoundsError):
            StringCursor("abc").index_of_marker()

    def test_with_markers(self):
        """Injected markers replay from the start."""
        cursor = StringCursor("abc").add_marker(0).advance_marker().with_markers([2, 0])
        assert cursor.marker_index == 0
        assert cursor.current_marker() == "c"
        assert cursor.advance_marker().current_marker() == "a"
