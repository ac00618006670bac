# =============================================================================
# test_cursor.py - Cursor Unit Tests
# =============================================================================
# Tests for the pushback character source used by every recognizer.
#
# Test coverage includes:
#   - Reading and peeking, EOF sentinel
#   - Multi-character pushback in original order
#   - Position tracking across pushback
#   - Stream sources
# =============================================================================

import io

import pytest
from cscanner.cursor import EOF, Cursor
from cscanner.errors import CursorError


class TestReading:
    """Basic reads from string and stream sources."""

    def test_read_in_order(self):
        cursor = Cursor("abc")
        assert cursor.read() == "a"
        assert cursor.read() == "b"
        assert cursor.read() == "c"

    def test_eof_after_last_character(self):
        cursor = Cursor("a")
        cursor.read()
        assert cursor.read() == EOF
        assert cursor.read() == EOF

    def test_empty_source(self):
        cursor = Cursor("")
        assert cursor.peek() == EOF
        assert cursor.at_end()

    def test_peek_does_not_consume(self):
        cursor = Cursor("xy")
        assert cursor.peek() == "x"
        assert cursor.peek() == "x"
        assert cursor.position == 0
        assert cursor.read() == "x"

    def test_stream_source(self):
        """Any readable text stream works as a source."""
        cursor = Cursor(io.StringIO("int"))
        assert cursor.read_many(3) == "int"
        assert cursor.at_end()

    def test_eof_is_not_a_character(self):
        """The EOF sentinel differs from every single character, NUL included."""
        cursor = Cursor("\0")
        char = cursor.read()
        assert char == "\0"
        assert char != EOF

    def test_read_many_short_at_end(self):
        cursor = Cursor("ab")
        assert cursor.read_many(5) == "ab"
        assert cursor.position == 2


class TestPushback:
    """Unbounded pushback reproduces the original character order."""

    def test_unread_single_character(self):
        cursor = Cursor("ab")
        char = cursor.read()
        cursor.unread(char)
        assert cursor.read() == "a"
        assert cursor.read() == "b"

    def test_unread_sequence_keeps_order(self):
        cursor = Cursor("include <x>")
        word = cursor.read_many(7)
        cursor.unread(word)
        assert cursor.read_many(11) == "include <x>"

    def test_nested_pushback(self):
        """Pushing back in two steps behaves like one larger pushback."""
        cursor = Cursor("abcdef")
        cursor.read_many(4)
        cursor.unread("cd")
        cursor.unread("ab")
        assert cursor.read_many(6) == "abcdef"

    def test_position_restored(self):
        cursor = Cursor("while (1)")
        cursor.read_many(5)
        assert cursor.position == 5
        cursor.unread("while")
        assert cursor.position == 0

    def test_pushback_past_eof(self):
        """Characters read right up to EOF can still be pushed back."""
        cursor = Cursor("3.")
        text = cursor.read_many(2)
        assert cursor.read() == EOF
        cursor.unread(text)
        assert cursor.peek() == "3"
        assert not cursor.at_end()

    def test_pushback_before_start_rejected(self):
        cursor = Cursor("a")
        cursor.read()
        with pytest.raises(CursorError):
            cursor.unread("ab")

    def test_unread_empty_sequence(self):
        cursor = Cursor("a")
        cursor.unread("")
        assert cursor.position == 0
        assert cursor.read() == "a"
