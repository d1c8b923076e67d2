"""Tests for cursor infrastructure.

Validates the immutable line cursor used by the scanners.
"""

from __future__ import annotations

import pytest
from hypothesis import given
from hypothesis import strategies as st

from mdlinkref.syntax.cursor import Cursor, ParseResult

# ============================================================================
# CURSOR BASIC TESTS
# ============================================================================


class TestCursorBasic:
    """Test basic cursor functionality."""

    def test_default_position(self) -> None:
        """Cursor starts at position 0 by default."""
        cursor = Cursor("[foo]")

        assert cursor.pos == 0
        assert cursor.current == "["

    def test_cursor_immutability(self) -> None:
        """Cursor is immutable (frozen dataclass)."""
        cursor = Cursor("hello", 0)

        with pytest.raises(AttributeError):
            cursor.pos = 5  # type: ignore[misc]

    def test_is_eof(self) -> None:
        """is_eof is True only at or past the end of the line."""
        assert not Cursor("ab", 1).is_eof
        assert Cursor("ab", 2).is_eof
        assert Cursor("", 0).is_eof

    def test_current_raises_at_eof(self) -> None:
        """Accessing current at end of line raises EOFError."""
        with pytest.raises(EOFError, match="Unexpected end of line"):
            _ = Cursor("ab", 2).current


# ============================================================================
# NAVIGATION
# ============================================================================


class TestCursorNavigation:
    """Test advance, peek, and expect."""

    def test_advance_returns_new_cursor(self) -> None:
        """advance() leaves the original cursor unchanged."""
        cursor = Cursor("abc", 0)
        advanced = cursor.advance()

        assert cursor.pos == 0
        assert advanced.pos == 1

    def test_advance_clamps_at_end(self) -> None:
        """advance() never moves past the end of the line."""
        assert Cursor("abc", 2).advance(10).pos == 3

    def test_peek(self) -> None:
        """peek() looks ahead without moving and returns None past the end."""
        cursor = Cursor("ab", 0)

        assert cursor.peek() == "a"
        assert cursor.peek(1) == "b"
        assert cursor.peek(2) is None

    def test_expect_match(self) -> None:
        """expect() consumes a matching character."""
        result = Cursor("]:", 0).expect("]")

        assert result is not None
        assert result.pos == 1

    def test_expect_mismatch_and_eof(self) -> None:
        """expect() returns None on mismatch or at end of line."""
        assert Cursor("]:", 0).expect(":") is None
        assert Cursor("", 0).expect("]") is None


# ============================================================================
# WHITESPACE AND SLICING
# ============================================================================


class TestCursorWhitespace:
    """Test CommonMark whitespace skipping."""

    @pytest.mark.parametrize("ws", [" ", "\t", "\n", "\x0b", "\f", "\r"])
    def test_skips_each_whitespace_char(self, ws: str) -> None:
        """Every CommonMark whitespace character is skipped."""
        assert Cursor(ws * 3 + "x", 0).skip_whitespace().pos == 3

    def test_does_not_skip_non_breaking_space(self) -> None:
        """Unicode spaces outside the CommonMark set are content."""
        assert Cursor("\u00a0x", 0).skip_whitespace().pos == 0

    def test_skip_count_is_position_delta(self) -> None:
        """The skipped count is the difference in positions."""
        cursor = Cursor("/url  \t'title'", 4)
        after = cursor.skip_whitespace()

        assert after.pos - cursor.pos == 3
        assert after.current == "'"

    def test_slice_to(self) -> None:
        """slice_to() extracts text between two checkpoints."""
        start = Cursor("[foo]", 1)
        end = start.advance(3)

        assert start.slice_to(end.pos) == "foo"

    @given(line=st.text(max_size=50))
    def test_skip_whitespace_never_moves_backwards(self, line: str) -> None:
        """PROPERTY: skip_whitespace() stops at a non-whitespace char or the end."""
        after = Cursor(line, 0).skip_whitespace()

        assert after.is_eof or after.current not in " \t\n\x0b\f\r"
        assert line[: after.pos].strip(" \t\n\x0b\f\r") == ""


class TestParseResult:
    """Test ParseResult container."""

    def test_holds_value_and_cursor(self) -> None:
        """ParseResult pairs a value with the cursor after it."""
        cursor = Cursor("/url", 4)
        result = ParseResult("/url", cursor)

        assert result.value == "/url"
        assert result.cursor is cursor
