"""Immutable cursor over a single line of markdown.

Implements the immutable cursor pattern for zero-`None` scanning.
Python 3.13+. Zero external dependencies.

Design Philosophy:
    - Cursor is immutable (frozen dataclass)
    - EOF is a state (is_eof), not a return value
    - Every advance() returns NEW cursor (prevents infinite loops)
    - A checkpoint is just the integer `pos`; restoring one means
      keeping a reference to the earlier cursor

Scope:
    One cursor covers one line as handed over by the block parser,
    without its line terminator. Nothing here looks across lines; the
    definition parser carries multi-line state itself.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from mdlinkref.constants import WHITESPACE_CHARS

__all__ = ["Cursor", "ParseResult"]

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Cursor:
    """Immutable line position tracker.

    Example:
        >>> cursor = Cursor("[foo]", 0)
        >>> cursor.current
        '['
        >>> cursor.advance().current
        'f'
        >>> cursor.current  # Original unchanged
        '['
        >>> Cursor("ab", 2).is_eof
        True
    """

    source: str
    pos: int = 0

    @property
    def is_eof(self) -> bool:
        """Check if the line is exhausted.

        Returns:
            True if position >= line length
        """
        return self.pos >= len(self.source)

    @property
    def current(self) -> str:
        """Get current character.

        Returns:
            Current character at position

        Raises:
            EOFError: If at end of line. Scanners check is_eof first,
                so reaching this is a bug in the caller.
        """
        if self.is_eof:
            msg = f"Unexpected end of line at position {self.pos}"
            raise EOFError(msg)
        return self.source[self.pos]

    def peek(self, offset: int = 0) -> str | None:
        """Peek at character with offset without advancing.

        Args:
            offset: Offset from current position (0 = current, 1 = next)

        Returns:
            Character at position + offset, or None if beyond end of line
        """
        target_pos = self.pos + offset
        if target_pos >= len(self.source):
            return None
        return self.source[target_pos]

    def advance(self, count: int = 1) -> "Cursor":
        """Return new cursor advanced by count positions.

        Never moves past the end of the line.
        """
        new_pos = min(self.pos + count, len(self.source))
        return Cursor(self.source, new_pos)

    def expect(self, char: str) -> "Cursor | None":
        """Consume character if it matches expected, return None otherwise.

        Example:
            >>> Cursor("]:", 0).expect("]").pos
            1
            >>> Cursor("]:", 0).expect(":") is None
            True
        """
        if not self.is_eof and self.current == char:
            return self.advance()
        return None

    def skip_whitespace(self) -> "Cursor":
        """Skip CommonMark whitespace (space, tab, LF, VT, FF, CR).

        The number of characters skipped is the difference between the
        returned cursor's pos and this cursor's pos.

        Example:
            >>> cursor = Cursor(" \\t /url", 0)
            >>> cursor.skip_whitespace().pos
            3
        """
        c = self
        while not c.is_eof and c.current in WHITESPACE_CHARS:
            c = c.advance()
        return c

    def slice_to(self, end_pos: int) -> str:
        """Extract line text from current position to end_pos (exclusive).

        Usage:
            >>> start = Cursor("foo]", 0)
            >>> end = start.advance(3)
            >>> start.slice_to(end.pos)
            'foo'
        """
        return self.source[self.pos : end_pos]


@dataclass(frozen=True, slots=True)
class ParseResult(Generic[T]):
    """Scanner result containing a value and the cursor after it.

    Type Parameters:
        T: The type of the scanned value

    Pattern:
        Scanners that produce a value have the signature:
            def scan_foo(cursor: Cursor) -> ParseResult[Foo] | None:
                ...
                return ParseResult(value, new_cursor)

    Example:
        >>> cursor = Cursor("/url", 0)
        >>> result = ParseResult("/url", cursor.advance(4))
        >>> result.value
        '/url'
        >>> result.cursor.is_eof
        True
    """

    value: T
    cursor: Cursor
