"""Low-level scanners for link labels, destinations, and titles.

Each scanner takes a Cursor and returns the advanced Cursor on a match
or None on failure. Scanners only validate and advance: extracting text
and unescaping it is left to the caller.

Grammar follows CommonMark 0.30:
- Link label:        https://spec.commonmark.org/0.30/#link-label
- Link destination:  https://spec.commonmark.org/0.30/#link-destination
- Link title:        https://spec.commonmark.org/0.30/#link-title

All scanners work on one line. Label and title content scanning succeed
at end of line because those constructs may continue on the next line;
destinations never span lines.
"""

from mdlinkref.constants import ASCII_PUNCTUATION, MAX_DESTINATION_PAREN_DEPTH
from mdlinkref.syntax.cursor import Cursor, ParseResult

__all__ = [
    "parse_link_destination",
    "scan_link_destination",
    "scan_link_label_content",
    "scan_link_title_content",
]


def _skip_escape(cursor: Cursor) -> Cursor:
    """Skip a backslash and, if escapable, the character after it.

    A backslash before a non-punctuation character is a literal backslash
    and only the backslash itself is consumed.
    """
    cursor = cursor.advance()
    if not cursor.is_eof and cursor.current in ASCII_PUNCTUATION:
        cursor = cursor.advance()
    return cursor


def _is_ascii_control(ch: str) -> bool:
    code = ord(ch)
    return code < 0x20 or code == 0x7F


def scan_link_label_content(cursor: Cursor) -> Cursor | None:
    """Scan label content up to (not including) the closing `]`.

    Args:
        cursor: Position just after `[`, or at the start of a continuation line

    Returns:
        Cursor at `]` or at end of line, None if an unescaped `[` occurs

    Example:
        >>> scan_link_label_content(Cursor("foo]: /url", 0)).pos
        3
        >>> scan_link_label_content(Cursor("fo[o]", 0)) is None
        True
    """
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "\\":
            cursor = _skip_escape(cursor)
        elif ch == "]":
            return cursor
        elif ch == "[":
            # Unescaped brackets are not allowed inside link labels
            return None
        else:
            cursor = cursor.advance()
    return cursor


def scan_link_destination(cursor: Cursor) -> Cursor | None:
    """Scan a link destination in either of its two forms.

    Forms:
        <...>  Angle-bracketed: no unescaped `<` or `>` and no line break
               inside; must close on the same line. May be empty (`<>`).
        bare   Non-empty run without spaces or ASCII control characters;
               parentheses must balance (up to MAX_DESTINATION_PAREN_DEPTH).

    Returns:
        Cursor just after the destination, or None if none matches
    """
    if cursor.is_eof:
        return None
    bracketed = cursor.expect("<")
    if bracketed is not None:
        return _scan_bracketed_destination(bracketed)
    return _scan_bare_destination(cursor)


def _scan_bracketed_destination(cursor: Cursor) -> Cursor | None:
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "\\":
            cursor = _skip_escape(cursor)
        elif ch in ("\n", "<"):
            return None
        elif ch == ">":
            return cursor.advance()
        else:
            cursor = cursor.advance()
    return None


def _scan_bare_destination(cursor: Cursor) -> Cursor | None:
    start_pos = cursor.pos
    depth = 0
    while not cursor.is_eof:
        ch = cursor.current
        if ch == " " or _is_ascii_control(ch):
            break
        if ch == "\\":
            cursor = _skip_escape(cursor)
            continue
        if ch == "(":
            depth += 1
            if depth > MAX_DESTINATION_PAREN_DEPTH:
                return None
        elif ch == ")":
            if depth == 0:
                break
            depth -= 1
        cursor = cursor.advance()

    if cursor.pos == start_pos or depth != 0:
        return None
    return cursor


def parse_link_destination(cursor: Cursor) -> ParseResult[str] | None:
    """Scan a destination and return its raw text without angle brackets.

    Backslash escapes and entities are kept verbatim; unescaping is the
    caller's job once the enclosing definition is known to be valid.

    Example:
        >>> result = parse_link_destination(Cursor("<my url> 'x'", 0))
        >>> result.value
        'my url'
        >>> result.cursor.pos
        8
    """
    end = scan_link_destination(cursor)
    if end is None:
        return None
    raw = cursor.slice_to(end.pos)
    if raw.startswith("<"):
        raw = raw[1:-1]
    return ParseResult(raw, end)


def scan_link_title_content(cursor: Cursor, end_delimiter: str) -> Cursor | None:
    """Scan title content up to (not including) the closing delimiter.

    Parenthesized titles end at the first unescaped `)`; nested parentheses
    are not balanced, and an unescaped `(` fails the scan.

    Args:
        cursor: Position after the opening delimiter, or at the start of a
            continuation line
        end_delimiter: One of `"`, `'`, `)`

    Returns:
        Cursor at the delimiter or at end of line, None on an invalid character

    Example:
        >>> scan_link_title_content(Cursor('a \\\\" b" rest', 0), '"').pos
        6
        >>> scan_link_title_content(Cursor("a (b)", 0), ")") is None
        True
    """
    while not cursor.is_eof:
        ch = cursor.current
        if ch == "\\":
            cursor = _skip_escape(cursor)
        elif ch == end_delimiter:
            return cursor
        elif end_delimiter == ")" and ch == "(":
            return None
        else:
            cursor = cursor.advance()
    return cursor
