"""Text utilities: label normalization and literal unescaping.

Per CommonMark:
- Labels match case-insensitively after Unicode case fold, with runs of
  internal whitespace collapsed and outer whitespace stripped.
- Destinations and titles support backslash escapes of ASCII punctuation
  and HTML entity/numeric character references.

Python 3.13+. Zero external dependencies.
"""

import re
from html.entities import html5

__all__ = ["normalize_label", "unescape_string"]

# CommonMark whitespace (space, tab, LF, VT, FF, CR), one or more.
_WHITESPACE_RUN = re.compile(r"[ \t\n\x0b\f\r]+")

# Backslash escape or entity reference, scanned left to right in one pass
# so that an escaped `&` never starts an entity.
_ESCAPE_OR_ENTITY = re.compile(
    r"\\([!\"#$%&'()*+,\-./:;<=>?@\[\\\]^_`{|}~])"
    r"|&(?:#[xX][0-9a-fA-F]{1,6}|#[0-9]{1,7}|[a-zA-Z][a-zA-Z0-9]{1,31});"
)

_REPLACEMENT_CHAR = "\ufffd"

# Largest valid Unicode code point.
_MAX_CODE_POINT = 0x10FFFF


def normalize_label(raw: str) -> str:
    """Normalize raw label content to its lookup key.

    Args:
        raw: Label text between the brackets, escapes kept verbatim

    Returns:
        Case-folded key with whitespace collapsed; empty if the label
        contained only whitespace

    Example:
        >>> normalize_label("  Foo\\n  BAR ")
        'foo bar'
        >>> normalize_label("Straße")
        'strasse'
    """
    return _WHITESPACE_RUN.sub(" ", raw).strip(" ").casefold()


def _decode_numeric(digits: str, base: int) -> str:
    code = int(digits, base)
    if code == 0 or code > _MAX_CODE_POINT or 0xD800 <= code <= 0xDFFF:
        return _REPLACEMENT_CHAR
    return chr(code)


def _replace(match: re.Match[str]) -> str:
    escaped = match.group(1)
    if escaped is not None:
        return escaped

    entity = match.group(0)
    if entity.startswith(("&#x", "&#X")):
        return _decode_numeric(entity[3:-1], 16)
    if entity.startswith("&#"):
        return _decode_numeric(entity[2:-1], 10)
    # Unknown named entities stay verbatim
    return html5.get(entity[1:], entity)


def unescape_string(raw: str) -> str:
    """Resolve backslash escapes and entity references.

    Args:
        raw: Destination or title text as it appeared in the source

    Returns:
        Literal text

    Example:
        >>> unescape_string("/url\\\\*x")
        '/url*x'
        >>> unescape_string("&amp;&copy;&#35;&bogus;")
        '&©#&bogus;'
    """
    if "\\" not in raw and "&" not in raw:
        return raw
    return _ESCAPE_OR_ENTITY.sub(_replace, raw)
