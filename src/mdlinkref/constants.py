"""Shared constants for mdlinkref.

This module provides centralized configuration constants used across
the syntax and parser packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Input limits: Bounds on label length and destination nesting
- Scanning: Character classes shared by cursor and scanners
- Markers: Internal placeholders written into accumulators

Python 3.13+. Zero external dependencies.
"""

from collections.abc import Mapping
from types import MappingProxyType

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Input limits
    "MAX_LABEL_LENGTH",
    "MAX_DESTINATION_PAREN_DEPTH",
    # Scanning
    "WHITESPACE_CHARS",
    "ASCII_PUNCTUATION",
    "TITLE_DELIMITERS",
    # Markers
    "CONTINUATION_MARKER",
]

# ============================================================================
# INPUT LIMITS
# ============================================================================

# CommonMark: A link label can have at most 999 characters inside the
# square brackets. Counted on the raw label, before normalization, and
# including continuation markers for labels that span lines.
MAX_LABEL_LENGTH: int = 999

# Unbracketed destinations may contain balanced parentheses. Nesting deeper
# than this is rejected to bound work on pathological input.
MAX_DESTINATION_PAREN_DEPTH: int = 32

# ============================================================================
# SCANNING
# ============================================================================

# CommonMark whitespace: space, tab, line feed, line tabulation, form feed,
# carriage return.
WHITESPACE_CHARS: frozenset[str] = frozenset(" \t\n\u000b\f\r")

# Characters that may be backslash-escaped.
ASCII_PUNCTUATION: frozenset[str] = frozenset("!\"#$%&'()*+,-./:;<=>?@[\\]^_`{|}~")

# Opening title character -> required closing character.
TITLE_DELIMITERS: Mapping[str, str] = MappingProxyType({'"': '"', "'": "'", "(": ")"})

# ============================================================================
# MARKERS
# ============================================================================

# Appended to a label or title accumulator when the construct continues on
# the next line.
CONTINUATION_MARKER: str = "\n"
