"""Low-level syntax package: cursor, scanners, and the definition node.

Python 3.13+.
"""

from .ast import LinkReferenceDefinition
from .cursor import Cursor, ParseResult
from .scanners import (
    parse_link_destination,
    scan_link_destination,
    scan_link_label_content,
    scan_link_title_content,
)

__all__ = [
    "Cursor",
    "LinkReferenceDefinition",
    "ParseResult",
    "parse_link_destination",
    "scan_link_destination",
    "scan_link_label_content",
    "scan_link_title_content",
]
