"""Link reference definition parser module.

Module Organization:
- reference.py: LinkReferenceDefinitionParser state machine and its stages
- paragraph.py: Paragraph-level driver (parse_definitions, collect_references)

Public API:
    LinkReferenceDefinitionParser: Line-by-line recognizer
    ParagraphResult: Definitions plus leftover paragraph lines
    parse_definitions: Scan one paragraph
    collect_references: Scan many paragraphs into a ReferenceMap
"""

from mdlinkref.parser.paragraph import (
    ParagraphResult,
    collect_references,
    parse_definitions,
    split_lines,
)
from mdlinkref.parser.reference import LinkReferenceDefinitionParser

__all__ = [
    "LinkReferenceDefinitionParser",
    "ParagraphResult",
    "collect_references",
    "parse_definitions",
    "split_lines",
]
