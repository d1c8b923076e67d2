"""Paragraph-level driver for the link reference definition parser.

Stands in for the block parser of a full markdown implementation: it
splits a paragraph into lines, feeds them to a fresh
LinkReferenceDefinitionParser, and packages both outputs.
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from mdlinkref.parser.reference import LinkReferenceDefinitionParser
from mdlinkref.references import ReferenceMap
from mdlinkref.syntax.ast import LinkReferenceDefinition

__all__ = ["ParagraphResult", "collect_references", "parse_definitions", "split_lines"]

logger = logging.getLogger(__name__)

_LINE_ENDING = re.compile(r"\r\n|\r|\n")


@dataclass(frozen=True, slots=True)
class ParagraphResult:
    """Outcome of scanning one paragraph for definitions.

    Attributes:
        definitions: Definitions found at the start of the paragraph
        paragraph_lines: Lines left over as ordinary paragraph text
    """

    definitions: tuple[LinkReferenceDefinition, ...]
    paragraph_lines: tuple[str, ...]

    @property
    def paragraph_text(self) -> str | None:
        """Remaining text joined with LF, or None if nothing remains."""
        if not self.paragraph_lines:
            return None
        return "\n".join(self.paragraph_lines)


def split_lines(text: str) -> list[str]:
    """Split text on LF, CRLF, or CR; a trailing line ending adds no line.

    Example:
        >>> split_lines("a\\r\\nb\\n")
        ['a', 'b']
    """
    if not text:
        return []
    lines = _LINE_ENDING.split(text)
    if lines[-1] == "":
        lines.pop()
    return lines


def parse_definitions(
    text: str | Iterable[str], *, max_label_length: int | None = None
) -> ParagraphResult:
    """Extract leading link reference definitions from one paragraph.

    Args:
        text: Paragraph source, or its lines without terminators
        max_label_length: Override for the raw label length bound

    Returns:
        ParagraphResult with definitions and leftover paragraph lines

    Example:
        >>> result = parse_definitions('[foo]: /url "title"\\nHello')
        >>> result.definitions[0].title
        'title'
        >>> result.paragraph_text
        'Hello'
    """
    lines = split_lines(text) if isinstance(text, str) else text
    parser = LinkReferenceDefinitionParser(max_label_length=max_label_length)
    for line in lines:
        parser.feed(line)
    return ParagraphResult(
        definitions=tuple(parser.harvest_definitions()),
        paragraph_lines=tuple(parser.remaining_paragraph_lines()),
    )


def collect_references(
    paragraphs: Iterable[str], reference_map: ReferenceMap | None = None
) -> ReferenceMap:
    """Gather definitions from many paragraphs into one reference map.

    Args:
        paragraphs: Paragraph sources in document order
        reference_map: Map to add to (default: a new, empty map)

    Returns:
        The reference map; earlier definitions win over later duplicates
    """
    refs = reference_map if reference_map is not None else ReferenceMap()
    found = 0
    stored = 0
    for paragraph in paragraphs:
        result = parse_definitions(paragraph)
        found += len(result.definitions)
        stored += refs.add_all(result.definitions)
    logger.info(
        "Collected %d link reference definitions (%d duplicates ignored)", stored, found - stored
    )
    return refs
