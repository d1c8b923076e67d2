"""Incremental parser for link reference definitions at the start of a paragraph.

A paragraph may open with any number of definitions:

    [foo]: /url "title"
    [bar]:
      <other url>
      'a title
      spanning lines'
    Ordinary paragraph text starts here.

The block parser feeds the paragraph one line at a time. Lines are never
revisited, so the parser keeps just enough state to resume mid-definition
on the next line. The first line that cannot continue a definition demotes
the rest of the block to paragraph text for good.

Architecture:
    The current recognition stage is a tagged variant: one frozen dataclass
    per stage, carrying only the scratch data meaningful in that stage. Each
    stage handler takes a Cursor and returns the advanced Cursor, or None
    when the line does not match. None is not an error; the driver reacts
    by switching to the terminal Paragraph stage.

Speculation:
    A destination at end of line makes the definition committable before
    its optional title is known. The committable part is held as a
    PendingReference. If a title then completes, the pending reference is
    replaced by the titled one; if the title fails, the pending reference
    still survives and is flushed by harvest_definitions().

References:
    https://spec.commonmark.org/0.30/#link-reference-definitions
"""

import logging
from dataclasses import dataclass, replace
from typing import ClassVar, TypeAlias

from mdlinkref.constants import CONTINUATION_MARKER, MAX_LABEL_LENGTH, TITLE_DELIMITERS
from mdlinkref.enums import ParserState
from mdlinkref.errors import ParserStateError
from mdlinkref.syntax.ast import LinkReferenceDefinition
from mdlinkref.syntax.cursor import Cursor
from mdlinkref.syntax.scanners import (
    parse_link_destination,
    scan_link_label_content,
    scan_link_title_content,
)
from mdlinkref.text import normalize_label, unescape_string

__all__ = [
    "Destination",
    "Label",
    "LinkReferenceDefinitionParser",
    "Paragraph",
    "PendingReference",
    "StartDefinition",
    "StartTitle",
    "Title",
]

logger = logging.getLogger(__name__)


# ============================================================================
# STAGES
# ============================================================================


@dataclass(frozen=True, slots=True)
class StartDefinition:
    """Looking for the `[` that opens a definition."""

    kind: ClassVar[ParserState] = ParserState.START_DEFINITION


@dataclass(frozen=True, slots=True)
class Label:
    """Inside the brackets.

    Attributes:
        raw: Label text so far, escapes verbatim, continuation markers
            between lines
    """

    raw: str
    kind: ClassVar[ParserState] = ParserState.LABEL


@dataclass(frozen=True, slots=True)
class Destination:
    """After `]:`, waiting for the destination (possibly on the next line)."""

    label: str
    kind: ClassVar[ParserState] = ParserState.DESTINATION


@dataclass(frozen=True, slots=True)
class StartTitle:
    """Destination scanned, looking for an opening title delimiter."""

    label: str
    destination: str
    kind: ClassVar[ParserState] = ParserState.START_TITLE


@dataclass(frozen=True, slots=True)
class Title:
    """Inside the title.

    Attributes:
        label: Normalized label
        destination: Raw destination (not yet unescaped)
        delimiter: Closing character the title must end with
        text: Title text so far, with continuation markers between lines
    """

    label: str
    destination: str
    delimiter: str
    text: str
    kind: ClassVar[ParserState] = ParserState.TITLE


@dataclass(frozen=True, slots=True)
class Paragraph:
    """Terminal: everything from here on is paragraph text."""

    kind: ClassVar[ParserState] = ParserState.PARAGRAPH


Stage: TypeAlias = StartDefinition | Label | Destination | StartTitle | Title | Paragraph

_START_DEFINITION = StartDefinition()
_PARAGRAPH = Paragraph()


@dataclass(frozen=True, slots=True)
class PendingReference:
    """A definition known to be valid but not yet turned into a node.

    Destination and title are kept raw; they are unescaped only when the
    reference is finalized.
    """

    label: str
    destination: str
    title: str | None = None


# ============================================================================
# PARSER
# ============================================================================


class LinkReferenceDefinitionParser:
    """Line-by-line recognizer for link reference definitions.

    One instance per paragraph. Feed every line of the paragraph in order,
    then read both outputs once the paragraph ends.

    Example:
        >>> parser = LinkReferenceDefinitionParser()
        >>> parser.feed("[foo]: /url")
        >>> parser.feed("bar")
        >>> parser.harvest_definitions()
        [LinkReferenceDefinition(label='foo', destination='/url', title=None)]
        >>> parser.remaining_paragraph_lines()
        ['bar']

    Thread Safety:
        Not thread-safe. Instances are owned by a single block parse.
    """

    __slots__ = ("_definitions", "_max_label_length", "_paragraph_lines", "_pending", "_stage")

    def __init__(self, *, max_label_length: int | None = None) -> None:
        """Initialize parser for a new paragraph.

        Args:
            max_label_length: Maximum raw label length in characters
                (default: 999, per CommonMark)

        Raises:
            ValueError: If max_label_length is not positive
        """
        if max_label_length is not None and max_label_length <= 0:
            msg = f"max_label_length must be positive, got {max_label_length}"
            raise ValueError(msg)
        self._max_label_length = (
            max_label_length if max_label_length is not None else MAX_LABEL_LENGTH
        )
        self._stage: Stage = _START_DEFINITION
        self._pending: PendingReference | None = None
        self._paragraph_lines: list[str] = []
        self._definitions: list[LinkReferenceDefinition] = []

    @property
    def state(self) -> ParserState:
        """Current recognition stage."""
        return self._stage.kind

    @property
    def max_label_length(self) -> int:
        """Maximum raw label length in characters."""
        return self._max_label_length

    def feed(self, line: str) -> None:
        """Consume the next line of the paragraph.

        Args:
            line: One line of text without its line terminator

        Raises:
            ParserStateError: If the parser is in an undefined stage
                (a bug in the parser, never caused by input)
        """
        self._paragraph_lines.append(line)
        if isinstance(self._stage, Paragraph):
            # Definitions only appear at the start of a paragraph
            return

        cursor = Cursor(line, 0)
        while not cursor.is_eof:
            result = self._step(cursor)
            if result is None:
                logger.debug(
                    "No link reference definition in %s stage, treating rest as paragraph: %r",
                    self._stage.kind,
                    line,
                )
                self._stage = _PARAGRAPH
                return
            cursor = result

    def remaining_paragraph_lines(self) -> list[str]:
        """Lines not consumed by any finalized definition, in input order."""
        return list(self._paragraph_lines)

    def harvest_definitions(self) -> list[LinkReferenceDefinition]:
        """Flush any pending reference and return all definitions.

        Returns:
            Definitions in document order
        """
        self._finalize()
        return list(self._definitions)

    # ------------------------------------------------------------------------
    # Stage handlers
    # ------------------------------------------------------------------------

    def _step(self, cursor: Cursor) -> Cursor | None:
        match self._stage:
            case StartDefinition():
                return self._start_definition(cursor)
            case Label() as stage:
                return self._label(stage, cursor)
            case Destination() as stage:
                return self._destination(stage, cursor)
            case StartTitle() as stage:
                return self._start_title(stage, cursor)
            case Title() as stage:
                return self._title(stage, cursor)
            case _:
                raise ParserStateError(self._stage)

    def _start_definition(self, cursor: Cursor) -> Cursor | None:
        cursor = cursor.skip_whitespace()
        after = cursor.expect("[")
        if after is None:
            return None

        self._stage = Label(CONTINUATION_MARKER if after.is_eof else "")
        return after

    def _label(self, stage: Label, cursor: Cursor) -> Cursor | None:
        end = scan_link_label_content(cursor)
        if end is None:
            return None

        raw = stage.raw + cursor.slice_to(end.pos)
        if end.is_eof:
            # Label might continue on the next line
            self._stage = Label(raw + CONTINUATION_MARKER)
            return end

        close = end.expect("]")
        after = close.expect(":") if close is not None else None
        if after is None:
            return None

        if len(raw) > self._max_label_length:
            return None

        label = normalize_label(raw)
        if not label:
            return None

        self._stage = Destination(label)
        return after.skip_whitespace()

    def _destination(self, stage: Destination, cursor: Cursor) -> Cursor | None:
        result = parse_link_destination(cursor.skip_whitespace())
        if result is None:
            return None

        after = result.cursor.skip_whitespace()
        if after.is_eof:
            # Destination ends the line: valid with or without a title, so
            # the lines so far belong to it.
            self._pending = PendingReference(stage.label, result.value)
            self._paragraph_lines.clear()
        elif after.pos == result.cursor.pos:
            # Title must be separated from the destination by whitespace
            return None

        self._stage = StartTitle(stage.label, result.value)
        return after

    def _start_title(self, stage: StartTitle, cursor: Cursor) -> Cursor:
        cursor = cursor.skip_whitespace()
        if cursor.is_eof:
            # No title can follow on a later line once a line ends here
            self._finalize()
            self._stage = _START_DEFINITION
            return cursor

        delimiter = TITLE_DELIMITERS.get(cursor.current)
        if delimiter is None:
            # Not a title; the same character may open another definition
            self._finalize()
            self._stage = _START_DEFINITION
            return cursor

        after = cursor.advance()
        text = CONTINUATION_MARKER if after.is_eof else ""
        self._stage = Title(stage.label, stage.destination, delimiter, text)
        return after

    def _title(self, stage: Title, cursor: Cursor) -> Cursor | None:
        end = scan_link_title_content(cursor, stage.delimiter)
        if end is None:
            return None

        text = stage.text + cursor.slice_to(end.pos)
        if end.is_eof:
            # Title continues until the delimiter shows up on a later line
            self._stage = replace(stage, text=text + CONTINUATION_MARKER)
            return end

        after = end.advance().skip_whitespace()
        if not after.is_eof:
            # Nothing but whitespace may follow the closing delimiter
            return None

        self._pending = PendingReference(stage.label, stage.destination, text)
        self._finalize()
        self._paragraph_lines.clear()
        self._stage = _START_DEFINITION
        return after

    # ------------------------------------------------------------------------
    # Finalization
    # ------------------------------------------------------------------------

    def _finalize(self) -> None:
        pending = self._pending
        if pending is None:
            return

        title = unescape_string(pending.title) if pending.title is not None else None
        definition = LinkReferenceDefinition(
            label=pending.label,
            destination=unescape_string(pending.destination),
            title=title,
        )
        self._definitions.append(definition)
        self._pending = None
        logger.debug(
            "Finalized link reference definition [%s]: %s", definition.label, definition.destination
        )
