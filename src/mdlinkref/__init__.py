"""mdlinkref - CommonMark link reference definition parser.

Recognizes `[label]: destination "title"` definitions at the start of a
paragraph, one line at a time, and hands back both the definitions and
the lines that remain ordinary paragraph text.

Public API:
    LinkReferenceDefinitionParser - Incremental line-by-line parser
    LinkReferenceDefinition - Immutable definition node
    ReferenceMap - First-definition-wins lookup by label
    parse_definitions - Scan a single paragraph
    collect_references - Scan many paragraphs into a ReferenceMap
    normalize_label - Label to lookup key
    unescape_string - Resolve backslash escapes and entities

Exceptions:
    LinkReferenceError - Base exception class
    ParserStateError - Internal state machine defect
"""

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

from .enums import ParserState
from .errors import LinkReferenceError, ParserStateError
from .parser import (
    LinkReferenceDefinitionParser,
    ParagraphResult,
    collect_references,
    parse_definitions,
)
from .references import ReferenceMap
from .syntax.ast import LinkReferenceDefinition
from .text import normalize_label, unescape_string

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
try:
    __version__ = _get_version("mdlinkref")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

# CommonMark specification conformance
__commonmark_spec_version__ = "0.30"
__spec_url__ = "https://spec.commonmark.org/0.30/#link-reference-definitions"

__all__ = [
    "LinkReferenceDefinition",
    "LinkReferenceDefinitionParser",
    "LinkReferenceError",
    "ParagraphResult",
    "ParserState",
    "ParserStateError",
    "ReferenceMap",
    "__commonmark_spec_version__",
    "__spec_url__",
    "__version__",
    "collect_references",
    "normalize_label",
    "parse_definitions",
    "unescape_string",
]
