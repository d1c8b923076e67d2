"""Enumerations for mdlinkref type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.
StrEnum members are strings themselves, eliminating boilerplate __str__ methods.

Python 3.13+.
"""

from enum import StrEnum


class ParserState(StrEnum):
    """Recognition stage of a link reference definition parser.

    StrEnum provides automatic string conversion: str(ParserState.LABEL) == "label"
    """

    START_DEFINITION = "start_definition"
    """Looking for the start of a definition: the `[` of [foo]: /url"""

    LABEL = "label"
    """Inside the label: foo in [foo]: /url"""

    DESTINATION = "destination"
    """Expecting the destination: /url in [foo]: /url"""

    START_TITLE = "start_title"
    """Looking for the opening title delimiter: the first quote in [foo]: /url 'title'"""

    TITLE = "title"
    """Inside the title: title in [foo]: /url 'title'"""

    PARAGRAPH = "paragraph"
    """Terminal: no further line of this block can be a definition"""


__all__ = [
    "ParserState",
]
