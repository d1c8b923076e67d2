"""mdlinkref exception hierarchy.

Malformed markdown is never an error: a definition that fails to parse
demotes its block to paragraph text. Exceptions here signal defects in
the parser itself or misuse of its API.

Python 3.13+. Zero external dependencies.
"""

__all__ = ["LinkReferenceError", "ParserStateError"]


class LinkReferenceError(Exception):
    """Base exception for all mdlinkref errors."""


class ParserStateError(LinkReferenceError):
    """Parser reached a state outside its defined state set.

    Indicates a bug in the state machine driver, not bad input.
    Not recoverable: the parser instance must be discarded.

    Attributes:
        state: The offending state object
    """

    def __init__(self, state: object) -> None:
        """Initialize ParserStateError.

        Args:
            state: The state object the driver could not dispatch
        """
        super().__init__(f"Unknown parsing state: {state!r}")
        self.state = state
