"""Link reference definition node.

Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass

__all__ = ["LinkReferenceDefinition"]


@dataclass(frozen=True, slots=True)
class LinkReferenceDefinition:
    """A recognized `[label]: destination "title"` definition.

    All fields are final values: the label is normalized, the destination
    and title are unescaped.

    Attributes:
        label: Normalized lookup key (case-folded, whitespace collapsed)
        destination: Link target without enclosing angle brackets
        title: Title text without delimiters, or None if absent

    Example:
        [Foo  Bar]: </my\\_url> 'a title'
        LinkReferenceDefinition(label="foo bar", destination="/my_url", title="a title")
    """

    label: str
    destination: str
    title: str | None = None

    def __post_init__(self) -> None:
        """Validate node invariants."""
        if not self.label:
            msg = "LinkReferenceDefinition label must be non-empty"
            raise ValueError(msg)
