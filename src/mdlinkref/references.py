"""Reference map: link reference definitions indexed by label.

Per CommonMark, if several definitions share a normalized label, the
first one in document order wins and later ones are ignored.

Python 3.13+. Zero external dependencies.
"""

import logging
from collections.abc import Iterable, Iterator

from mdlinkref.syntax.ast import LinkReferenceDefinition
from mdlinkref.text import normalize_label

__all__ = ["ReferenceMap"]

logger = logging.getLogger(__name__)


class ReferenceMap:
    """First-definition-wins mapping from normalized label to definition.

    Example:
        >>> refs = ReferenceMap()
        >>> refs.add(LinkReferenceDefinition("foo", "/first"))
        True
        >>> refs.add(LinkReferenceDefinition("foo", "/second"))
        False
        >>> refs.get("FOO").destination
        '/first'
    """

    __slots__ = ("_definitions",)

    def __init__(self, definitions: Iterable[LinkReferenceDefinition] = ()) -> None:
        self._definitions: dict[str, LinkReferenceDefinition] = {}
        self.add_all(definitions)

    def add(self, definition: LinkReferenceDefinition) -> bool:
        """Store definition unless its label is already defined.

        Returns:
            True if stored, False if an earlier definition shadows it
        """
        if definition.label in self._definitions:
            logger.debug("Ignoring duplicate link reference definition [%s]", definition.label)
            return False
        self._definitions[definition.label] = definition
        return True

    def add_all(self, definitions: Iterable[LinkReferenceDefinition]) -> int:
        """Add definitions in order; returns how many were stored."""
        return sum(1 for definition in definitions if self.add(definition))

    def get(self, label: str) -> LinkReferenceDefinition | None:
        """Look up a definition by label as written in a reference link.

        Args:
            label: Raw label text; normalized before lookup
        """
        return self._definitions.get(normalize_label(label))

    def __contains__(self, label: object) -> bool:
        if not isinstance(label, str):
            return False
        return normalize_label(label) in self._definitions

    def __len__(self) -> int:
        return len(self._definitions)

    def __iter__(self) -> Iterator[LinkReferenceDefinition]:
        return iter(self._definitions.values())

    def __repr__(self) -> str:
        return f"ReferenceMap({list(self._definitions)!r})"
