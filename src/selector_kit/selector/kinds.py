"""Fragment kinds and their ordering ranks."""

from __future__ import annotations

from enum import Enum


class FragmentKind(Enum):
    """A selector fragment type, valued by its ordering rank.

    Within one compound selector a fragment may never follow a fragment of a
    higher rank. ``COMBINED`` marks an already rendered compound selector
    joined with a combinator; it has the lowest rank and only ever appears
    alone in a fresh state.
    """

    COMBINED = 0
    ELEMENT = 1
    ID = 10
    CLASS = 20
    ATTRIBUTE = 30
    PSEUDO_CLASS = 40
    PSEUDO_ELEMENT = 50

    @property
    def rank(self) -> int:
        return self.value

    @property
    def label(self) -> str:
        """CSS-style name, e.g. ``pseudo-class``."""
        return self.name.lower().replace("_", "-")

    @property
    def is_singleton(self) -> bool:
        """True for kinds allowed at most once per selector."""
        return self in SINGLETON_KINDS


SINGLETON_KINDS = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)

# Kinds in the order they must appear, excluding COMBINED.
CANONICAL_ORDER: tuple[FragmentKind, ...] = (
    FragmentKind.ELEMENT,
    FragmentKind.ID,
    FragmentKind.CLASS,
    FragmentKind.ATTRIBUTE,
    FragmentKind.PSEUDO_CLASS,
    FragmentKind.PSEUDO_ELEMENT,
)
