"""Fragment categories and combinator tokens."""

from __future__ import annotations

from enum import StrEnum


class FragmentKind(StrEnum):
    """Category of a compound-selector fragment.

    Members are declared in the order CSS requires them to appear:
    element, id, class, attribute, pseudo-class, pseudo-element.
    """

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def position(self) -> int:
        """Ordinal of this category in the mandated order."""
        return FRAGMENT_ORDER.index(self)

    @property
    def is_singleton(self) -> bool:
        """True for categories that may occur at most once."""
        return self in SINGLETON_KINDS

    def later_kinds(self) -> tuple[FragmentKind, ...]:
        """Categories that must come after this one."""
        return FRAGMENT_ORDER[self.position + 1 :]


FRAGMENT_ORDER: tuple[FragmentKind, ...] = tuple(FragmentKind)

SINGLETON_KINDS: frozenset[FragmentKind] = frozenset(
    {FragmentKind.ELEMENT, FragmentKind.ID, FragmentKind.PSEUDO_ELEMENT}
)


class Combinator(StrEnum):
    """The four combinators defined by CSS."""

    DESCENDANT = " "
    CHILD = ">"
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
