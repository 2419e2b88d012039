"""Selector fragment categories and combinators."""

from __future__ import annotations

from enum import Enum, IntEnum


class Category(IntEnum):
    """A fragment category; the value is its position in the required order.

    Rendering:
        element         v
        id              #v
        class           .v
        attribute       [v]
        pseudo-class    :v
        pseudo-element  ::v
    """

    ELEMENT = 0
    ID = 1
    CLASS = 2
    ATTRIBUTE = 3
    PSEUDO_CLASS = 4
    PSEUDO_ELEMENT = 5

    @property
    def unique(self) -> bool:
        """True for categories that may appear at most once."""
        return self in _UNIQUE

    @property
    def label(self) -> str:
        return self.name.lower().replace("_", "-")

    def render(self, value: str) -> str:
        prefix, suffix = _AFFIXES[self]
        return f"{prefix}{value}{suffix}"


_UNIQUE = frozenset({Category.ELEMENT, Category.ID, Category.PSEUDO_ELEMENT})

_AFFIXES: dict[Category, tuple[str, str]] = {
    Category.ELEMENT: ("", ""),
    Category.ID: ("#", ""),
    Category.CLASS: (".", ""),
    Category.ATTRIBUTE: ("[", "]"),
    Category.PSEUDO_CLASS: (":", ""),
    Category.PSEUDO_ELEMENT: ("::", ""),
}


class Combinator(str, Enum):
    """Combinators accepted between two compound selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"

    @classmethod
    def is_known(cls, token: str) -> bool:
        return token in {c.value for c in cls}
