"""
Selector part kinds and combinators.

A compound selector is written as::

    element#id.class[attr]:pseudo-class::pseudo-element
              \\----/\\----/\\----------/
              can occur several times

Each part kind has a fixed rank; parts must be appended in non-decreasing
rank order, and element, id and pseudo-element may appear at most once.
"""

from __future__ import annotations

from enum import Enum


class SelectorPart(str, Enum):
    """Kind of a compound selector part."""

    ELEMENT = "element"
    ID = "id"
    CLASS = "class"
    ATTRIBUTE = "attribute"
    PSEUDO_CLASS = "pseudo_class"
    PSEUDO_ELEMENT = "pseudo_element"

    @property
    def rank(self) -> int:
        """Ordering position of this part inside a compound selector."""
        return _RANKS[self]

    @property
    def singleton(self) -> bool:
        """Whether the part may occur at most once per selector."""
        return self in SINGLETON_PARTS

    def render(self, value: object) -> str:
        """Render ``value`` in this part's CSS form."""
        return _TEMPLATES[self].format(value=value)


class Combinator(str, Enum):
    """Tokens joining two compound selectors."""

    DESCENDANT = " "
    ADJACENT_SIBLING = "+"
    GENERAL_SIBLING = "~"
    CHILD = ">"


_RANKS = {
    SelectorPart.ELEMENT: 1,
    SelectorPart.ID: 2,
    SelectorPart.CLASS: 3,
    SelectorPart.ATTRIBUTE: 4,
    SelectorPart.PSEUDO_CLASS: 5,
    SelectorPart.PSEUDO_ELEMENT: 6,
}

_TEMPLATES = {
    SelectorPart.ELEMENT: "{value}",
    SelectorPart.ID: "#{value}",
    SelectorPart.CLASS: ".{value}",
    SelectorPart.ATTRIBUTE: "[{value}]",
    SelectorPart.PSEUDO_CLASS: ":{value}",
    SelectorPart.PSEUDO_ELEMENT: "::{value}",
}

SINGLETON_PARTS = (
    SelectorPart.ELEMENT,
    SelectorPart.ID,
    SelectorPart.PSEUDO_ELEMENT,
)

COMBINATOR_TOKENS = frozenset(c.value for c in Combinator)

PART_ORDER = "element, id, class, attribute, pseudo-class, pseudo-element"


__all__ = [
    "COMBINATOR_TOKENS",
    "Combinator",
    "PART_ORDER",
    "SINGLETON_PARTS",
    "SelectorPart",
]
