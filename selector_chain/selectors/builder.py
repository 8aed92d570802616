"""
Fluent CSS selector builder.

SelectorBuilder accumulates selector text part by part and validates the
order and occurrence rules of compound selectors as it goes.

Example:
    >>> SelectorBuilder().id("main").class_part("container").stringify()
    '#main.container'
"""

from __future__ import annotations

import logging
from typing import Optional, Union

from selector_chain.config.options import BuilderOptions
from selector_chain.selectors.parts import (
    COMBINATOR_TOKENS,
    PART_ORDER,
    SINGLETON_PARTS,
    Combinator,
    SelectorPart,
)

logger = logging.getLogger(__name__)


class SelectorError(Exception):
    """Base error for misuse of the selector builder."""

    pass


class DuplicatePartError(SelectorError):
    """Element, id or pseudo-element appended more than once."""

    def __init__(self, part: SelectorPart) -> None:
        self.part = part
        super().__init__(
            "Element, id and pseudo-element should not occur more then one "
            f"time inside the selector (got a second {part.value})"
        )


class OrderViolationError(SelectorError):
    """Part appended after a part of higher rank."""

    def __init__(self, part: SelectorPart, last_rank: int) -> None:
        self.part = part
        self.last_rank = last_rank
        super().__init__(
            f"Selector parts should be arranged in the following order: {PART_ORDER} "
            f"(cannot append {part.value} after rank {last_rank})"
        )


class InvalidCombinatorError(SelectorError, ValueError):
    """Combinator token rejected in strict mode."""

    def __init__(self, combinator: str) -> None:
        self.combinator = combinator
        allowed = ", ".join(repr(c.value) for c in Combinator)
        super().__init__(
            f"Unknown combinator: {combinator!r}. Allowed combinators: {allowed}"
        )


class SelectorBuilder:
    """Mutable accumulator of one CSS selector.

    Every part method validates the append, adds the rendered part to
    ``text`` and returns the builder itself, so calls chain:

        SelectorBuilder().type("a").attribute('href$=".png"').pseudo_class("focus")

    A builder that raised DuplicatePartError or OrderViolationError keeps the
    text of the parts appended before the failure and should be discarded.
    """

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        """Initialize an empty builder.

        Args:
            options: Behavior switches; defaults to BuilderOptions().
        """
        self.options = options or BuilderOptions()
        self.text = ""
        self.last_rank = 0
        self._counts: dict[SelectorPart, int] = {part: 0 for part in SINGLETON_PARTS}

    @property
    def seen_type(self) -> int:
        """How many element parts were appended."""
        return self._counts[SelectorPart.ELEMENT]

    @property
    def seen_id(self) -> int:
        """How many id parts were appended."""
        return self._counts[SelectorPart.ID]

    @property
    def seen_pseudo_element(self) -> int:
        """How many pseudo-element parts were appended."""
        return self._counts[SelectorPart.PSEUDO_ELEMENT]

    def _check_occurrence(self, part: SelectorPart) -> None:
        # All singleton counters are inspected, not only the current one.
        if any(count > 1 for count in self._counts.values()):
            logger.debug(f"Rejected duplicate {part.value} in {self.text!r}")
            raise DuplicatePartError(part)

    def _check_order(self, part: SelectorPart) -> None:
        if part.rank < self.last_rank:
            logger.debug(
                f"Rejected {part.value} after rank {self.last_rank} in {self.text!r}"
            )
            raise OrderViolationError(part, self.last_rank)

    def append(self, part: SelectorPart, value: object) -> SelectorBuilder:
        """Validate and append one selector part.

        Args:
            part: Kind of the part.
            value: Fragment embedded verbatim in the part's rendered form.

        Returns:
            This builder.

        Raises:
            DuplicatePartError: If a singleton part would occur twice.
            OrderViolationError: If the part ranks below the previous one.
        """
        if part.singleton:
            self._counts[part] += 1
            self._check_occurrence(part)
        self._check_order(part)

        self.text += part.render(value)
        self.last_rank = part.rank
        logger.debug(f"Appended {part.value}: {self.text!r}")
        return self

    def type(self, value: object) -> SelectorBuilder:
        """Append an element (type) selector, e.g. ``div``."""
        return self.append(SelectorPart.ELEMENT, value)

    def id(self, value: object) -> SelectorBuilder:
        """Append an id selector, e.g. ``#main``."""
        return self.append(SelectorPart.ID, value)

    def class_part(self, value: object) -> SelectorBuilder:
        """Append a class selector, e.g. ``.container``."""
        return self.append(SelectorPart.CLASS, value)

    def attribute(self, value: object) -> SelectorBuilder:
        """Append an attribute selector, e.g. ``[href$=".png"]``."""
        return self.append(SelectorPart.ATTRIBUTE, value)

    def pseudo_class(self, value: object) -> SelectorBuilder:
        """Append a pseudo-class selector, e.g. ``:focus``."""
        return self.append(SelectorPart.PSEUDO_CLASS, value)

    def pseudo_element(self, value: object) -> SelectorBuilder:
        """Append a pseudo-element selector, e.g. ``::before``."""
        return self.append(SelectorPart.PSEUDO_ELEMENT, value)

    # Aliases matching the CSS vocabulary
    element = type
    class_ = class_part
    attr = attribute

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Union[str, Combinator],
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        """Join two builders with a combinator.

        The text becomes ``"<left> <combinator> <right>"`` and replaces
        whatever this builder held before. ``left`` and ``right`` are only
        read; their validation state is not copied.

        Args:
            left: Builder for the left compound selector.
            combinator: One of ``' '``, ``'+'``, ``'~'``, ``'>'``.
            right: Builder for the right compound selector.

        Returns:
            This builder.

        Raises:
            InvalidCombinatorError: In strict mode, for an unknown token.
        """
        if isinstance(combinator, Combinator):
            combinator = combinator.value

        if self.options.strict_combinators and (
            not isinstance(combinator, str) or combinator not in COMBINATOR_TOKENS
        ):
            logger.debug(f"Rejected combinator {combinator!r}")
            raise InvalidCombinatorError(combinator)

        self.text = f"{left.text} {combinator} {right.text}"
        logger.debug(f"Combined: {self.text!r}")
        return self

    def stringify(self) -> str:
        """Return the built selector and clear the accumulated text.

        Order and occurrence state survive unless the builder was created
        with ``reset_on_stringify``.
        """
        selector = self.text
        self.text = ""
        if self.options.reset_on_stringify:
            self.reset()
        return selector

    def reset(self) -> None:
        """Clear text, singleton counters and the last rank."""
        self.text = ""
        self.last_rank = 0
        for part in self._counts:
            self._counts[part] = 0

    def __repr__(self) -> str:
        return f"SelectorBuilder(text={self.text!r}, last_rank={self.last_rank})"


__all__ = [
    "DuplicatePartError",
    "InvalidCombinatorError",
    "OrderViolationError",
    "SelectorBuilder",
    "SelectorError",
]
