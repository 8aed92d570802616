"""
CSS selector builder for selector-chain.

Provides a fluent builder that enforces compound selector rules:
- Parts in order: element, id, class, attribute, pseudo-class, pseudo-element
- Element, id and pseudo-element at most once
- Combinators ' ', '+', '~', '>' between compound selectors
"""

from selector_chain.selectors.builder import (
    DuplicatePartError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorError,
)
from selector_chain.selectors.facade import CssSelectorBuilder, css_selector_builder
from selector_chain.selectors.parts import (
    COMBINATOR_TOKENS,
    SINGLETON_PARTS,
    Combinator,
    SelectorPart,
)

__all__ = [
    # Builder
    "SelectorBuilder",
    "CssSelectorBuilder",
    "css_selector_builder",
    # Parts
    "SelectorPart",
    "Combinator",
    "COMBINATOR_TOKENS",
    "SINGLETON_PARTS",
    # Errors
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
    "InvalidCombinatorError",
]
