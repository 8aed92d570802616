"""
Facade for building CSS selectors.

Each facade call starts a brand new SelectorBuilder, so independent chains
never share validation state.
"""

from __future__ import annotations

from typing import Optional, Union

from selector_chain.config.options import BuilderOptions, SelectorChainConfig
from selector_chain.selectors.builder import SelectorBuilder
from selector_chain.selectors.parts import Combinator


class CssSelectorBuilder:
    """Stateless entry point returning fresh selector builders.

    Example:
        >>> builder = css_selector_builder
        >>> builder.combine(
        ...     builder.type("div").id("main"),
        ...     "+",
        ...     builder.type("table").id("data"),
        ... ).stringify()
        'div#main + table#data'
    """

    def __init__(self, options: Optional[BuilderOptions] = None) -> None:
        self.options = options or BuilderOptions()

    @classmethod
    def from_config(cls, config: SelectorChainConfig) -> CssSelectorBuilder:
        """Create a facade using the builder section of a configuration."""
        return cls(config.builder)

    def _new(self) -> SelectorBuilder:
        return SelectorBuilder(self.options)

    def type(self, value: object) -> SelectorBuilder:
        return self._new().type(value)

    def id(self, value: object) -> SelectorBuilder:
        return self._new().id(value)

    def class_part(self, value: object) -> SelectorBuilder:
        return self._new().class_part(value)

    def attribute(self, value: object) -> SelectorBuilder:
        return self._new().attribute(value)

    def pseudo_class(self, value: object) -> SelectorBuilder:
        return self._new().pseudo_class(value)

    def pseudo_element(self, value: object) -> SelectorBuilder:
        return self._new().pseudo_element(value)

    element = type
    class_ = class_part
    attr = attribute

    def combine(
        self,
        left: SelectorBuilder,
        combinator: Union[str, Combinator],
        right: SelectorBuilder,
    ) -> SelectorBuilder:
        return self._new().combine(left, combinator, right)


css_selector_builder = CssSelectorBuilder()


__all__ = [
    "CssSelectorBuilder",
    "css_selector_builder",
]
