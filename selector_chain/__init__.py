"""
selector-chain: fluent CSS selector builder.

Compose CSS selectors from parts and combinators while the builder checks
part order (element, id, class, attribute, pseudo-class, pseudo-element)
and that element, id and pseudo-element occur at most once.

Basic usage:
    from selector_chain import css_selector_builder as builder

    builder.id("main").class_part("container").class_part("editable").stringify()
    # '#main.container.editable'

    builder.type("a").attribute('href$=".png"').pseudo_class("focus").stringify()
    # 'a[href$=".png"]:focus'

    builder.combine(
        builder.type("div").id("main"),
        "+",
        builder.type("table").id("data"),
    ).stringify()
    # 'div#main + table#data'

With configuration:
    from selector_chain import CssSelectorBuilder, load_config

    config = load_config(overrides={"builder": {"strict_combinators": True}})
    builder = CssSelectorBuilder.from_config(config)

JSON helpers:
    from selector_chain import Rectangle, from_json, to_json

    text = to_json(Rectangle(width=10, height=20))
    from_json(Rectangle, text).get_area()
    # 200
"""

__version__ = "0.1.0"
__license__ = "MIT"

from selector_chain.config import (
    BuilderOptions,
    ConfigurationError,
    LoggingOptions,
    SelectorChainConfig,
    SerializerOptions,
    configure_logging,
    load_config,
    load_config_with_profile,
)
from selector_chain.models import Rectangle
from selector_chain.selectors import (
    Combinator,
    CssSelectorBuilder,
    DuplicatePartError,
    InvalidCombinatorError,
    OrderViolationError,
    SelectorBuilder,
    SelectorError,
    SelectorPart,
    css_selector_builder,
)
from selector_chain.serialization import (
    SerializationError,
    from_json,
    get_json,
    to_json,
)

__all__ = [
    # Version
    "__version__",
    # Selectors
    "css_selector_builder",
    "CssSelectorBuilder",
    "SelectorBuilder",
    "SelectorPart",
    "Combinator",
    # Errors
    "SelectorError",
    "DuplicatePartError",
    "OrderViolationError",
    "InvalidCombinatorError",
    "SerializationError",
    "ConfigurationError",
    # Models
    "Rectangle",
    # Serialization
    "to_json",
    "get_json",
    "from_json",
    # Configuration
    "SelectorChainConfig",
    "BuilderOptions",
    "SerializerOptions",
    "LoggingOptions",
    "load_config",
    "load_config_with_profile",
    "configure_logging",
]
