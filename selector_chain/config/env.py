"""
Environment variable support for selector-chain configuration.

This module provides functions to load configuration values from environment
variables with support for type conversion and nested keys.
"""

import os
from typing import Any, Optional, Union, get_args, get_origin

from .defaults import ENV_PREFIX


def get_env_key(key: str, prefix: str = ENV_PREFIX) -> str:
    """Convert a configuration key to environment variable name.

    Args:
        key: Configuration key (e.g., "builder.strict_combinators")
        prefix: Environment variable prefix

    Returns:
        Environment variable name (e.g., "SELECTOR_CHAIN_BUILDER_STRICT_COMBINATORS")
    """
    return f"{prefix}{key.upper().replace('.', '_').replace('-', '_')}"


def parse_bool(value: str) -> bool:
    """Parse string to boolean."""
    return value.lower() in ("true", "1", "yes", "on", "enabled")


def parse_optional_int(value: str) -> Optional[int]:
    """Parse string to integer, treating empty and "none" as None."""
    if value.strip().lower() in ("", "none", "null"):
        return None
    return int(value)


def parse_value(value: str, target_type: Any) -> Any:
    """Parse string value to target type.

    Args:
        value: String value
        target_type: Target type

    Returns:
        Parsed value
    """
    origin = get_origin(target_type)

    if origin is Union:
        # Optional[X] -> X, with "none" mapping to None
        args = get_args(target_type)
        non_none_types = [t for t in args if t is not type(None)]
        if non_none_types == [int]:
            return parse_optional_int(value)
        if non_none_types:
            return parse_value(value, non_none_types[0])
        return value

    if target_type == bool:
        return parse_bool(value)

    if target_type == int:
        return int(value)

    if target_type == float:
        return float(value)

    return value


# Configuration keys readable from the environment, with their value types
ENV_MAPPINGS = {
    # Builder options
    "builder.strict_combinators": bool,
    "builder.reset_on_stringify": bool,
    # Serializer options
    "serializer.sort_keys": bool,
    "serializer.indent": Optional[int],
    "serializer.ensure_ascii": bool,
    # Logging options
    "logging.level": str,
}


def load_env_config(prefix: str = ENV_PREFIX) -> dict[str, Any]:
    """Load configuration from predefined environment variables.

    Args:
        prefix: Environment variable prefix

    Returns:
        Nested dictionary of configuration values; sections without any
        variable set are left out.
    """
    result: dict[str, Any] = {}

    for key, target_type in ENV_MAPPINGS.items():
        value = os.environ.get(get_env_key(key, prefix))
        if value is not None:
            section, option = key.split(".", 1)
            result.setdefault(section, {})[option] = parse_value(value, target_type)

    return result
