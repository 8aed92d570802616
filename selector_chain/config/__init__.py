"""
Configuration module for selector-chain.

This module provides:
- Strongly-typed option classes (BuilderOptions, SerializerOptions, LoggingOptions)
- Configuration file loading (JSON, YAML, TOML)
- Environment variable support
- Built-in profiles (strict, debug, pretty)
- Validation and type checking via Pydantic

Example usage:
    from selector_chain.config import load_config, load_config_with_profile

    # Load from file with environment overrides
    config = load_config("selector_chain.config.yaml")

    # Use built-in profile
    config = load_config_with_profile("strict")

Environment variables:
    SELECTOR_CHAIN_BUILDER_STRICT_COMBINATORS=true
    SELECTOR_CHAIN_SERIALIZER_INDENT=2
    SELECTOR_CHAIN_LOGGING_LEVEL=DEBUG
"""

from .defaults import (
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
)
from .env import (
    ENV_MAPPINGS,
    get_env_key,
    load_env_config,
)
from .loader import (
    PROFILES,
    ConfigLoader,
    ConfigurationError,
    find_config_file,
    load_config,
    load_config_with_profile,
    load_file,
    load_profile,
    merge_configs,
    save_config,
)
from .logging_setup import configure_logging
from .options import (
    BuilderOptions,
    LoggingOptions,
    SelectorChainConfig,
    SerializerOptions,
)

__all__ = [
    # Main configuration class
    "SelectorChainConfig",
    # Option classes
    "BuilderOptions",
    "SerializerOptions",
    "LoggingOptions",
    # Loader functions
    "load_config",
    "load_config_with_profile",
    "load_file",
    "load_profile",
    "save_config",
    "find_config_file",
    "merge_configs",
    "ConfigLoader",
    "ConfigurationError",
    "PROFILES",
    # Logging
    "configure_logging",
    # Environment functions
    "get_env_key",
    "load_env_config",
    "ENV_MAPPINGS",
    "ENV_PREFIX",
    # Default values
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_LOG_LEVEL",
]
