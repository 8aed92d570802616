"""
Default configuration values for selector-chain.

This module contains all default values used throughout the configuration system.
"""

from typing import Optional

# Builder defaults
DEFAULT_STRICT_COMBINATORS = False
DEFAULT_RESET_ON_STRINGIFY = False

# Serializer defaults
DEFAULT_SORT_KEYS = False
DEFAULT_INDENT: Optional[int] = None
DEFAULT_ENSURE_ASCII = False

# Logging defaults
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG", "NOTSET")

# File config defaults
DEFAULT_CONFIG_FILENAME = "selector_chain.config"
DEFAULT_CONFIG_EXTENSIONS = [".json", ".yaml", ".yml", ".toml"]
DEFAULT_CONFIG_SEARCH_PATHS = [
    ".",
    "~/.config/selector-chain",
]

# Environment variable prefix
ENV_PREFIX = "SELECTOR_CHAIN_"
