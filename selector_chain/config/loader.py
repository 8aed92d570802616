"""
Configuration file loader for selector-chain.

This module provides functions to load configuration from JSON, YAML and
TOML files, merge it with environment variables and apply built-in profiles.
"""

import copy
import json
import logging
import tomllib
from pathlib import Path
from typing import Any, Optional, Union

import yaml

from .defaults import (
    DEFAULT_CONFIG_EXTENSIONS,
    DEFAULT_CONFIG_FILENAME,
    DEFAULT_CONFIG_SEARCH_PATHS,
)
from .env import load_env_config
from .options import SelectorChainConfig

logger = logging.getLogger(__name__)


class ConfigurationError(Exception):
    """Configuration loading or parsing error."""

    pass


def _load_json(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return json.load(f)


def _load_yaml(path: Path) -> dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def _load_toml(path: Path) -> dict[str, Any]:
    with open(path, "rb") as f:
        return tomllib.load(f)


def load_file(path: Union[str, Path]) -> dict[str, Any]:
    """Load configuration from file based on extension.

    Args:
        path: Path to configuration file

    Returns:
        Configuration dictionary

    Raises:
        ConfigurationError: If file format is not supported, file not found
            or the file cannot be parsed
    """
    path = Path(path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    suffix = path.suffix.lower()

    try:
        if suffix == ".json":
            data = _load_json(path)
        elif suffix in (".yaml", ".yml"):
            data = _load_yaml(path)
        elif suffix == ".toml":
            data = _load_toml(path)
        else:
            raise ConfigurationError(f"Unsupported configuration format: {suffix}")
    except (json.JSONDecodeError, yaml.YAMLError, tomllib.TOMLDecodeError) as e:
        raise ConfigurationError(f"Cannot parse configuration file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {path} must contain a mapping, got {type(data).__name__}"
        )

    logger.debug(f"Loaded configuration from {path}")
    return data


def find_config_file(
    filename: str = DEFAULT_CONFIG_FILENAME,
    search_paths: Optional[list[str]] = None,
    extensions: Optional[list[str]] = None,
) -> Optional[Path]:
    """Find configuration file in search paths.

    Args:
        filename: Base filename without extension
        search_paths: Directories to search
        extensions: File extensions to try

    Returns:
        Path to config file or None if not found
    """
    if search_paths is None:
        search_paths = DEFAULT_CONFIG_SEARCH_PATHS

    if extensions is None:
        extensions = DEFAULT_CONFIG_EXTENSIONS

    for search_path in search_paths:
        search_dir = Path(search_path).expanduser()

        for ext in extensions:
            config_path = search_dir / f"{filename}{ext}"
            if config_path.exists():
                return config_path

    return None


def merge_configs(*configs: dict[str, Any]) -> dict[str, Any]:
    """Deep merge multiple configuration dictionaries.

    Later configs take precedence over earlier ones.
    """
    result: dict[str, Any] = {}

    for config in configs:
        _deep_merge(result, copy.deepcopy(config))

    return result


def _deep_merge(base: dict[str, Any], override: dict[str, Any]) -> None:
    for key, value in override.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value


class ConfigLoader:
    """Configuration loader with support for multiple sources.

    Priority (highest to lowest):
    1. Programmatic overrides
    2. Environment variables
    3. Configuration file
    4. Default values
    """

    def __init__(
        self,
        config_file: Optional[Union[str, Path]] = None,
        search_paths: Optional[list[str]] = None,
        load_env: bool = True,
        auto_find: bool = True,
    ):
        """Initialize configuration loader.

        Args:
            config_file: Explicit path to configuration file
            search_paths: Directories to search for config files
            load_env: Whether to load environment variables
            auto_find: Whether to auto-find config files
        """
        self.config_file = Path(config_file) if config_file else None
        self.search_paths = search_paths or DEFAULT_CONFIG_SEARCH_PATHS
        self.load_env = load_env
        self.auto_find = auto_find

    def load(self, overrides: Optional[dict[str, Any]] = None) -> SelectorChainConfig:
        """Load configuration from all sources.

        Args:
            overrides: Programmatic configuration overrides

        Returns:
            Loaded configuration

        Raises:
            ConfigurationError: If an explicitly given file cannot be loaded
        """
        configs = []

        file_config = self._load_file_config()
        if file_config:
            configs.append(file_config)

        if self.load_env:
            env_config = load_env_config()
            if env_config:
                configs.append(env_config)

        if overrides:
            configs.append(overrides)

        merged = merge_configs(*configs) if configs else {}

        return SelectorChainConfig.from_dict(merged)

    def _load_file_config(self) -> Optional[dict[str, Any]]:
        if self.config_file is not None:
            return load_file(self.config_file)

        if not self.auto_find:
            return None

        config_path = find_config_file(search_paths=self.search_paths)
        if config_path is None:
            return None

        try:
            return load_file(config_path)
        except ConfigurationError as e:
            logger.warning(f"Ignoring configuration file {config_path}: {e}")
            return None


def load_config(
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
    load_env: bool = True,
    auto_find: bool = True,
) -> SelectorChainConfig:
    """Convenience function to load configuration.

    Args:
        config_file: Path to configuration file
        overrides: Programmatic overrides
        load_env: Whether to load environment variables
        auto_find: Whether to search the default paths for a config file

    Returns:
        Loaded configuration
    """
    loader = ConfigLoader(config_file=config_file, load_env=load_env, auto_find=auto_find)
    return loader.load(overrides=overrides)


def save_config(
    config: SelectorChainConfig,
    path: Union[str, Path],
    format: str = "json",
) -> None:
    """Save configuration to file.

    Args:
        config: Configuration to save
        path: Output file path
        format: Output format (json, yaml)

    Raises:
        ConfigurationError: If format is not supported
    """
    path = Path(path)
    data = config.to_dict()

    if format == "json":
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)

    elif format in ("yaml", "yml"):
        with open(path, "w", encoding="utf-8") as f:
            yaml.safe_dump(data, f, default_flow_style=False)

    else:
        raise ConfigurationError(f"Unsupported output format: {format}")


# Built-in configuration profiles
PROFILES = {
    "strict": {
        "builder": {
            "strict_combinators": True,
            "reset_on_stringify": True,
        },
    },
    "debug": {
        "logging": {
            "level": "DEBUG",
        },
    },
    "pretty": {
        "serializer": {
            "indent": 2,
            "sort_keys": True,
        },
    },
}


def load_profile(name: str) -> dict[str, Any]:
    """Load a built-in configuration profile.

    Args:
        name: Profile name (strict, debug, pretty)

    Returns:
        Profile configuration dictionary

    Raises:
        ConfigurationError: If profile not found
    """
    if name not in PROFILES:
        raise ConfigurationError(
            f"Unknown profile: {name}. "
            f"Available profiles: {', '.join(PROFILES.keys())}"
        )

    return copy.deepcopy(PROFILES[name])


def load_config_with_profile(
    profile: str,
    config_file: Optional[Union[str, Path]] = None,
    overrides: Optional[dict[str, Any]] = None,
) -> SelectorChainConfig:
    """Load configuration with a profile as base.

    Args:
        profile: Profile name
        config_file: Additional config file
        overrides: Programmatic overrides

    Returns:
        Loaded configuration
    """
    profile_config = load_profile(profile)

    loader = ConfigLoader(config_file=config_file, load_env=True)
    base_config = loader.load()

    # Merge: defaults < file < env < profile < overrides
    merged = merge_configs(
        base_config.to_dict(),
        profile_config,
        overrides or {},
        {"profile": profile},
    )

    return SelectorChainConfig.from_dict(merged)
