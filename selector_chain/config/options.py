"""
Configuration options classes for selector-chain.

This module provides strongly-typed option classes for the selector builder,
the JSON serializer and logging, with validation via Pydantic.
"""

from typing import Any, Optional

from pydantic import BaseModel, Field, field_validator

from .defaults import (
    DEFAULT_ENSURE_ASCII,
    DEFAULT_INDENT,
    DEFAULT_LOG_LEVEL,
    DEFAULT_RESET_ON_STRINGIFY,
    DEFAULT_SORT_KEYS,
    DEFAULT_STRICT_COMBINATORS,
    LOG_LEVELS,
)


class BuilderOptions(BaseModel):
    """Selector builder behavior switches."""

    strict_combinators: bool = Field(
        DEFAULT_STRICT_COMBINATORS,
        description="Reject combinators other than ' ', '+', '~', '>'",
    )
    reset_on_stringify: bool = Field(
        DEFAULT_RESET_ON_STRINGIFY,
        description="Clear order and occurrence state in stringify()",
    )

    def merge(self, other: "BuilderOptions") -> "BuilderOptions":
        """Merge with another BuilderOptions, other takes precedence."""
        data = self.model_dump()
        data.update(other.model_dump(exclude_unset=True))
        return BuilderOptions(**data)


class SerializerOptions(BaseModel):
    """JSON output options."""

    sort_keys: bool = Field(DEFAULT_SORT_KEYS, description="Sort object keys")
    indent: Optional[int] = Field(
        DEFAULT_INDENT, ge=0, description="Indent width, None for compact output"
    )
    ensure_ascii: bool = Field(
        DEFAULT_ENSURE_ASCII, description="Escape non-ASCII characters"
    )

    def merge(self, other: "SerializerOptions") -> "SerializerOptions":
        """Merge with another SerializerOptions, other takes precedence."""
        data = self.model_dump()
        data.update(other.model_dump(exclude_unset=True))
        return SerializerOptions(**data)


class LoggingOptions(BaseModel):
    """Logging options for the selector_chain logger."""

    level: str = Field(DEFAULT_LOG_LEVEL, description="Log level name")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"Unknown log level: {v}. Valid levels: {', '.join(LOG_LEVELS)}"
            )
        return level


class SelectorChainConfig(BaseModel):
    """Main configuration class combining all options."""

    builder: BuilderOptions = Field(
        default_factory=BuilderOptions, description="Builder options"
    )
    serializer: SerializerOptions = Field(
        default_factory=SerializerOptions, description="Serializer options"
    )
    logging: LoggingOptions = Field(
        default_factory=LoggingOptions, description="Logging options"
    )
    profile: Optional[str] = Field(None, description="Configuration profile name")

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SelectorChainConfig":
        """Create configuration from dictionary."""
        return cls(**data)

    def merge(self, other: "SelectorChainConfig") -> "SelectorChainConfig":
        """Merge with another SelectorChainConfig, other takes precedence."""
        return SelectorChainConfig(
            builder=self.builder.merge(other.builder),
            serializer=self.serializer.merge(other.serializer),
            logging=other.logging if "logging" in other.model_fields_set else self.logging,
            profile=other.profile or self.profile,
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        return self.model_dump(exclude_none=True)
