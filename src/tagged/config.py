"""Configuration for the tagged-results command line.

The library functions take everything they need as arguments; these
settings only drive the ``tagged`` CLI.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings

from src.tagged.tag import Tag


class OutputFormat(str, Enum):
    """How the CLI prints results."""

    TEXT = "text"
    JSON = "json"


class TaggedConfig(BaseSettings):
    """CLI configuration.

    All settings can be overridden via environment variables with the TAGGED_ prefix.
    Example: TAGGED_OUTPUT_FORMAT=json, TAGGED_DEFAULT_TAG=raw
    """

    model_config = {"env_prefix": "TAGGED_"}

    default_tag: str = Field(
        default="untagged", description="Tag applied to untagged command-line tokens"
    )
    output_format: OutputFormat = Field(
        default=OutputFormat.TEXT, description="Result output format"
    )
    log_level: str = Field(default="WARNING", description="Logging level for the CLI")

    @field_validator("default_tag", mode="before")
    @classmethod
    def validate_default_tag(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip()
            if not v.isidentifier():
                raise ValueError(f"default_tag must be an identifier, got {v!r}")
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def validate_log_level(cls, v: Any) -> Any:
        if isinstance(v, str):
            v = v.strip().upper()
            if v not in logging.getLevelNamesMapping():
                raise ValueError(f"Unknown log level {v!r}")
        return v

    @property
    def untagged(self) -> Tag:
        return Tag(self.default_tag)

    @staticmethod
    def with_overrides(**kwargs: object) -> TaggedConfig:
        """Create a config with specific overrides."""
        return TaggedConfig(**kwargs)  # type: ignore[arg-type]
