"""
Configuration sections for hashgen.

Values arrive as TOML scalars or environment strings, so the sections
coerce types and ignore keys they do not know.
"""

from __future__ import annotations

import codecs
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(BaseModel):
    """Common behavior for every config section."""

    model_config = ConfigDict(
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )


class HashConfig(ConfigBaseModel):
    """``[hash]``: how built-in algorithms treat their input and output."""

    encoding: str = "utf-8"
    xof_length: int = Field(default=32, ge=1)

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, v: str) -> str:
        try:
            codecs.lookup(v)
        except LookupError as e:
            raise ValueError(f"Unknown text encoding: {v}") from e
        return v


class LoggingConfig(ConfigBaseModel):
    """``[logging]``: where diagnostics go. Both outputs are off by default."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = False

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v


class HashgenConfig(ConfigBaseModel):
    """Both sections together, for building generators without a config file."""

    hash: HashConfig = Field(default_factory=HashConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
