"""Pydantic models for hashgen."""

from .config import ConfigBaseModel, HashConfig, HashgenConfig, LoggingConfig, LogLevel

__all__ = [
    "ConfigBaseModel",
    "HashConfig",
    "HashgenConfig",
    "LogLevel",
    "LoggingConfig",
]
