"""
Core infrastructure for hashgen.

This module provides:
- ServiceContainer: DI container using dependency-injector
- Application bootstrap for initialization
- Interface definitions for the logger and digest backend
- Custom exception hierarchy
- Settings loading
"""

from .bootstrap import bootstrap, is_initialized, reset
from .container import ServiceContainer, get_container, try_resolve
from .exceptions import (
    ConfigFileError,
    ConfigValidationError,
    DigestBackendError,
    HashgenConfigError,
    HashgenException,
    InvalidArgumentError,
    UnknownAlgorithmError,
)
from .settings import HashgenSettings, find_config_file, load_settings

__all__ = [
    "ConfigFileError",
    "ConfigValidationError",
    "DigestBackendError",
    "HashgenConfigError",
    "HashgenException",
    "HashgenSettings",
    "InvalidArgumentError",
    "ServiceContainer",
    "UnknownAlgorithmError",
    "bootstrap",
    "find_config_file",
    "get_container",
    "is_initialized",
    "load_settings",
    "reset",
    "try_resolve",
]
