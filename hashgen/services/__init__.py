"""Service implementations for hashgen."""

from .logging import HashgenLogger, NullLogger

__all__ = [
    "HashgenLogger",
    "NullLogger",
]
