"""Interface definitions for hashgen services."""

from .backend import DigestBackend
from .logger import ILogger

__all__ = [
    "DigestBackend",
    "ILogger",
]
