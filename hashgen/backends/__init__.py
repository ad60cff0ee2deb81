"""Digest backends providing the built-in algorithm set."""

from ..core.interfaces.backend import DigestBackend
from .hashlib_backend import XOF_ALGORITHMS, HashlibBackend

__all__ = [
    "XOF_ALGORITHMS",
    "DigestBackend",
    "HashlibBackend",
]
