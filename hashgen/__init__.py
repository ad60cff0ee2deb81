"""
hashgen - pluggable hash generation.

HashGenerator dispatches a payload and an algorithm name either to a
custom algorithm registered by the caller or to a built-in digest from
hashlib.

Usage:
    from hashgen import HashGenerator

    generator = HashGenerator()
    generator.generate("sha256", b"payload")
"""

from .algorithms import BaseHashAlgorithm, Blake3Algorithm, HashAlgorithm, HmacAlgorithm
from .backends import DigestBackend, HashlibBackend
from .core.bootstrap import bootstrap
from .core.exceptions import (
    DigestBackendError,
    HashgenException,
    InvalidArgumentError,
    UnknownAlgorithmError,
)
from .generator import HashGenerator

# Version is loaded from package metadata
try:
    from importlib.metadata import version

    __version__ = version("hashgen")
except Exception:
    __version__ = "0.1.0"

__all__ = [
    "BaseHashAlgorithm",
    "Blake3Algorithm",
    "DigestBackend",
    "DigestBackendError",
    "HashAlgorithm",
    "HashGenerator",
    "HashgenException",
    "HashlibBackend",
    "HmacAlgorithm",
    "InvalidArgumentError",
    "UnknownAlgorithmError",
    "__version__",
    "bootstrap",
]
