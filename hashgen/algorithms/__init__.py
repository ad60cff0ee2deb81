"""
Custom hash algorithm contract and ready-made implementations.
"""

from .base import BaseHashAlgorithm, HashAlgorithm, is_hash_algorithm, output_length
from .extras import Blake3Algorithm, HmacAlgorithm

__all__ = [
    "BaseHashAlgorithm",
    "Blake3Algorithm",
    "HashAlgorithm",
    "HmacAlgorithm",
    "is_hash_algorithm",
    "output_length",
]
