"""
Ready-made custom algorithms.

These are not part of the built-in set; register them explicitly with
HashGenerator.register_algorithm() when needed.
"""

import hashlib
import hmac
from collections.abc import Mapping
from typing import Any

from ..backends.hashlib_backend import XOF_ALGORITHMS
from ..core.exceptions import InvalidArgumentError
from .base import BaseHashAlgorithm, output_length

try:
    import blake3 as _blake3

    blake3: Any | None = _blake3
except ImportError:
    blake3 = None


def _to_bytes(value: Any, what: str, encoding: str = "utf-8") -> bytes:
    if isinstance(value, str):
        return value.encode(encoding)
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise InvalidArgumentError(
        f"{what} must be str or bytes, got {type(value).__name__}",
        received_type=type(value).__name__,
    )


class Blake3Algorithm(BaseHashAlgorithm):
    """BLAKE3 - fast cryptographic hash with variable output length.

    Options:
        raw_output: Return bytes instead of hex
        length: Output length in bytes (default 32)
    """

    DEFAULT_LENGTH = 32

    @property
    def algorithm_name(self) -> str:
        return "blake3"

    def hash(self, data: Any, options: Mapping[str, Any]) -> str | bytes:
        length = output_length(options, self.DEFAULT_LENGTH)
        if blake3 is None:
            raise ImportError("blake3 package not installed")
        hasher = blake3.blake3(_to_bytes(data, "data"))
        if options.get("raw_output", False):
            return hasher.digest(length=length)
        return hasher.hexdigest(length=length)


class HmacAlgorithm(BaseHashAlgorithm):
    """Keyed HMAC over any hashlib digest.

    Options:
        key: Secret key (str or bytes), required
        raw_output: Return bytes instead of hex
    """

    def __init__(self, digest: str = "sha256") -> None:
        if digest not in hashlib.algorithms_available:
            raise InvalidArgumentError(f"Unsupported HMAC digest: {digest}")
        if digest in XOF_ALGORITHMS:
            raise InvalidArgumentError(f"HMAC needs a fixed-length digest, got {digest}")
        self._digest = digest

    @property
    def algorithm_name(self) -> str:
        return f"hmac-{self._digest}"

    def hash(self, data: Any, options: Mapping[str, Any]) -> str | bytes:
        if "key" not in options:
            raise InvalidArgumentError(f"{self.algorithm_name} requires a 'key' option")
        mac = hmac.new(
            _to_bytes(options["key"], "key"),
            _to_bytes(data, "data"),
            self._digest,
        )
        return mac.digest() if options.get("raw_output", False) else mac.hexdigest()
