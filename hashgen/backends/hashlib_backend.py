"""
Digest backend backed by Python's hashlib.

Whatever hashlib (and the OpenSSL build underneath it) exposes is treated
as the built-in algorithm set.
"""

import hashlib

from ..core.exceptions import DigestBackendError
from ..core.interfaces.backend import DigestBackend

# Extendable-output functions need an explicit digest length
XOF_ALGORITHMS = frozenset({"shake_128", "shake_256"})


class HashlibBackend(DigestBackend):
    """DigestBackend using hashlib.new()."""

    def available_algorithms(self) -> set[str]:
        return set(hashlib.algorithms_available)

    def is_variable_length(self, algorithm: str) -> bool:
        return algorithm in XOF_ALGORITHMS

    def digest(
        self,
        algorithm: str,
        data: bytes,
        raw_output: bool = False,
        length: int | None = None,
    ) -> str | bytes:
        try:
            hasher = hashlib.new(algorithm, data)
        except (ValueError, TypeError) as e:
            raise DigestBackendError(
                f"hashlib cannot compute '{algorithm}'", algorithm=algorithm, cause=e
            ) from e

        if self.is_variable_length(algorithm):
            if length is None:
                raise DigestBackendError(
                    "Variable-length algorithm requires an output length", algorithm=algorithm
                )
            return hasher.digest(length) if raw_output else hasher.hexdigest(length)

        return hasher.digest() if raw_output else hasher.hexdigest()
