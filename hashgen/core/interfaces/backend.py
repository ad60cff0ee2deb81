"""
Digest backend interface.

A digest backend is the platform library that actually computes built-in
hashes. HashGenerator only asks it two things: which algorithm names it
supports, and the digest of some bytes under one of those names.
"""

from abc import ABC, abstractmethod


class DigestBackend(ABC):
    """Interface for providers of built-in digest algorithms."""

    @abstractmethod
    def available_algorithms(self) -> set[str]:
        """Return the names of all algorithms this backend can compute."""
        pass

    @abstractmethod
    def digest(
        self,
        algorithm: str,
        data: bytes,
        raw_output: bool = False,
        length: int | None = None,
    ) -> str | bytes:
        """
        Compute a digest.

        Args:
            algorithm: Name from available_algorithms()
            data: Bytes to hash
            raw_output: Return raw digest bytes instead of a hex string
            length: Output length in bytes for variable-length algorithms

        Returns:
            Lowercase hex string, or bytes if raw_output is set

        Raises:
            DigestBackendError: If the algorithm is not supported
        """
        pass

    def is_variable_length(self, algorithm: str) -> bool:
        """Return True if the algorithm needs an explicit output length."""
        return False

    def supports(self, algorithm: str) -> bool:
        """Check if the backend can compute the named algorithm."""
        return algorithm in self.available_algorithms()
