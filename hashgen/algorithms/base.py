"""
Custom hash algorithm contract.

Anything registered with HashGenerator is either a plain callable taking
``(data, options)`` or an object implementing the HashAlgorithm protocol
below. BaseHashAlgorithm is a convenience base class for the latter that
also carries the name the algorithm should be registered under.
"""

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Protocol, runtime_checkable

from ..core.exceptions import InvalidArgumentError


@runtime_checkable
class HashAlgorithm(Protocol):
    """Structural type for objects exposing ``hash(data, options)``."""

    def hash(self, data: Any, options: Mapping[str, Any]) -> Any:
        """Generate a hash for data."""
        ...


class BaseHashAlgorithm(ABC):
    """
    Abstract base class for named custom hash algorithms.

    Implementations must provide:
    - algorithm_name: Identifier used by HashGenerator.register_algorithm()
    - hash(): Compute the hash of data, honouring whatever options apply
    """

    @property
    @abstractmethod
    def algorithm_name(self) -> str:
        """Return algorithm identifier (e.g., 'blake3', 'hmac-sha256')."""
        pass

    @abstractmethod
    def hash(self, data: Any, options: Mapping[str, Any]) -> Any:
        """Generate a hash for data."""
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.algorithm_name!r})"


def is_hash_algorithm(obj: Any) -> bool:
    """Return True if obj exposes a callable ``hash`` and is not a class."""
    return not isinstance(obj, type) and isinstance(obj, HashAlgorithm) and callable(obj.hash)


def output_length(options: Mapping[str, Any], default: int) -> int:
    """Return the ``length`` option, or default, as a positive byte count."""
    length = options.get("length", default)
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise InvalidArgumentError(
            f"length must be a positive integer, got {length!r}",
            received_type=type(length).__name__,
        )
    return length
