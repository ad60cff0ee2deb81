"""
Diagnostic logger seam.

hashgen only emits two kinds of messages: debug traces of registration
and dispatch, and warnings about configuration it had to ignore.
"""

from abc import ABC, abstractmethod
from typing import Any


class ILogger(ABC):
    """Sink for hashgen's internal diagnostics."""

    @abstractmethod
    def debug(self, message: str, *args: Any) -> None:
        """Trace a registration or dispatch decision."""

    @abstractmethod
    def warning(self, message: str, *args: Any) -> None:
        """Report something hashgen ignored and worked around."""
