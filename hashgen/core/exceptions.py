"""
Errors raised by hashgen.

All of them derive from HashgenException. The usage errors also subclass
the matching builtin (TypeError, LookupError, ValueError) so code written
against plain Python exceptions keeps working.
"""

from __future__ import annotations

from typing import Any


class HashgenException(Exception):
    """Root of the hashgen error tree.

    ``context`` holds the names and values involved in the failure and is
    appended to the message when the error is printed.
    """

    def __init__(
        self,
        message: str,
        *,
        context: dict[str, Any] | None = None,
        cause: BaseException | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.context = {k: v for k, v in (context or {}).items() if v is not None}
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        if not self.context:
            return self.message
        details = ", ".join(f"{key}={value!r}" for key, value in self.context.items())
        return f"{self.message} ({details})"


class InvalidArgumentError(HashgenException, TypeError):
    """Wrong kind of algorithm name, algorithm object, data or option value."""

    def __init__(self, message: str, *, received_type: str | None = None) -> None:
        super().__init__(message)
        self.received_type = received_type


class UnknownAlgorithmError(HashgenException, LookupError):
    """Name is neither registered on the generator nor known to the backend."""

    def __init__(self, algorithm_name: str) -> None:
        super().__init__(f"Algorithm '{algorithm_name}' is not registered")
        self.algorithm_name = algorithm_name


class DigestBackendError(HashgenException):
    """The backend advertised an algorithm it then failed to compute."""

    def __init__(
        self, message: str, *, algorithm: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message, context={"algorithm": algorithm}, cause=cause)


class HashgenConfigError(HashgenException):
    """Configuration could not be loaded."""


class ConfigFileError(HashgenConfigError):
    """An explicitly requested config file is missing."""

    def __init__(self, message: str, *, file_path: str | None = None) -> None:
        super().__init__(message, context={"file_path": file_path})


class ConfigValidationError(HashgenConfigError, ValueError):
    """A setting from TOML, the environment or code failed validation.

    ``key`` is the dotted setting name, e.g. ``hash.xof_length``.
    """

    def __init__(
        self, message: str, *, key: str | None = None, cause: BaseException | None = None
    ) -> None:
        super().__init__(message, context={"key": key}, cause=cause)
        self.key = key
