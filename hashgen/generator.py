"""
Hash generator facade.

Routes a hash request to a custom algorithm registered by the caller or,
failing that, to a built-in algorithm provided by the digest backend.
Custom registrations shadow built-ins of the same name without removing
them, so unregistering restores the built-in behavior.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from .algorithms.base import BaseHashAlgorithm, is_hash_algorithm, output_length
from .core.container import resolve_or_default, try_resolve
from .core.exceptions import InvalidArgumentError, UnknownAlgorithmError
from .core.interfaces.backend import DigestBackend
from .core.interfaces.logger import ILogger
from .core.models.config import HashConfig

if TYPE_CHECKING:
    from .core.models.config import HashgenConfig
    from .core.settings import HashgenSettings


def _default_backend() -> DigestBackend:
    from .backends.hashlib_backend import HashlibBackend

    return HashlibBackend()


def _default_logger() -> ILogger:
    from .services.logging import NullLogger

    return NullLogger()


def _default_hash_config() -> HashConfig:
    from .core.settings import HashgenSettings

    settings = try_resolve(HashgenSettings)
    return settings.hash if settings is not None else HashConfig()


class HashGenerator:
    """
    Generates hashes using built-in or custom algorithms.

    Built-in algorithms come from the digest backend (hashlib by default)
    and are always available. Custom algorithms are registered per
    instance and take precedence over a built-in with the same name.

    Example:
        generator = HashGenerator()
        generator.generate("md5", "some_data")
        # '0d9247cbce34aba4aca8d5c887a0f0a4'

        generator.register("reverse", lambda data, options: data[::-1])
        generator.generate("reverse", "abc")
        # 'cba'
    """

    def __init__(
        self,
        backend: DigestBackend | None = None,
        *,
        encoding: str | None = None,
        xof_length: int | None = None,
        logger: ILogger | None = None,
    ):
        """
        Initialize the generator.

        Args:
            backend: Provider of built-in algorithms (defaults to the
                container's DigestBackend, then hashlib)
            encoding: Text encoding applied to str data for built-ins
            xof_length: Default output length in bytes for SHAKE algorithms
            logger: Diagnostic logger (defaults to the container's ILogger)
        """
        self._backend = backend or resolve_or_default(DigestBackend, _default_backend)  # type: ignore[type-abstract]
        self._logger = logger or resolve_or_default(ILogger, _default_logger)  # type: ignore[type-abstract]

        defaults = _default_hash_config()
        self._config = HashConfig(
            encoding=encoding if encoding is not None else defaults.encoding,
            xof_length=xof_length if xof_length is not None else defaults.xof_length,
        )

        self._custom_algorithms: dict[str, Callable[[Any, dict[str, Any]], Any]] = {}

    @classmethod
    def from_settings(
        cls,
        settings: HashgenSettings | HashgenConfig,
        backend: DigestBackend | None = None,
    ) -> HashGenerator:
        """Create a generator using the [hash] section of loaded settings."""
        return cls(
            backend,
            encoding=settings.hash.encoding,
            xof_length=settings.hash.xof_length,
        )

    # -------------------------------------------------------------------------
    # Registration
    # -------------------------------------------------------------------------

    def register(self, algorithm_name: str, algorithm: Any) -> None:
        """
        Register a custom algorithm under algorithm_name.

        Registering a built-in name overrides the built-in for this instance.

        Args:
            algorithm_name: Name to register under
            algorithm: Callable ``(data, options) -> hash`` or an object
                implementing HashAlgorithm

        Raises:
            InvalidArgumentError: If algorithm is neither callable nor a HashAlgorithm
        """
        self._custom_algorithms[algorithm_name] = self._as_callable(algorithm)
        self._logger.debug("Registered custom hash algorithm '%s'", algorithm_name)

    def register_algorithm(self, algorithm: BaseHashAlgorithm) -> None:
        """Register a BaseHashAlgorithm under its own algorithm_name."""
        if not isinstance(algorithm, BaseHashAlgorithm):
            raise InvalidArgumentError(
                f"algorithm must be a BaseHashAlgorithm, got {type(algorithm).__name__}",
                received_type=type(algorithm).__name__,
            )
        self.register(algorithm.algorithm_name, algorithm)

    def unregister(self, algorithm_name: str) -> None:
        """
        Remove the custom algorithm registered under algorithm_name.

        Does nothing if there is none. Built-in algorithms are unaffected.
        """
        if self._custom_algorithms.pop(algorithm_name, None) is not None:
            self._logger.debug("Unregistered custom hash algorithm '%s'", algorithm_name)

    def is_registered(self, algorithm_name: str) -> bool:
        """Check if algorithm_name is a custom or built-in algorithm."""
        if not isinstance(algorithm_name, str):
            return False
        return self._is_custom(algorithm_name) or self._is_builtin(algorithm_name)

    def __contains__(self, algorithm_name: object) -> bool:
        return self.is_registered(algorithm_name)  # type: ignore[arg-type]

    @property
    def custom_algorithms(self) -> list[str]:
        """Names of the custom algorithms registered on this instance."""
        return sorted(self._custom_algorithms)

    @property
    def algorithms(self) -> list[str]:
        """All algorithm names this generator can dispatch to."""
        return sorted(set(self._custom_algorithms) | self._backend.available_algorithms())

    # -------------------------------------------------------------------------
    # Generation
    # -------------------------------------------------------------------------

    def generate(
        self,
        algorithm_name: str,
        data: Any,
        options: Mapping[str, Any] | None = None,
    ) -> Any:
        """
        Generate a hash of data using the algorithm named algorithm_name.

        Args:
            algorithm_name: Custom or built-in algorithm name
            data: Payload to hash
            options: Passed to custom algorithms as-is; built-ins honour
                ``raw_output`` and, for SHAKE, ``length``

        Returns:
            Whatever a custom algorithm returns; for built-ins a hex string,
            or bytes when raw_output is set

        Raises:
            InvalidArgumentError: If algorithm_name is not a string
            UnknownAlgorithmError: If no custom or built-in algorithm matches
        """
        if not isinstance(algorithm_name, str):
            received = type(algorithm_name).__name__
            raise InvalidArgumentError(
                f"algorithm_name must be a string, got {received}",
                received_type=received,
            )

        opts = dict(options) if options else {}

        if self._is_custom(algorithm_name):
            self._logger.debug("Hashing with custom algorithm '%s'", algorithm_name)
            return self._custom_algorithms[algorithm_name](data, opts)

        if self._is_builtin(algorithm_name):
            self._logger.debug("Hashing with built-in algorithm '%s'", algorithm_name)
            return self._call_builtin(algorithm_name, data, opts)

        raise UnknownAlgorithmError(algorithm_name)

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    @staticmethod
    def _as_callable(algorithm: Any) -> Callable[[Any, dict[str, Any]], Any]:
        if is_hash_algorithm(algorithm):
            return algorithm.hash
        if callable(algorithm):
            return algorithm
        raise InvalidArgumentError(
            "algorithm must be either callable or implement HashAlgorithm, "
            f"got {type(algorithm).__name__}",
            received_type=type(algorithm).__name__,
        )

    def _is_custom(self, algorithm_name: str) -> bool:
        return algorithm_name in self._custom_algorithms

    def _is_builtin(self, algorithm_name: str) -> bool:
        return self._backend.supports(algorithm_name)

    def _call_builtin(self, algorithm_name: str, data: Any, options: dict[str, Any]) -> str | bytes:
        raw_output = bool(options.get("raw_output", False))

        length = None
        if self._backend.is_variable_length(algorithm_name):
            length = output_length(options, self._config.xof_length)

        return self._backend.digest(
            algorithm_name, self._to_bytes(data), raw_output=raw_output, length=length
        )

    def _to_bytes(self, data: Any) -> bytes:
        if isinstance(data, str):
            return data.encode(self._config.encoding)
        if isinstance(data, (bytes, bytearray, memoryview)):
            return bytes(data)
        raise InvalidArgumentError(
            f"data must be str or bytes, got {type(data).__name__}",
            received_type=type(data).__name__,
        )
