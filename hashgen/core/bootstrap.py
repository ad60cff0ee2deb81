"""
One-time wiring of hashgen's shared services.

Without bootstrap(), every HashGenerator uses hashlib, default [hash]
settings and a silent logger. After it, generators built without explicit
arguments pick up the configured backend, settings and logger from the
service container.
"""

from pathlib import Path

from .container import ServiceContainer, get_container
from .interfaces.backend import DigestBackend
from .interfaces.logger import ILogger
from .settings import HashgenSettings, load_settings

_initialized = False


def bootstrap(
    config_path: Path | None = None,
    start_dir: str | None = None,
    settings: HashgenSettings | None = None,
) -> ServiceContainer:
    """
    Load settings and register the logger, digest backend and settings.

    Calling it again is a no-op until reset().

    Args:
        config_path: Config file to use instead of searching for one
        start_dir: Directory the config search starts from
        settings: Already loaded settings; skips loading entirely
    """
    global _initialized

    container = get_container()
    if _initialized:
        return container

    if settings is None:
        settings = load_settings(config_path=config_path, start_dir=start_dir)
    _register_core_services(container, settings)

    _initialized = True
    return container


def _register_core_services(container: ServiceContainer, settings: HashgenSettings) -> None:
    from ..backends.hashlib_backend import HashlibBackend
    from ..services.logging import HashgenLogger

    def create_logger() -> ILogger:
        return HashgenLogger(settings.logging)

    container.register_singleton(ILogger, factory=create_logger)  # type: ignore[type-abstract]
    container.register_singleton(DigestBackend, factory=HashlibBackend)  # type: ignore[type-abstract]
    container.register_singleton(HashgenSettings, implementation=settings)

    if settings.config_error:
        logger = container.resolve(ILogger)  # type: ignore[type-abstract]
        logger.warning("Using default configuration: %s", settings.config_error)


def reset() -> None:
    """Forget all registered services so the next bootstrap() starts over."""
    global _initialized
    ServiceContainer.reset()
    _initialized = False


def is_initialized() -> bool:
    return _initialized
