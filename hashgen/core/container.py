"""
Process-wide service registry.

bootstrap() fills it with the configured logger, digest backend and
settings. Library code asks for a service with resolve_or_default() so it
keeps working when nothing was bootstrapped.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import ClassVar, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Maps a service type to a dependency-injector provider."""

    _instance: ClassVar[ServiceContainer | None] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> ServiceContainer:
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """Bind interface to a ready instance, or to factory called on first use.

        A later registration for the same interface replaces the earlier one.
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError(f"No implementation or factory given for {interface.__name__}")
        self._providers[interface] = provider

    def resolve(self, interface: type[T]) -> T:
        """Return the service bound to interface; KeyError if there is none."""
        return self._providers[interface]()

    def try_resolve(self, interface: type[T]) -> T | None:
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    return ServiceContainer.get_instance()


def try_resolve(interface: type[T]) -> T | None:
    return get_container().try_resolve(interface)


def resolve_or_default(interface: type[T], default_factory: Callable[[], T]) -> T:
    """Return the registered service, or default_factory() when there is none."""
    instance = try_resolve(interface)
    return instance if instance is not None else default_factory()
