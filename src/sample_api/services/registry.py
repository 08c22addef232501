"""Service registry for dependency injection."""

from collections.abc import Callable
from functools import lru_cache
from typing import Any, TypeVar, cast

T = TypeVar("T")
ServiceFactory = Callable[[], T]
ServiceProvider = T | ServiceFactory[T]


class ServiceRegistry:
    """Registry for shared services, holding either instances or factories."""

    def __init__(self):
        self._services: dict[str, ServiceProvider[Any]] = {}

    def register_singleton(self, service_type: type[T], instance: T) -> None:
        """Register a ready-made instance under its type."""
        self._services[service_type.__name__] = instance

    def register_factory(self, service_type: type[T], factory: ServiceFactory[T]) -> None:
        """Register a zero-argument factory under its type."""
        self._services[service_type.__name__] = factory

    def get(self, service_type: type[T]) -> T:
        """Get a service instance by type.

        Raises:
            KeyError: If the requested service is not registered
        """
        service_name = service_type.__name__

        if service_name not in self._services:
            raise KeyError(f"Service {service_name} not registered")

        provider = self._services[service_name]

        # Factories are plain callables; instances of the service type are returned as-is
        if callable(provider) and not isinstance(provider, service_type):
            return provider()

        return cast(T, provider)


@lru_cache
def get_service_registry() -> ServiceRegistry:
    """Return the process-wide service registry."""
    return ServiceRegistry()
