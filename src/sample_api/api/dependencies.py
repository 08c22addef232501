"""API dependencies for FastAPI endpoints."""

from collections.abc import Callable
from typing import TypeVar

from sample_api.services.registry import get_service_registry

T = TypeVar("T")


def service[T](service_type: type[T]) -> Callable[[], T]:
    """FastAPI dependency that provides a service by type.

    The lookup happens per request, so a service swapped in the registry
    takes effect without rebuilding the app.

    Example:
        ```python
        @router.get("/endpoint")
        def endpoint(ping_service: PingService = Depends(service(PingService))):
            return ping_service.pong()
        ```
    """

    def get_service() -> T:
        return get_service_registry().get(service_type)

    return get_service
