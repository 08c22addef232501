"""Dependency injection setup module.

This module provides centralized service registration for both
the FastAPI server and the CLI.
"""

from loguru import logger

from sample_api.services.health_check_service import HealthCheckService, get_health_check_service
from sample_api.services.ping_service import PingService, get_ping_service
from sample_api.services.registry import ServiceRegistry


def register_all_services(registry: ServiceRegistry) -> None:
    """Register all services in the service registry.

    Services are registered as factories; their get_*_service() functions
    already provide singleton behavior via @lru_cache.
    """
    logger.debug("Registering services in DI container")

    registry.register_factory(PingService, get_ping_service)
    registry.register_factory(HealthCheckService, get_health_check_service)
