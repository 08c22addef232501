"""Health check service module."""

from functools import lru_cache
from typing import Any

from loguru import logger
from pydantic import BaseModel, Field

from sample_api.checks import default_checks
from sample_api.readiness import ReadinessCheck, ReadinessCheckResult, ServerState, determine_server_state
from sample_api.services.ping_service import get_ping_service
from sample_api.utils.version import get_version


class HealthCheckResult(BaseModel):
    """Pydantic model representing the full health check response."""

    model_config = {"use_enum_values": True}

    status: str
    server_state: ServerState
    version_info: dict[str, Any] = Field(default_factory=dict)
    checks: list[ReadinessCheckResult] = Field(default_factory=list)


class HealthCheckService:
    """Service for performing health checks on the application."""

    def __init__(self, checks: list[ReadinessCheck] | None = None):
        self._checks = checks if checks is not None else default_checks(get_ping_service())
        self._last_result: HealthCheckResult | None = None

    def get_server_state(self) -> ServerState:
        """Return the state from the last run, or STARTING if none ran yet."""
        if self._last_result is None:
            return ServerState.STARTING
        return ServerState(self._last_result.server_state)

    def perform_health_check(self) -> HealthCheckResult:
        """Run every registered check and return the combined result."""
        logger.info(f"Running {len(self._checks)} readiness checks")

        results = [check.run() for check in self._checks]
        for result in results:
            logger.debug(f"Check '{result.check_name}': {result.status} - {result.message}")

        server_state = determine_server_state(results)
        self._last_result = HealthCheckResult(
            status="ok" if server_state == ServerState.OPERATIONAL else "error",
            server_state=server_state,
            version_info=get_version().model_dump(),
            checks=results,
        )
        return self._last_result


@lru_cache
def get_health_check_service() -> HealthCheckService:
    """Return cached process-wide ``HealthCheckService`` (singleton)."""
    return HealthCheckService()
