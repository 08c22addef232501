"""Health check API endpoint."""

from fastapi import APIRouter, Depends
from loguru import logger

from sample_api.api.dependencies import service
from sample_api.services.health_check_service import HealthCheckResult, HealthCheckService

router = APIRouter(tags=["System"])

health_service_dependency = Depends(service(HealthCheckService))


@router.get("/health-check", response_model=HealthCheckResult)
async def health_check(health_service: HealthCheckService = health_service_dependency) -> HealthCheckResult:
    """
    Health check endpoint.

    Returns:
        HealthCheckResult: overall status, server state, version and per-check results.
    """
    logger.debug("Health check requested")
    return health_service.perform_health_check()
