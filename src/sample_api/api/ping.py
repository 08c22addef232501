"""Ping API endpoints."""

from fastapi import APIRouter, Depends, Query

from sample_api.api.dependencies import service
from sample_api.services.ping_service import PingDateResponse, PingResponse, PingService

router = APIRouter(tags=["System"])

ping_service_dependency = Depends(service(PingService))
TZ_QUERY = Query(
    default=None,
    description="Time zone for the date, e.g. 'Europe/Berlin'. Defaults to the server setting.",
)  # fmt: skip


@router.get("/ping", response_model=PingResponse)
async def ping(ping_service: PingService = ping_service_dependency) -> PingResponse:
    """
    Simple ping endpoint that returns a pong response.

    Used for basic connectivity testing; touches no storage and needs no
    authentication.

    Returns:
        PingResponse: {"ping": "pong"}
    """
    return ping_service.pong()


@router.get("/ping/date", response_model=PingDateResponse)
async def ping_date(
    tz: str | None = TZ_QUERY,
    ping_service: PingService = ping_service_dependency,
) -> PingDateResponse:
    """Ping endpoint that also reports the server time.

    Returns:
        PingDateResponse: {"ping": "pong", "date": "<ISO 8601 timestamp>"}
    """
    return ping_service.pong_with_date(tz)
