"""Global exception handlers for the FastAPI application.

This module contains custom exception handlers that convert
application exceptions into proper HTTP responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from loguru import logger

from sample_api.exceptions import InvalidTimezoneError


def register_exception_handlers(app: FastAPI) -> None:
    """Register all custom exception handlers with the FastAPI app.

    Args:
        app: The FastAPI application instance
    """

    @app.exception_handler(InvalidTimezoneError)
    async def invalid_timezone_handler(request: Request, exc: InvalidTimezoneError) -> JSONResponse:
        logger.info(f"Rejected request to {request.url.path}: {exc}")
        return JSONResponse(status_code=400, content={"detail": str(exc)})

    logger.debug("Registered exception handlers")
