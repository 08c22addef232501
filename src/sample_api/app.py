"""Main FastAPI application module."""

from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from sample_api.api.health_check import router as health_router
from sample_api.api.ping import router as ping_router
from sample_api.api.version import router as version_router
from sample_api.exception_handlers import register_exception_handlers
from sample_api.logging import setup_logging
from sample_api.readiness import ServerState
from sample_api.services.di import register_all_services
from sample_api.services.health_check_service import HealthCheckResult, HealthCheckService
from sample_api.services.registry import get_service_registry
from sample_api.settings import Settings, get_settings
from sample_api.utils.version import get_version

ENDPOINTS = [
    ("Home", "/"),
    ("Ping", "/ping"),
    ("Ping with date", "/ping/date"),
    ("Health Check", "/health-check"),
    ("Version", "/version"),
    ("OpenAPI Schema", "/openapi.json"),
    ("API Docs", "/docs"),
    ("ReDoc", "/redoc"),
]


def _log_startup_check_results(health_result: HealthCheckResult) -> None:
    """Log a concise summary of startup check results, exiting on ERROR."""
    if health_result.server_state == ServerState.ERROR:
        logger.error("Startup readiness checks failed")
        for check in health_result.checks:
            if check.status != "success":
                logger.error(f"  {check.check_name}: {check.message}")
        raise SystemExit(1)
    elif health_result.server_state == ServerState.DEGRADED:
        logger.warning("Server starting in degraded state")
    else:
        logger.info("All startup readiness checks passed successfully")
    logger.info(f"Server state: {health_result.server_state}")


def _log_server_endpoints_summary(settings: Settings) -> None:
    server_url = f"http://{settings.host}:{settings.port}"
    logger.info(f"Server running at: {server_url}")
    logger.info("Available endpoints:")
    for name, path in ENDPOINTS:
        logger.info(f"   {name}: {server_url}{path}")


async def perform_startup_checks(app_settings: Settings) -> None:
    """Perform startup readiness checks without starting the server.

    Also used by the ``check`` command for check-only mode.

    Raises:
        SystemExit: If readiness checks fail
    """
    setup_logging(log_level=app_settings.log_level)

    logger.info("Registering services in the service registry")
    registry = get_service_registry()
    register_all_services(registry)

    logger.info("Sample API performing startup checks")
    health_result = registry.get(HealthCheckService).perform_health_check()
    _log_startup_check_results(health_result)


@asynccontextmanager
async def app_lifespan(_app: FastAPI):
    """Handle startup and shutdown events for the application."""
    settings = get_settings()

    await perform_startup_checks(settings)
    _log_server_endpoints_summary(settings)

    yield

    logger.info("Sample API shutting down")


app = FastAPI(
    lifespan=app_lifespan,
    title="Sample API",
    description="Sample web service built and tested by a CI pipeline",
    version=get_version().version,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # In production, replace with specific origins
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

app.include_router(ping_router, prefix="")
app.include_router(health_router, prefix="")
app.include_router(version_router, prefix="/version")


@app.get("/")
async def read_root() -> dict:
    """Describe the service: name, version and endpoints."""
    return {
        "name": app.title,
        "version": get_version().version,
        "endpoints": {name: path for name, path in ENDPOINTS},
    }
