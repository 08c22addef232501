"""Main entry point for the sample API using Typer and Pydantic Settings."""

import asyncio

import typer
import uvicorn
from loguru import logger

from sample_api.logging import setup_logging
from sample_api.settings import get_settings

app = typer.Typer()


HOST_OPTION = typer.Option(
    None,
    help="Host to bind the server to (overrides SAMPLE_API_HOST)",
    metavar="<server>",
)  # fmt: skip
PORT_OPTION = typer.Option(
    None,
    help="Port to bind the server to (overrides SAMPLE_API_PORT)",
    metavar="<port>",
)  # fmt: skip
RELOAD_OPTION = typer.Option(
    None,
    help="Enable/disable auto-reload (overrides SAMPLE_API_RELOAD)",
)  # fmt: skip
LOG_LEVEL_OPTION = typer.Option(
    None,
    help="Log level (overrides SAMPLE_API_LOG_LEVEL)",
    metavar="<level>",
    case_sensitive=False,
)  # fmt: skip
TIMEZONE_OPTION = typer.Option(
    None,
    "--timezone",
    help="Default time zone for /ping/date (overrides SAMPLE_API_TIMEZONE)",
    metavar="<zone>",
)  # fmt: skip


def _update_settings(
    host: str | None = None,
    port: int | None = None,
    log_level: str | None = None,
    reload: bool | None = None,
    timezone: str | None = None,
) -> None:
    """Apply CLI overrides to the cached settings."""
    settings = get_settings()

    if host is not None:
        settings.host = host
    if port is not None:
        settings.port = port
    if log_level is not None:
        settings.log_level = log_level.upper()
    if reload is not None:
        settings.reload = reload
    if timezone is not None:
        settings.timezone = timezone


@app.command()
def run(
    host: str = HOST_OPTION,
    port: int = PORT_OPTION,
    log_level: str = LOG_LEVEL_OPTION,
    reload: bool = RELOAD_OPTION,
    timezone: str = TIMEZONE_OPTION,
) -> None:
    """Run the sample API server."""
    _update_settings(host, port, log_level, reload, timezone)
    settings = get_settings()

    setup_logging(settings.log_level)

    logger.info(f"Starting sample API on {settings.host}:{settings.port}")
    logger.info(f"Reload: {settings.reload}")

    # Reload mode needs an import string
    if settings.reload:
        uvicorn.run(
            "sample_api.app:app",
            host=settings.host,
            port=settings.port,
            reload=True,
            log_level=settings.log_level.lower(),
        )
    else:
        from sample_api.app import app as fastapi_app

        uvicorn.run(
            fastapi_app,
            host=settings.host,
            port=settings.port,
            reload=False,
            log_level=settings.log_level.lower(),
        )


@app.command()
def check(
    log_level: str = LOG_LEVEL_OPTION,
    timezone: str = TIMEZONE_OPTION,
) -> None:
    """Run readiness checks only."""
    _update_settings(log_level=log_level, timezone=timezone)
    settings = get_settings()

    setup_logging(settings.log_level)
    logger.info("Running readiness checks only")

    from sample_api.app import perform_startup_checks

    try:
        asyncio.run(perform_startup_checks(settings))
        logger.info("Readiness checks completed successfully")
    except SystemExit:
        raise
    except Exception as e:
        logger.error(f"Readiness checks failed: {e}")
        raise SystemExit(1) from None


if __name__ == "__main__":
    app()
