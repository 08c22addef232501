"""CLI entry point.

Usage:
    python -m sample_api.cli workflow render
    sample-api-cli workflow check
    sample-api-cli workflow required-checks
    sample-api-cli health
"""

from loguru import logger

import sample_api
from sample_api.cli.app import app
from sample_api.logging import setup_cli_logging


def main() -> None:
    """CLI entry point with logging configuration."""
    setup_cli_logging()
    logger.enable(sample_api.__name__)
    app()


if __name__ == "__main__":
    main()
