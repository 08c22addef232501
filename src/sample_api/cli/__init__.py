"""CLI module for sample-api.

Provides command-line tools for the CI workflow and readiness checks.
"""

from sample_api.cli.app import app

__all__ = ["app"]
