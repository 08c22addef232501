"""Common exceptions for the sample API.

This module contains the exception classes raised by services and the
workflow tooling. HTTP mapping lives in ``exception_handlers``.
"""

from pathlib import Path


class InvalidTimezoneError(Exception):
    """Raised when a requested time zone name cannot be resolved."""

    def __init__(self, timezone: str):
        self.timezone = timezone
        super().__init__(f"Unknown time zone: {timezone}")


class WorkflowError(Exception):
    """Base class for CI workflow file problems."""


class WorkflowNotFoundError(WorkflowError):
    """Raised when the workflow file does not exist."""

    def __init__(self, path: str | Path):
        self.path = Path(path)
        super().__init__(f"Workflow file not found: {self.path}")


class WorkflowParseError(WorkflowError):
    """Raised when the workflow file is not valid YAML or has the wrong shape."""

    def __init__(self, path: str | Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Cannot parse workflow file {self.path}: {reason}")
