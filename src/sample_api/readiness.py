"""Readiness check primitives.

A readiness check subclasses ``ReadinessCheck`` and implements ``_execute``.
The health check service runs the checks and folds their results into a
``ServerState``.
"""

from abc import ABC, abstractmethod
from enum import StrEnum
from typing import Any

import arrow
from loguru import logger
from pydantic import BaseModel, Field


class CheckStatus(StrEnum):
    """Status of an individual check."""

    SUCCESS = "success"
    WARNING = "warning"
    FAILED = "failed"


class ServerState(StrEnum):
    """Overall server health state."""

    STARTING = "starting"
    OPERATIONAL = "operational"
    DEGRADED = "degraded"  # Warnings only
    ERROR = "error"


class ReadinessCheckResult(BaseModel):
    """Result of an individual readiness check."""

    model_config = {"use_enum_values": True}

    check_name: str
    status: CheckStatus
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
    executed_at: str | None = None  # ISO 8601 UTC timestamp
    execution_time_ms: float | None = None


class ReadinessCheck(ABC):
    """Abstract base class for individual readiness checks."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def _execute(self) -> ReadinessCheckResult:
        """Execute the check. Implemented by subclasses."""

    def run(self) -> ReadinessCheckResult:
        """Execute the check, timing it and turning exceptions into failures."""
        started = arrow.utcnow()
        try:
            result = self._execute()
        except Exception as e:
            logger.error(f"Check '{self.name}' raised: {e}")
            result = self.failed(f"Check raised {type(e).__name__}: {e}")

        finished = arrow.utcnow()
        result.executed_at = finished.isoformat()
        result.execution_time_ms = (finished.float_timestamp - started.float_timestamp) * 1000
        return result

    def success(self, message: str, details: dict[str, Any] | None = None) -> ReadinessCheckResult:
        return self._result(CheckStatus.SUCCESS, message, details)

    def warning(self, message: str, details: dict[str, Any] | None = None) -> ReadinessCheckResult:
        return self._result(CheckStatus.WARNING, message, details)

    def failed(self, message: str, details: dict[str, Any] | None = None) -> ReadinessCheckResult:
        return self._result(CheckStatus.FAILED, message, details)

    def _result(self, status: CheckStatus, message: str, details: dict[str, Any] | None) -> ReadinessCheckResult:
        return ReadinessCheckResult(check_name=self.name, status=status, message=message, details=details or {})


def determine_server_state(results: list[ReadinessCheckResult]) -> ServerState:
    """Fold check results into a server state.

    Any failure means ERROR, warnings alone mean DEGRADED, and no checks at
    all means the server has not finished STARTING.
    """
    if not results:
        return ServerState.STARTING
    statuses = {r.status for r in results}
    if CheckStatus.FAILED in statuses:
        return ServerState.ERROR
    if CheckStatus.WARNING in statuses:
        return ServerState.DEGRADED
    return ServerState.OPERATIONAL
