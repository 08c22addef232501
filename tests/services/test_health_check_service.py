"""Tests for the health check service and readiness primitives."""

import arrow
import pytest

from sample_api.checks import ClockCheck, PingCheck, default_checks
from sample_api.readiness import (
    CheckStatus,
    ReadinessCheck,
    ReadinessCheckResult,
    ServerState,
    determine_server_state,
)
from sample_api.services.health_check_service import HealthCheckService
from sample_api.services.ping_service import PingService
from sample_api.settings import Settings


class StaticCheck(ReadinessCheck):
    """Check that always reports the status it was built with."""

    def __init__(self, name: str, status: CheckStatus):
        super().__init__(name)
        self.status = status

    def _execute(self) -> ReadinessCheckResult:
        return self._result(self.status, f"{self.name} {self.status}", None)


class BrokenCheck(ReadinessCheck):
    def _execute(self) -> ReadinessCheckResult:
        raise RuntimeError("disk on fire")


def _check(name: str, status: CheckStatus) -> ReadinessCheck:
    return StaticCheck(name, status)


def _result(status: CheckStatus) -> ReadinessCheckResult:
    return ReadinessCheckResult(check_name="c", status=status, message="m")


class TestReadinessCheck:
    def test_run_success(self):
        result = _check("demo", CheckStatus.SUCCESS).run()
        assert result.check_name == "demo"
        assert result.status == CheckStatus.SUCCESS
        assert result.message == "demo success"
        assert result.execution_time_ms is not None and result.execution_time_ms >= 0
        assert arrow.get(result.executed_at) <= arrow.utcnow()

    def test_exception_becomes_failure(self):
        result = BrokenCheck("boom").run()
        assert result.status == CheckStatus.FAILED
        assert "RuntimeError" in result.message
        assert "disk on fire" in result.message


@pytest.mark.parametrize(
    "statuses,expected",
    [
        ([], ServerState.STARTING),
        ([CheckStatus.SUCCESS, CheckStatus.SUCCESS], ServerState.OPERATIONAL),
        ([CheckStatus.SUCCESS, CheckStatus.WARNING], ServerState.DEGRADED),
        ([CheckStatus.WARNING, CheckStatus.FAILED], ServerState.ERROR),
    ],
)
def test_determine_server_state(statuses: list[CheckStatus], expected: ServerState):
    assert determine_server_state([_result(s) for s in statuses]) == expected


class TestBuiltInChecks:
    def test_ping_check_passes(self):
        result = PingCheck(PingService(Settings(_env_file=None))).run()
        assert result.status == CheckStatus.SUCCESS
        assert result.details == {"payload": {"ping": "pong"}}

    def test_clock_check_passes_for_valid_zone(self):
        result = ClockCheck(PingService(Settings(_env_file=None, timezone="Europe/Berlin"))).run()
        assert result.status == CheckStatus.SUCCESS
        assert result.details == {"timezone": "Europe/Berlin"}

    def test_clock_check_fails_for_unknown_zone(self):
        result = ClockCheck(PingService(Settings(_env_file=None, timezone="Mars/Olympus_Mons"))).run()
        assert result.status == CheckStatus.FAILED
        assert "Mars/Olympus_Mons" in result.message

    def test_default_checks_names(self):
        names = [check.name for check in default_checks(PingService(Settings(_env_file=None)))]
        assert names == ["ping", "clock"]


class TestHealthCheckService:
    def test_state_before_first_run(self):
        service = HealthCheckService(checks=[])
        assert service.get_server_state() == ServerState.STARTING

    def test_all_checks_pass(self):
        service = HealthCheckService(checks=[_check("a", CheckStatus.SUCCESS), _check("b", CheckStatus.SUCCESS)])
        result = service.perform_health_check()
        assert result.status == "ok"
        assert result.server_state == ServerState.OPERATIONAL
        assert [c.check_name for c in result.checks] == ["a", "b"]
        assert result.version_info["version"]
        assert service.get_server_state() == ServerState.OPERATIONAL

    def test_warning_degrades(self):
        service = HealthCheckService(checks=[_check("a", CheckStatus.SUCCESS), _check("b", CheckStatus.WARNING)])
        result = service.perform_health_check()
        assert result.status == "error"
        assert result.server_state == ServerState.DEGRADED

    def test_failure_is_error(self):
        service = HealthCheckService(checks=[_check("a", CheckStatus.FAILED)])
        result = service.perform_health_check()
        assert result.status == "error"
        assert service.get_server_state() == ServerState.ERROR

    def test_default_checks_are_operational(self):
        result = HealthCheckService().perform_health_check()
        assert result.status == "ok"
        assert {c.check_name for c in result.checks} == {"ping", "clock"}
