"""Built-in readiness checks."""

from sample_api.constants import PONG
from sample_api.readiness import ReadinessCheck, ReadinessCheckResult
from sample_api.services.ping_service import PingService, resolve_timezone


class PingCheck(ReadinessCheck):
    """Verify the ping service still answers with the fixed payload."""

    def __init__(self, ping_service: PingService):
        super().__init__("ping")
        self.ping_service = ping_service

    def _execute(self) -> ReadinessCheckResult:
        payload = self.ping_service.pong().model_dump()
        if payload != {"ping": PONG}:
            return self.failed("Ping returned an unexpected payload", {"payload": payload})
        return self.success("Ping answers pong", {"payload": payload})


class ClockCheck(ReadinessCheck):
    """Verify the configured default time zone resolves."""

    def __init__(self, ping_service: PingService):
        super().__init__("clock")
        self.ping_service = ping_service

    def _execute(self) -> ReadinessCheckResult:
        zone = self.ping_service.settings.timezone
        # Raises InvalidTimezoneError, which run() reports as a failure
        resolve_timezone(zone)
        return self.success(f"Default time zone '{zone}' resolves", {"timezone": zone})


def default_checks(ping_service: PingService) -> list[ReadinessCheck]:
    return [PingCheck(ping_service), ClockCheck(ping_service)]
