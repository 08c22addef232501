"""Ping service: the fixed pong payload and its dated variant."""

from collections.abc import Callable
from datetime import tzinfo
from functools import lru_cache

import arrow
from arrow.parser import ParserError, TzinfoParser
from pydantic import BaseModel

from sample_api.constants import PONG
from sample_api.exceptions import InvalidTimezoneError
from sample_api.settings import Settings, get_settings

Clock = Callable[[], arrow.Arrow]


class PingResponse(BaseModel):
    """Ping response model."""

    ping: str = PONG


class PingDateResponse(BaseModel):
    """Ping response carrying the server time."""

    ping: str = PONG
    date: str  # ISO 8601 with UTC offset


def resolve_timezone(name: str) -> tzinfo:
    """Resolve a zone name (``UTC``, ``Europe/Berlin``) to a tzinfo.

    Raises:
        InvalidTimezoneError: If the name is empty or unknown.
    """
    if not name or not name.strip():
        raise InvalidTimezoneError(name)
    # zoneinfo raises ValueError for paths and null bytes, OSError for overlong names
    try:
        return TzinfoParser.parse(name.strip())
    except (ParserError, ValueError, OSError) as e:
        raise InvalidTimezoneError(name) from e


class PingService:
    """Builds ping responses.

    The clock is injectable so tests can pin the reported time.
    """

    def __init__(self, settings: Settings | None = None, clock: Clock = arrow.utcnow):
        self.settings = settings or get_settings()
        self._clock = clock

    def pong(self) -> PingResponse:
        return PingResponse()

    def pong_with_date(self, timezone: str | None = None) -> PingDateResponse:
        """Return the pong payload stamped with the current time.

        Args:
            timezone: Zone to express the time in; falls back to ``settings.timezone``.

        Raises:
            InvalidTimezoneError: If the zone cannot be resolved.
        """
        zone = resolve_timezone(timezone or self.settings.timezone)
        now = self._clock().to(zone)
        return PingDateResponse(date=now.isoformat())


@lru_cache
def get_ping_service() -> PingService:
    """Return cached process-wide ``PingService`` (singleton)."""
    return PingService(get_settings())
