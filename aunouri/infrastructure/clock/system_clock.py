"""System wall clock bound to the user's timezone."""

from datetime import datetime, timezone, tzinfo
from typing import Optional, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from aunouri.domain.access_tier.core.ports.clock import IClock
from aunouri.infrastructure.config import get_user_timezone


def resolve_timezone(name: Optional[str] = None) -> tzinfo:
    """
    Resolve an IANA zone name.

    Args:
        name: Zone name (default: AUNOURI_TIMEZONE)

    Raises:
        ValueError: If the zone is unknown
    """
    zone_name = name or get_user_timezone()
    if zone_name.upper() == "UTC":
        return timezone.utc
    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ValueError(f"Unknown timezone: {zone_name}") from e


class SystemClock(IClock):
    """Clock reading the system time in a fixed timezone."""

    def __init__(self, tz: Optional[Union[tzinfo, str]] = None) -> None:
        self._tz = tz if isinstance(tz, tzinfo) else resolve_timezone(tz)

    @property
    def tz(self) -> tzinfo:
        return self._tz

    def now(self) -> datetime:
        return datetime.now(self._tz)
