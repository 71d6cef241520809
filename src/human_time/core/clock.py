"""Clock abstraction and time zone resolution."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timedelta, tzinfo
from typing import TYPE_CHECKING, Protocol
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from human_time.core.calendar import to_local
from human_time.core.exceptions import ConfigError

if TYPE_CHECKING:
    from human_time.core.config import HumanTimeConfig

# Names that select the host's local time rather than an IANA zone
_LOCAL_NAMES = frozenset({"", "local", "localtime"})

TZ_ENV_VAR = "HUMAN_TIME_TZ"


class Clock(Protocol):
    """Source of the current instant and the zone used for zoneless input.

    ``tz`` of None means the host's local time. ``now()`` may be in any
    zone; the parser converts it to ``tz``.
    """

    @property
    def tz(self) -> tzinfo | None: ...

    def now(self) -> datetime: ...


class SystemClock:
    """Wall clock, optionally pinned to a time zone."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    @property
    def tz(self) -> tzinfo | None:
        return self._tz

    def now(self) -> datetime:
        if self._tz is None:
            return datetime.now().astimezone()
        return datetime.now(self._tz)

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


@dataclass
class FixedClock:
    """Deterministic clock that only moves when told to.

    Example:
        clock = FixedClock(datetime(2015, 5, 14, 12, tzinfo=timezone.utc))
        clock.advance(timedelta(hours=1))
    """

    instant: datetime
    zone: tzinfo | None = None

    def __post_init__(self) -> None:
        if self.instant.tzinfo is None:
            raise ValueError("FixedClock requires a timezone-aware datetime")
        if self.zone is None:
            self.zone = self.instant.tzinfo

    @property
    def tz(self) -> tzinfo | None:
        return self.zone

    def now(self) -> datetime:
        return to_local(self.instant, self.zone)

    def advance(self, delta: timedelta) -> None:
        self.instant = self.instant + delta


def resolve_timezone(name: str | None) -> tzinfo | None:
    """Turn a zone name into a tzinfo.

    ``None``, ``""`` and ``"local"`` select the host's local time (None).

    Raises:
        ConfigError: If *name* is not a known IANA zone.
    """
    if name is None or name.strip().lower() in _LOCAL_NAMES:
        return None
    try:
        return ZoneInfo(name.strip())
    except (ZoneInfoNotFoundError, ValueError) as e:
        raise ConfigError(f"Unknown time zone: {name!r}") from e


def detect_timezone(config: HumanTimeConfig | None = None) -> tzinfo | None:
    """Pick the local zone for a new clock.

    Order of precedence:
    1. HUMAN_TIME_TZ environment variable
    2. ``timezone`` from the configuration file
    3. Host local time (None)
    """
    if name := os.environ.get(TZ_ENV_VAR):
        return resolve_timezone(name)

    if config is not None and config.timezone:
        return resolve_timezone(config.timezone)

    return None
