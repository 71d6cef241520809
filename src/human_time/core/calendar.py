"""Calendar arithmetic in a caller-supplied local zone.

Every function takes the zone explicitly. A zone of None means the host's
local time, resolved per date with :meth:`datetime.astimezone` so that each
date gets its own UTC offset.
"""

from __future__ import annotations

from datetime import datetime, time, timedelta, timezone, tzinfo


def localize(naive: datetime, tz: tzinfo | None) -> datetime:
    """Attach *tz* to a naive wall-clock time.

    Wall times that fall in a DST gap are moved forward through a UTC round
    trip, so the result always exists in *tz*.
    """
    if tz is None:
        return naive.astimezone()
    aware = naive.replace(tzinfo=tz)
    return aware.astimezone(timezone.utc).astimezone(tz)


def to_local(instant: datetime, tz: tzinfo | None) -> datetime:
    """Express an aware instant in *tz*."""
    if tz is None:
        return instant.astimezone()
    return instant.astimezone(tz)


def shift(instant: datetime, delta: timedelta, tz: tzinfo | None) -> datetime:
    """Move *instant* by *delta* of elapsed time (not wall time)."""
    return to_local(instant.astimezone(timezone.utc) + delta, tz)


def add_months(year: int, month: int, delta: int) -> tuple[int, int]:
    """Return ``(year, month)`` moved by *delta* months, month in 1..12."""
    years, month0 = divmod(year * 12 + (month - 1) + delta, 12)
    return years, month0 + 1


def from_fields(
    tz: tzinfo | None,
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    microsecond: int = 0,
) -> datetime:
    """Build a local datetime, normalizing out-of-range fields.

    Month 13 becomes January of the next year, day 0 the last day of the
    previous month, hour 24 midnight of the next day, and so on.

    Raises:
        ValueError, OverflowError: If the normalized year leaves 1..9999.
    """
    year, month = add_months(year, month, 0)
    naive = datetime(year, month, 1) + timedelta(
        days=day - 1,
        hours=hour,
        minutes=minute,
        seconds=second,
        microseconds=microsecond,
    )
    return localize(naive, tz)


def truncate_month(t: datetime, tz: tzinfo | None) -> datetime:
    return localize(datetime(t.year, t.month, 1), tz)


def truncate_week(t: datetime, tz: tzinfo | None) -> datetime:
    """Midnight of the Monday starting the week that contains *t*."""
    monday = t.date() - timedelta(days=t.weekday())
    return localize(datetime.combine(monday, time()), tz)


def truncate_day(t: datetime, tz: tzinfo | None) -> datetime:
    return localize(datetime(t.year, t.month, t.day), tz)


def truncate_hour(t: datetime, tz: tzinfo | None) -> datetime:
    # Offsets only change on hour boundaries, so stepping back within the
    # hour on the absolute timeline keeps the offset of *t*.
    elapsed = timedelta(minutes=t.minute, seconds=t.second, microseconds=t.microsecond)
    return shift(t, -elapsed, tz)
