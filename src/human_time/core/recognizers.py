"""The ordered recognizer cascade.

Each recognizer pairs a regular expression with a handler that turns the
match into an instant. Order matters: the first recognizer whose pattern
matches and whose handler returns an instant wins.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Callable

from human_time.core.calendar import (
    add_months,
    from_fields,
    localize,
    shift,
    truncate_day,
    truncate_hour,
    truncate_month,
    truncate_week,
)
from human_time.core.duration import parse_duration, to_timedelta


@dataclass(frozen=True)
class Moment:
    """The clock reading shared by every recognizer during one parse."""

    now: datetime
    tz: tzinfo | None


Handler = Callable[[re.Match[str], Moment], "datetime | None"]


@dataclass(frozen=True)
class Recognizer:
    """One entry of the cascade.

    Attributes:
        name: Short identifier shown by ``htime patterns`` and ``--explain``.
        pattern: Compiled regular expression.
        handler: Builds the instant from a match; None means "not really a
            match, keep going".
        example: A sample input accepted by this recognizer.
        anchored: Always require the whole input to match.
        field: Name of the subfield reported when the handler fails.
    """

    name: str
    pattern: re.Pattern[str]
    handler: Handler
    example: str
    anchored: bool = False
    field: str = "number"

    def match(self, value: str, anchored: bool = False) -> re.Match[str] | None:
        if self.anchored:
            return self.pattern.fullmatch(value)
        if anchored:
            return self.pattern.fullmatch(value.strip())
        return self.pattern.search(value)


def _compile(pattern: str) -> re.Pattern[str]:
    return re.compile(pattern, re.ASCII)


def _micros(fraction: str | None) -> int:
    """Microseconds from the digits after a decimal point (extra digits dropped)."""
    if not fraction:
        return 0
    return int(fraction[:6].ljust(6, "0"))


# =============================================================================
# Absolute formats
# =============================================================================


def _rfc3339(m: re.Match[str], moment: Moment) -> datetime | None:
    zone = m.group("zone")
    try:
        if zone == "Z":
            offset: tzinfo = timezone.utc
        else:
            hours, minutes = int(zone[1:3]), int(zone[4:6])
            if minutes >= 60:
                return None
            delta = timedelta(hours=hours, minutes=minutes)
            offset = timezone(-delta if zone[0] == "-" else delta)
        return datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            _micros(m.group("fraction")),
            tzinfo=offset,
        )
    except ValueError:
        # Right shape, impossible fields: let later recognizers try
        return None


def _local_datetime(m: re.Match[str], moment: Moment) -> datetime | None:
    try:
        naive = datetime(
            int(m.group("year")),
            int(m.group("month")),
            int(m.group("day")),
            int(m.group("hour")),
            int(m.group("minute")),
            int(m.group("second")),
            _micros(m.group("fraction")),
        )
    except ValueError:
        return None
    return localize(naive, moment.tz)


def _date(m: re.Match[str], moment: Moment) -> datetime:
    return from_fields(
        moment.tz, int(m.group("year")), int(m.group("month")), int(m.group("day"))
    )


def _time_of_day(m: re.Match[str], moment: Moment) -> datetime:
    today = moment.now
    return from_fields(
        moment.tz,
        today.year,
        today.month,
        today.day,
        int(m.group("hour")),
        int(m.group("minute")),
        int(m.group("second")),
    )


# =============================================================================
# Months and weeks
# =============================================================================


def _months_from_now(delta: int, moment: Moment) -> datetime:
    year, month = add_months(moment.now.year, moment.now.month, delta)
    return from_fields(moment.tz, year, month, 1)


def _this_month(m: re.Match[str], moment: Moment) -> datetime:
    return truncate_month(moment.now, moment.tz)


def _last_month(m: re.Match[str], moment: Moment) -> datetime:
    return _months_from_now(-1, moment)


def _next_month(m: re.Match[str], moment: Moment) -> datetime:
    return _months_from_now(1, moment)


def _months_ago(m: re.Match[str], moment: Moment) -> datetime:
    return _months_from_now(-int(m.group("n")), moment)


def _months_later(m: re.Match[str], moment: Moment) -> datetime:
    return _months_from_now(int(m.group("n")), moment)


def _this_week(m: re.Match[str], moment: Moment) -> datetime:
    return truncate_week(moment.now, moment.tz)


def _last_week(m: re.Match[str], moment: Moment) -> datetime:
    monday = truncate_week(moment.now, moment.tz)
    return from_fields(moment.tz, monday.year, monday.month, monday.day - 7)


# =============================================================================
# Days and hours
# =============================================================================


def _days_from_today(delta: int, moment: Moment) -> datetime:
    """Local midnight *delta* calendar days from today.

    Days are counted on the calendar, not as multiples of 24 hours, so
    across a DST change the result can differ from
    ``truncate_day(now - delta * 24h)``. At 00:30 on the day after a
    spring-forward change, 24 hours earlier falls two dates back, while
    ``yesterday`` is still the previous date.
    """
    today = moment.now
    return from_fields(moment.tz, today.year, today.month, today.day + delta)


def _days_ago(m: re.Match[str], moment: Moment) -> datetime:
    return _days_from_today(-int(m.group("n")), moment)


def _yesterday(m: re.Match[str], moment: Moment) -> datetime:
    return _days_from_today(-1, moment)


def _today(m: re.Match[str], moment: Moment) -> datetime:
    return truncate_day(moment.now, moment.tz)


def _tomorrow(m: re.Match[str], moment: Moment) -> datetime:
    return _days_from_today(1, moment)


def _days_later(m: re.Match[str], moment: Moment) -> datetime:
    return _days_from_today(int(m.group("n")), moment)


def _hours_ago(m: re.Match[str], moment: Moment) -> datetime:
    then = shift(moment.now, timedelta(hours=-int(m.group("n"))), moment.tz)
    return truncate_hour(then, moment.tz)


def _hours_later(m: re.Match[str], moment: Moment) -> datetime:
    then = shift(moment.now, timedelta(hours=int(m.group("n"))), moment.tz)
    return truncate_hour(then, moment.tz)


# =============================================================================
# "now" expressions
# =============================================================================


def _now(m: re.Match[str], moment: Moment) -> datetime:
    return moment.now


def _now_with_days(m: re.Match[str], moment: Moment) -> datetime:
    delta = timedelta(hours=24 * int(m.group("n")))
    if m.group("sign") == "-":
        delta = -delta
    return shift(moment.now, delta, moment.tz)


def _now_with_duration(m: re.Match[str], moment: Moment) -> datetime:
    delta = to_timedelta(parse_duration(m.group("duration").strip()))
    if m.group("sign") == "-":
        delta = -delta
    return shift(moment.now, delta, moment.tz)


_NOW = r"\s*now\s*(?:\(\s*\))?"

RECOGNIZERS: tuple[Recognizer, ...] = (
    Recognizer(
        "rfc3339",
        _compile(
            r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
            r"T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
            r"(?:\.(?P<fraction>\d+))?(?P<zone>Z|[+-]\d{2}:\d{2})"
        ),
        _rfc3339,
        "2015-05-14T01:02:33Z",
        anchored=True,
    ),
    Recognizer(
        "datetime",
        _compile(
            r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"
            r" (?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
            r"(?:\.(?P<fraction>\d+))?"
        ),
        _local_datetime,
        "2015-05-14 01:02:33",
        anchored=True,
    ),
    Recognizer(
        "date",
        _compile(r"(?P<year>\d{4})-(?P<month>\d{2})-(?P<day>\d{2})"),
        _date,
        "2015-05-14",
    ),
    Recognizer(
        "time",
        _compile(r"(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"),
        _time_of_day,
        "01:02:03",
    ),
    Recognizer("this-month", _compile(r"this\s+month"), _this_month, "this month"),
    Recognizer("last-month", _compile(r"last\s+month"), _last_month, "last month"),
    Recognizer("next-month", _compile(r"next\s+month"), _next_month, "next month"),
    Recognizer(
        "months-ago", _compile(r"(?P<n>\d+)\s+months?\s+ago"), _months_ago, "3 months ago"
    ),
    Recognizer(
        "months-later",
        _compile(r"(?P<n>\d+)\s+months?\s+later"),
        _months_later,
        "3 months later",
    ),
    Recognizer("this-week", _compile(r"this\s+week"), _this_week, "this week"),
    Recognizer("last-week", _compile(r"last\s+week"), _last_week, "last week"),
    Recognizer(
        "days-ago", _compile(r"(?P<n>\d+)\s+(?:d|days?)\s+ago"), _days_ago, "3 days ago"
    ),
    Recognizer("yesterday", _compile(r"yesterday"), _yesterday, "yesterday"),
    Recognizer("today", _compile(r"today"), _today, "today"),
    Recognizer("tomorrow", _compile(r"tomorrow"), _tomorrow, "tomorrow"),
    Recognizer(
        "days-later",
        _compile(r"(?P<n>\d+)\s+(?:d|days?)\s+later"),
        _days_later,
        "2 days later",
    ),
    Recognizer(
        "hours-ago", _compile(r"(?P<n>\d+)\s+(?:h|hours?)\s+ago"), _hours_ago, "1 hour ago"
    ),
    Recognizer(
        "hours-later",
        _compile(r"(?P<n>\d+)\s+(?:h|hours?)\s+later"),
        _hours_later,
        "6 hours later",
    ),
    Recognizer("now", _compile(_NOW + r"\s*"), _now, "now", anchored=True),
    Recognizer(
        "now-days",
        _compile(_NOW + r"\s+(?P<sign>[+-])\s+(?P<n>\d+)\s*(?:d|days?)\s*"),
        _now_with_days,
        "now + 2 d",
        anchored=True,
    ),
    Recognizer(
        "now-duration",
        _compile(_NOW + r"\s+(?P<sign>[+-])\s+(?P<duration>.*)"),
        _now_with_duration,
        "now - 1h30m",
        anchored=True,
        field="duration",
    ),
)
