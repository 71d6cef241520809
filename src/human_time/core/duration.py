"""Duration literals such as ``90m``, ``1h30m`` or ``-1.5h``.

Grammar: an optional sign, then either the bare literal ``0`` or one or
more ``<number><unit>`` components. A number is decimal digits with an
optional fraction (``1.5``, ``.5``, ``2.``). Units are ``ns``, ``us``
(also ``µs``/``μs``), ``ms``, ``s``, ``m`` and ``h``.
"""

import re
from datetime import timedelta

from human_time.core.exceptions import DurationError

NANOSECOND = 1
MICROSECOND = 1000 * NANOSECOND
MILLISECOND = 1000 * MICROSECOND
SECOND = 1000 * MILLISECOND
MINUTE = 60 * SECOND
HOUR = 60 * MINUTE

_UNITS: dict[str, int] = {
    "ns": NANOSECOND,
    "us": MICROSECOND,
    "µs": MICROSECOND,  # micro sign
    "μs": MICROSECOND,  # greek mu
    "ms": MILLISECOND,
    "s": SECOND,
    "m": MINUTE,
    "h": HOUR,
}

# Signed 64-bit nanoseconds, about 292 years
_MAX_NANOSECONDS = 2**63 - 1

_COMPONENT_RE = re.compile(r"([0-9]*)(?:\.([0-9]*))?([^0-9.]*)")


def parse_duration(text: str) -> int:
    """Parse a duration literal into integer nanoseconds.

    Raises:
        DurationError: If *text* is not a valid duration literal.
    """
    rest = text
    negative = False
    if rest[:1] in ("-", "+"):
        negative = rest[0] == "-"
        rest = rest[1:]

    if rest == "0":
        return 0
    if not rest:
        raise DurationError(f"invalid duration {text!r}")

    total = 0
    pos = 0
    while pos < len(rest):
        match = _COMPONENT_RE.match(rest, pos)
        whole, frac, unit = match.group(1), match.group(2), match.group(3)

        if not whole and not frac:
            # Covers a leading unit ("h") and a bare dot (".s")
            raise DurationError(f"invalid duration {text!r}")
        if not unit:
            raise DurationError(f"missing unit in duration {text!r}")
        if unit not in _UNITS:
            raise DurationError(f"unknown unit {unit!r} in duration {text!r}")

        scale = _UNITS[unit]
        value = int(whole or "0") * scale
        if frac:
            value += int(frac) * scale // 10 ** len(frac)

        total += value
        if total > _MAX_NANOSECONDS + (1 if negative else 0):
            raise DurationError(f"invalid duration {text!r}")
        pos = match.end()

    return -total if negative else total


def to_timedelta(nanoseconds: int) -> timedelta:
    """Convert nanoseconds to a timedelta, truncating toward zero."""
    micros = abs(nanoseconds) // MICROSECOND
    delta = timedelta(microseconds=micros)
    return -delta if nanoseconds < 0 else delta
