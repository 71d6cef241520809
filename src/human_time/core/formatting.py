"""Rendering parsed instants for output."""

from datetime import datetime, timedelta, timezone

from human_time.core.config import OUTPUT_FORMATS

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def format_rfc3339(instant: datetime) -> str:
    """RFC 3339 text with ``Z`` for UTC and fractional seconds only when set."""
    text = instant.isoformat(timespec="microseconds" if instant.microsecond else "seconds")
    if instant.utcoffset() == timedelta(0):
        text = text[: -len("+00:00")] + "Z"
    return text


def format_epoch(instant: datetime) -> str:
    """Seconds since the Unix epoch; fractional only when needed."""
    micros = (instant - _EPOCH) // timedelta(microseconds=1)
    sign = "-" if micros < 0 else ""
    seconds, fraction = divmod(abs(micros), 1_000_000)
    if fraction:
        return f"{sign}{seconds}.{fraction:06d}"
    return f"{sign}{seconds}"


def format_instant(instant: datetime, fmt: str = "iso") -> str:
    """Render *instant* as ``iso``, ``rfc3339`` or ``epoch``."""
    if fmt == "iso":
        return instant.isoformat()
    if fmt == "rfc3339":
        return format_rfc3339(instant)
    if fmt == "epoch":
        return format_epoch(instant)
    raise ValueError(f"Unknown output format: {fmt}. Available: {list(OUTPUT_FORMATS)}")
