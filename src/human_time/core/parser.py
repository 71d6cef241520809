"""Parse human-friendly date/time expressions into instants."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone

from human_time.core.calendar import to_local
from human_time.core.clock import Clock, SystemClock
from human_time.core.exceptions import (
    MalformedSubfieldError,
    ParseError,
    UnrecognizedInputError,
)
from human_time.core.recognizers import RECOGNIZERS, Moment, Recognizer

logger = logging.getLogger(__name__)

# Returned by try_parse() alongside an error
EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


@dataclass(frozen=True)
class Match:
    """A successful parse and the recognizer that produced it."""

    recognizer: str
    value: str
    instant: datetime


class Parser:
    """Turns expressions like ``"3 days ago"`` or ``"now - 90m"`` into datetimes.

    Recognizers are tried in priority order; the first one that matches
    decides the result. Most phrase recognizers match anywhere in the input
    (``"since yesterday"`` is ``yesterday``). Absolute timestamps and the
    ``now`` family always require the whole input.

    Attributes:
        clock: Source of the current instant and local zone.
        anchored: Require every recognizer to match the whole input.
    """

    def __init__(
        self,
        clock: Clock | None = None,
        *,
        anchored: bool = False,
        recognizers: tuple[Recognizer, ...] = RECOGNIZERS,
    ) -> None:
        self.clock = clock if clock is not None else SystemClock()
        self.anchored = anchored
        self.recognizers = recognizers

    def explain(self, value: str) -> Match:
        """Parse *value* and report which recognizer matched.

        Raises:
            UnrecognizedInputError: If no recognizer matches.
            MalformedSubfieldError: If a recognizer matches but a number or
                duration inside it cannot be used.
        """
        # Read the clock once so every recognizer sees the same instant and zone.
        # Calendar fields are read from now, so it must be expressed in tz.
        tz = self.clock.tz
        moment = Moment(now=to_local(self.clock.now(), tz), tz=tz)

        for recognizer in self.recognizers:
            match = recognizer.match(value, self.anchored)
            if match is None:
                continue

            try:
                instant = recognizer.handler(match, moment)
            except (ValueError, OverflowError) as e:
                logger.debug(f"Recognizer {recognizer.name} failed on {value!r}: {e}")
                raise MalformedSubfieldError(value, recognizer.field, e) from e

            if instant is None:
                continue

            logger.debug(f"Parsed {value!r} with {recognizer.name}: {instant.isoformat()}")
            return Match(recognizer=recognizer.name, value=value, instant=instant)

        logger.debug(f"No recognizer matched {value!r}")
        raise UnrecognizedInputError(value)

    def parse(self, value: str) -> datetime:
        """Parse *value* into a timezone-aware datetime.

        Raises:
            ParseError: If *value* cannot be parsed.
        """
        return self.explain(value).instant

    def try_parse(self, value: str) -> tuple[datetime, ParseError | None]:
        """Parse without raising.

        Returns:
            ``(instant, None)`` on success, ``(EPOCH, error)`` on failure.
            Check the error before using the instant.
        """
        try:
            return self.parse(value), None
        except ParseError as e:
            return EPOCH, e


def parse(value: str, clock: Clock | None = None, *, anchored: bool = False) -> datetime:
    """Parse *value* against *clock* (the system clock by default)."""
    return Parser(clock, anchored=anchored).parse(value)


def try_parse(
    value: str, clock: Clock | None = None, *, anchored: bool = False
) -> tuple[datetime, ParseError | None]:
    """Like :func:`parse` but returns ``(EPOCH, error)`` instead of raising."""
    return Parser(clock, anchored=anchored).try_parse(value)


def explain(value: str, clock: Clock | None = None, *, anchored: bool = False) -> Match:
    """Like :func:`parse` but also reports the matching recognizer."""
    return Parser(clock, anchored=anchored).explain(value)
