"""Core parsing, clock and configuration for human-time."""

from .clock import Clock, FixedClock, SystemClock
from .duration import parse_duration
from .exceptions import (
    ConfigError,
    DurationError,
    HumanTimeError,
    MalformedSubfieldError,
    ParseError,
    UnrecognizedInputError,
)
from .parser import EPOCH, Match, Parser, explain, parse, try_parse

__all__ = [
    # Exceptions
    "ConfigError",
    "DurationError",
    "HumanTimeError",
    "MalformedSubfieldError",
    "ParseError",
    "UnrecognizedInputError",
    # Clocks
    "Clock",
    "FixedClock",
    "SystemClock",
    # Parsing
    "EPOCH",
    "Match",
    "Parser",
    "explain",
    "parse",
    "parse_duration",
    "try_parse",
]
